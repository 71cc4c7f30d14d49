"""Repositories — session-bound SQLAlchemy access for catalog entities and image associations.

Invariants:
    - Repositories never open, commit or roll back a transaction
    - A repository is usable only after with_session(db) has bound it
"""
