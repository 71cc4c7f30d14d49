"""Catalog Media Package — media association and visibility engine for catalog entities.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
