"""Infrastructure Layer — database lifecycle and cross-cutting concerns.

Invariants:
    - Infrastructure never imports catalog rules from core/, only core/errors.py
    - Every storage failure leaves this layer as InternalError
"""
