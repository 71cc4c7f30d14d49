"""Core Layer — pure catalog rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: limits, batch-field validation
      and visibility derivation are testable without a database
"""
