"""Services Layer — transactional media managers, owner routing and visibility lifecycle.

Invariants:
    - Each public service call runs in exactly one write transaction (at most)
    - Owner-type routing goes through OwnerRegistry (explicit dict, no auto-discovery)
"""
