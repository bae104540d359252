"""Core Layer - keys, tiers, authorization policy, errors and timestamps. No IO.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Everything except the RecordStore protocol is synchronous and pure
"""
