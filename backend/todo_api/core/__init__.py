"""Core Layer - pure domain types, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
"""
