"""Infrastructure Layer - record store, DB sessions, and logging setup.

Invariants:
    - SQLAlchemy exceptions never cross this layer unmapped (core.errors.DatabaseError)
"""
