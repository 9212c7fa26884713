"""Todo API Package - CRUD service over a single in-memory Todo entity.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
