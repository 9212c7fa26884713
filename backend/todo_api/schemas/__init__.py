"""Pydantic Schemas - request/response shapes for the HTTP boundary.

Invariants:
    - Schemas validate at the system boundary (request bodies)
    - Response schemas expose only the transfer shape of a record

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
