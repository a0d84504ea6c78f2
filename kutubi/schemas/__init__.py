"""Pydantic Schemas — request/response validation for API endpoints and model results.

Invariants:
    - Schemas validate at system boundaries (user input, decoded model output)
    - Domain types from core/ used for bounded values

Design Decisions:
    - Model results validated in strict mode: "3" is not an integer index (ADR: shape fidelity)
"""
