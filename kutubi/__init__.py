"""Kutubi Application Package — Gemini-backed document processing for the Darisni library.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
