"""Infrastructure Layer — Gemini client lifecycle, credential storage, and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All remote calls wrapped with retry/validation/error mapping

Design Decisions:
    - Resilient wrapper over the raw SDK client (ADR: single responsibility)
"""
