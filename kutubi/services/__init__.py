"""Services Layer — domain operations over the resilient Gemini client.

Invariants:
    - Handlers split by concern (max 4 operations each)
    - Empty input returns a fixed default without any model call
    - Each operation performs exactly one invoke (analysis adds one concurrent categorize)

Design Decisions:
    - One handler file per concern for locality (ADR: no god objects)
"""
