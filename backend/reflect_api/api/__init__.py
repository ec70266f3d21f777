"""API Layer — FastAPI routes, envelope rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is an envelope, including failures

Design Decisions:
    - Thin routes delegate to core handlers (functional core, imperative shell)
"""
