"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return the Envelope shape (health probes excepted)

Design Decisions:
    - Thin routes delegate to RequestDispatch (ADR: impureim sandwich)
"""
