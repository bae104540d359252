"""API Layer - FastAPI routes, caller identity dependencies and error handlers.

Invariants:
    - Routers registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; all errors use the {"type", "message"} envelope
"""
