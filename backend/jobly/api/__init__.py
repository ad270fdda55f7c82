"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Authorization gates run as dependencies, before any repository call

Design Decisions:
    - Thin routes delegate to repositories (ADR: impureim sandwich)
"""
