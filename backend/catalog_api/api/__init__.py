"""API Layer - FastAPI routes, dependencies, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - Every response body is JSON, every failure uses the error envelope

Design Decisions:
    - Thin routes delegate checks to core/ and storage to infrastructure/
"""
