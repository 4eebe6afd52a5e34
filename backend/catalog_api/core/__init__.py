"""Core Layer - pure domain logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
