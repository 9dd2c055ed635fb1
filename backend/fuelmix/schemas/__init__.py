"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain rules (percentage sum) live in core/, not here

Design Decisions:
    - Field-level constraints only: type, finiteness, range (ADR: framework boundary)
"""
