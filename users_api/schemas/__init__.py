"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas validate at the system boundary (API responses)
"""
