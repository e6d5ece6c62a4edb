"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas describe the public contract; models are persistence

Design Decisions:
    - Separate from models: a new column never reaches clients without a schema change
"""
