"""Cheese Schemas — public response models for the catalog endpoints.

Invariants:
    - CheeseSummary fields mirror presenter.LIST_FIELDS
    - CheeseDetail adds only the computed summary
    - No timestamp fields exposed
"""

from pydantic import BaseModel


class CheeseSummary(BaseModel):
    """Cheese as it appears in the list endpoint."""
    id: int
    name: str
    price: int | float
    is_best_seller: bool


class CheeseDetail(CheeseSummary):
    """Cheese as returned by the detail endpoint."""
    summary: str


class NotFoundResponse(BaseModel):
    """Body returned with a 404."""
    error: str
