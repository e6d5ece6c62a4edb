"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the presenter functions
      that consume the returned records are never async themselves
"""

from datetime import datetime
from typing import Protocol

from cheese_api.core.domain_types import CheeseId, Price


class CheeseLike(Protocol):
    """Structural contract for Cheese records handed to the presenter.

    Avoids coupling the presenter to the ORM model; tests pass plain
    dataclasses or SimpleNamespace objects.
    """
    id: int
    name: str
    price: Price
    is_best_seller: bool
    created_at: datetime | None
    updated_at: datetime | None


class CheeseRepository(Protocol):
    """Read-only contract for cheese persistence — implemented by shell."""
    async def list_all(self) -> list[CheeseLike]: ...
    async def find_by_id(self, cheese_id: CheeseId) -> CheeseLike | None: ...
