"""Cheese Catalog — list and fetch operations behind the HTTP routes.

Invariants:
    - Read-only: no commits, no writes
    - An identifier that can't be parsed behaves exactly like a missing row
"""

import logging

from cheese_api.core.errors import CheeseNotFoundError
from cheese_api.core.presenter import (
    parse_cheese_id, present_cheese_detail, present_cheese_list,
)
from cheese_api.core.repository_protocols import CheeseRepository

logger = logging.getLogger(__name__)


async def list_cheeses(repo: CheeseRepository) -> list[dict]:
    cheeses = await repo.list_all()
    logger.debug("Listed cheeses", extra={"count": len(cheeses)})
    return present_cheese_list(cheeses)


async def get_cheese(repo: CheeseRepository, raw_id: str) -> dict:
    """Fetch one cheese with its summary, or raise CheeseNotFoundError."""
    cheese_id = parse_cheese_id(raw_id)
    cheese = None
    if cheese_id is not None:
        cheese = await repo.find_by_id(cheese_id)
    if cheese is None:
        logger.info("Cheese not found", extra={"cheese_id": raw_id})
        raise CheeseNotFoundError(raw_id)
    return present_cheese_detail(cheese)
