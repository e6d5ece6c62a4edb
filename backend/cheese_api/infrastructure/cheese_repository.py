"""SQL Cheese Repository — CheeseRepository backed by an AsyncSession.

Invariants:
    - Read-only: never adds, flushes, or commits
    - list_all() ordered by id so responses are stable across requests
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cheese_api.core.domain_types import CheeseId
from cheese_api.models.cheese import Cheese

logger = logging.getLogger(__name__)


class SqlCheeseRepository:
    """Reads Cheese rows through SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Cheese]:
        result = await self._db.execute(select(Cheese).order_by(Cheese.id))
        return list(result.scalars().all())

    async def find_by_id(self, cheese_id: CheeseId) -> Cheese | None:
        result = await self._db.execute(
            select(Cheese).where(Cheese.id == cheese_id),
        )
        return result.scalar_one_or_none()
