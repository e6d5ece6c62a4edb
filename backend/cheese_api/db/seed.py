"""Seed Data — populates an empty cheeses table with the demo catalog.

Usage::

    python -m cheese_api.db.seed

Invariants:
    - Idempotent: a table that already holds rows is left untouched
    - Uses DATABASE_URL from settings, same as the API
"""

import asyncio
import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cheese_api.config import get_settings
from cheese_api.db.base import Base
from cheese_api.db.session import create_session_factory
from cheese_api.infrastructure.observability import setup_logging
from cheese_api.models.cheese import Cheese

logger = logging.getLogger(__name__)

DEFAULT_CHEESES: tuple[dict, ...] = (
    {"name": "Cheddar", "price": Decimal("3"), "is_best_seller": True},
    {"name": "Pepperjack", "price": Decimal("4"), "is_best_seller": True},
    {"name": "Limburger", "price": Decimal("8"), "is_best_seller": False},
    {"name": "Brie", "price": Decimal("4.50"), "is_best_seller": False},
    {"name": "Gouda", "price": Decimal("5.25"), "is_best_seller": True},
)


async def seed_cheeses(
    session: AsyncSession, cheeses: tuple[dict, ...] = DEFAULT_CHEESES,
) -> int:
    """Insert cheeses if the table is empty. Returns the number inserted."""
    existing = await session.scalar(select(func.count()).select_from(Cheese))
    if existing:
        logger.info("Cheeses already seeded", extra={"count": existing})
        return 0
    session.add_all(Cheese(**attrs) for attrs in cheeses)
    await session.commit()
    logger.info("Seeded cheeses", extra={"count": len(cheeses)})
    return len(cheeses)


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    factory = create_session_factory(settings.database_url)
    async with factory() as session:
        if settings.database_create_tables:
            conn = await session.connection()
            await conn.run_sync(Base.metadata.create_all)
            await session.commit()
        await seed_cheeses(session)
        engine = session.bind
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
