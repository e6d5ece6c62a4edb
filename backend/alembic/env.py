"""Alembic environment for the cheeses schema.

The URL comes from cheese_api.config.Settings (DATABASE_URL or .env), so
migrations and the API always agree on the database and driver.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from cheese_api.config import get_settings
from cheese_api.db.base import Base
import cheese_api.models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, **kwargs)


def _upgrade_with(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _upgrade_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_upgrade_with)
    await engine.dispose()


database_url = get_settings().database_url

if context.is_offline_mode():
    _configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_upgrade_online(database_url))
