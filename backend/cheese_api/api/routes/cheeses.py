"""Cheese Routes — GET /cheeses and GET /cheeses/{cheese_id}.

Invariants:
    - Read-only endpoints, no request body, no query parameters
    - Missing or unparseable id → 404 {"error": "Cheese not found"} via global handler

Design Decisions:
    - cheese_id taken as str: coercion happens in core so a bad id is a 404,
      not a 400 validation error
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cheese_api.infrastructure.database import get_db
from cheese_api.infrastructure.cheese_repository import SqlCheeseRepository
from cheese_api.schemas.cheese import CheeseDetail, CheeseSummary, NotFoundResponse
from cheese_api.services.cheese_catalog import get_cheese, list_cheeses

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cheeses", tags=["cheeses"])


def get_cheese_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlCheeseRepository:
    return SqlCheeseRepository(db)


@router.get("", response_model=list[CheeseSummary])
async def index(repo: SqlCheeseRepository = Depends(get_cheese_repository)):
    """List every cheese."""
    return await list_cheeses(repo)


@router.get(
    "/{cheese_id}",
    response_model=CheeseDetail,
    responses={404: {"model": NotFoundResponse}},
)
async def show(
    cheese_id: str,
    repo: SqlCheeseRepository = Depends(get_cheese_repository),
):
    """Get one cheese with its summary line."""
    return await get_cheese(repo, cheese_id)
