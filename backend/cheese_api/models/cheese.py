"""Cheese ORM — the single catalog entity.

Invariants:
    - id is an autoincrement integer primary key, assigned by the store
    - name and price are non-nullable
    - created_at / updated_at are store-managed and never serialized to clients

Design Decisions:
    - Numeric(10, 2) for price: exact currency amounts, presenter strips trailing zeros
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from cheese_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Cheese(Base):
    """A cheese for sale."""
    __tablename__ = "cheeses"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_best_seller: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Cheese id={self.id} name={self.name!r}>"
