"""Cheese Presenter — projects cheese records into JSON-ready dicts.

Invariants:
    - Output keys come only from the per-endpoint allow-lists below
    - Store-managed timestamps (created_at, updated_at) never appear in output
    - summary is exactly name + ": $" + rendered price
    - Input order is preserved by present_cheese_list

Design Decisions:
    - Explicit allow-list tuples over model introspection: adding a column
      never leaks it to clients
    - Price rendered once and reused by summary, so the two never disagree
"""

from decimal import Decimal
from typing import Any, Callable, Iterable

from cheese_api.core.domain_types import (
    MAX_CHEESE_ID, CheeseId, Price, RenderedPrice,
)
from cheese_api.core.repository_protocols import CheeseLike


LIST_FIELDS: tuple[str, ...] = ("id", "name", "price", "is_best_seller")
DETAIL_FIELDS: tuple[str, ...] = LIST_FIELDS


def parse_cheese_id(raw: str) -> CheeseId | None:
    """Coerce a path identifier to a cheese id. None if it can't match any row.

    Only plain ASCII digits are accepted: "+1", "1abc" and "1.0" are treated
    as missing rather than cast leniently to 1. Values above MAX_CHEESE_ID
    can't exist in the id column, so they are rejected here instead of
    overflowing the driver.
    """
    raw = raw.strip()
    if not raw or not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    if value > MAX_CHEESE_ID:
        return None
    return CheeseId(value)


def render_price(price: Price) -> RenderedPrice:
    """Drop trailing fractional zeros: 3.00 -> 3, 4.50 -> 4.5."""
    value = Decimal(str(price))
    if value == value.to_integral_value():
        return int(value)
    return float(value.normalize())


# Fields whose stored value differs from the JSON value
FIELD_RENDERERS: dict[str, Callable[[Any], Any]] = {
    "price": render_price,
}


def cheese_summary(name: str, price: Price) -> str:
    return f"{name}: ${render_price(price)}"


def project(cheese: CheeseLike, only: Iterable[str]) -> dict:
    """Pick the allow-listed attributes off a record."""
    return {
        name: FIELD_RENDERERS.get(name, _identity)(getattr(cheese, name))
        for name in only
    }


def _identity(value: Any) -> Any:
    return value


def present_cheese_list(cheeses: Iterable[CheeseLike]) -> list[dict]:
    return [project(cheese, LIST_FIELDS) for cheese in cheeses]


def present_cheese_detail(cheese: CheeseLike) -> dict:
    out = project(cheese, DETAIL_FIELDS)
    out["summary"] = cheese_summary(cheese.name, cheese.price)
    return out
