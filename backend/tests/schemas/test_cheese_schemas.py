"""Cheese schemas — response models keep the public contract."""

import pytest
from pydantic import ValidationError

from cheese_api.core.presenter import LIST_FIELDS
from cheese_api.schemas.cheese import CheeseDetail, CheeseSummary


def test_summary_schema_fields_match_list_allow_list():
    assert tuple(CheeseSummary.model_fields) == LIST_FIELDS


def test_detail_schema_adds_summary_only():
    assert set(CheeseDetail.model_fields) - set(CheeseSummary.model_fields) == {"summary"}


def test_integer_price_stays_integer():
    cheese = CheeseSummary(id=1, name="Cheddar", price=3, is_best_seller=True)
    assert cheese.model_dump()["price"] == 3
    assert isinstance(cheese.price, int)


def test_extra_keys_are_dropped():
    cheese = CheeseSummary(
        id=1, name="Cheddar", price=3, is_best_seller=True,
        created_at="2026-01-01T00:00:00Z",
    )
    assert "created_at" not in cheese.model_dump()


def test_detail_requires_summary():
    with pytest.raises(ValidationError):
        CheeseDetail(id=1, name="Cheddar", price=3, is_best_seller=True)
