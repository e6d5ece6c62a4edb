"""Cheese Routes — end-to-end through FastAPI, SQLAlchemy and the presenter.

Invariants:
    - GET /cheeses returns every row, in id order, with only the list fields
    - GET /cheeses/{id} adds summary; timestamps never leak
    - Unknown or unparseable id → 404 {"error": "Cheese not found"}
"""

from decimal import Decimal

from cheese_api.models.cheese import Cheese


async def test_list_returns_allow_listed_fields_in_store_order(client, seed_cheeses):
    res = await client.get("/cheeses")
    assert res.status_code == 200
    assert res.json() == [
        {"id": 1, "name": "Cheddar", "price": 3, "is_best_seller": True},
        {"id": 2, "name": "Brie", "price": 4.5, "is_best_seller": False},
        {"id": 3, "name": "Gouda", "price": 5.25, "is_best_seller": True},
    ]


async def test_list_empty_store_returns_empty_array(client):
    res = await client.get("/cheeses")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_omits_timestamps_and_summary(client, seed_cheeses):
    res = await client.get("/cheeses")
    for item in res.json():
        assert set(item) == {"id", "name", "price", "is_best_seller"}


async def test_show_returns_record_with_summary(client, seed_cheeses):
    res = await client.get("/cheeses/1")
    assert res.status_code == 200
    assert res.json() == {
        "id": 1,
        "name": "Cheddar",
        "price": 3,
        "is_best_seller": True,
        "summary": "Cheddar: $3",
    }


async def test_show_decimal_price_summary_matches_price(client, seed_cheeses):
    res = await client.get("/cheeses/2")
    body = res.json()
    assert body["price"] == 4.5
    assert body["summary"] == "Brie: $4.5"


async def test_show_never_includes_timestamps(client, seed_cheeses):
    for cheese in seed_cheeses:
        res = await client.get(f"/cheeses/{cheese.id}")
        assert res.status_code == 200
        assert "created_at" not in res.json()
        assert "updated_at" not in res.json()


async def test_show_missing_id_returns_404(client, seed_cheeses):
    res = await client.get("/cheeses/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Cheese not found"}


async def test_show_non_numeric_id_returns_404(client, seed_cheeses):
    res = await client.get("/cheeses/cheddar")
    assert res.status_code == 404
    assert res.json() == {"error": "Cheese not found"}


async def test_show_reads_rows_added_after_startup(client, test_db):
    cheese = Cheese(name="Stilton", price=Decimal("12.00"), is_best_seller=False)
    test_db.add(cheese)
    await test_db.commit()

    res = await client.get(f"/cheeses/{cheese.id}")
    assert res.json()["summary"] == "Stilton: $12"


async def test_show_id_beyond_column_range_returns_404(client, seed_cheeses):
    for raw in ("2147483648", "9223372036854775808", "99999999999999999999"):
        res = await client.get(f"/cheeses/{raw}")
        assert res.status_code == 404
        assert res.json() == {"error": "Cheese not found"}


async def test_show_signed_id_returns_404(client, seed_cheeses):
    res = await client.get("/cheeses/+1")
    assert res.status_code == 404
    assert res.json() == {"error": "Cheese not found"}
