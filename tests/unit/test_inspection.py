"""
Unit Tests - Store Queries and Reporting
"""
import json
from datetime import datetime
from decimal import Decimal

import pytest

from dookon.database.models import Product, Store
from dookon.inspection.queries import (
    find_store_by_slug,
    list_bundles,
    list_products,
    list_promotions,
)
from dookon.inspection.report import format_records, serialize_record

from conftest import OTHER_STORE_ID, STORE_ID


class TestQueries:
    """Tests for store-scoped lookups"""

    @pytest.mark.asyncio
    async def test_find_store_by_slug(self, test_db, seeded_stores):
        store = await find_store_by_slug(test_db, "Sadiyaxonim")

        assert store is not None
        assert store.id == STORE_ID

    @pytest.mark.asyncio
    async def test_find_store_by_unknown_slug(self, test_db, seeded_stores):
        assert await find_store_by_slug(test_db, "missing") is None

    @pytest.mark.asyncio
    async def test_collections_are_scoped_to_store(self, test_db, seeded_stores):
        promotions = await list_promotions(test_db, STORE_ID)
        bundles = await list_bundles(test_db, STORE_ID)
        products = await list_products(test_db, STORE_ID)

        assert sorted(p.id for p in promotions) == ["promo-1", "promo-2"]
        assert [b.id for b in bundles] == ["bundle-1"]
        assert sorted(p.id for p in products) == ["prod-1", "prod-2"]

    @pytest.mark.asyncio
    async def test_other_store_collections(self, test_db, seeded_stores):
        promotions = await list_promotions(test_db, OTHER_STORE_ID)
        products = await list_products(test_db, OTHER_STORE_ID)

        assert [p.id for p in promotions] == ["promo-3"]
        assert [p.id for p in products] == ["prod-3"]

    @pytest.mark.asyncio
    async def test_unknown_store_id_gives_empty_list(self, test_db, seeded_stores):
        assert await list_products(test_db, "no-such-store") == []


class TestReport:
    """Tests for console rendering"""

    def test_serialize_record_columns_only(self):
        store = Store(id="s-1", name="Test", slug="test", created_at=datetime(2025, 1, 1, 12, 0))

        data = serialize_record(store)

        assert data == {
            "id": "s-1",
            "name": "Test",
            "slug": "test",
            "created_at": datetime(2025, 1, 1, 12, 0),
        }
        assert "promotions" not in data

    def test_format_records(self):
        product = Product(
            id="p-1",
            store_id="s-1",
            name="Non",
            barcode=None,
            price=Decimal("4000.00"),
            stock_quantity=3,
            unit="dona",
            active=True,
            created_at=datetime(2025, 1, 1, 12, 0),
        )

        text = format_records("Products:", [product])

        assert text.startswith("Products: [\n  {\n")
        rows = json.loads(text[len("Products: "):])
        assert rows[0]["price"] == "4000.00"
        assert rows[0]["created_at"] == "2025-01-01T12:00:00"
        assert rows[0]["barcode"] is None

    def test_format_empty(self):
        assert format_records("Products:", []) == "Products: []"
