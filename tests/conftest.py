"""
Test Suite Configuration
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator, Dict, List

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from dookon.config import Settings
from dookon.database.connection import Database
from dookon.database.models import Base, Bundle, Product, Promotion, Store

STORE_ID = "336e9962-6295-4d0d-a373-7f710c474610"
OTHER_STORE_ID = "8f14e45f-ceea-467f-a0e6-4d2c1b5e7a10"


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings"""
    return Settings(APP_ENV="testing", DEBUG=True)


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory database with the schema created"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def database(test_engine: AsyncEngine) -> Database:
    """Database handle over the test engine"""
    return Database(test_engine)


@pytest_asyncio.fixture
async def test_db(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session"""
    async with database.session() as session:
        yield session


@pytest.fixture
def statements(test_engine: AsyncEngine) -> List[str]:
    """Records every SQL statement sent to the test engine"""
    seen: List[str] = []

    def record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(test_engine.sync_engine, "before_cursor_execute", record)
    yield seen
    event.remove(test_engine.sync_engine, "before_cursor_execute", record)


@pytest_asyncio.fixture
async def seeded_stores(database: Database) -> Dict[str, Store]:
    """Two stores, each with its own promotions, bundles and products"""
    created_at = datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)

    async with database.session() as session:
        main = Store(id=STORE_ID, name="Sadiyaxonim", slug="Sadiyaxonim", created_at=created_at)
        other = Store(id=OTHER_STORE_ID, name="Boshqa do'kon", slug="boshqa", created_at=created_at)
        session.add_all([main, other])
        await session.flush()

        session.add_all([
            Promotion(id="promo-1", store_id=STORE_ID, name="Navruz", discount_type="percent",
                      discount_value=Decimal("10.00"), created_at=created_at),
            Promotion(id="promo-2", store_id=STORE_ID, name="Weekend", discount_type="fixed",
                      discount_value=Decimal("5000.00"), active=False, created_at=created_at),
            Promotion(id="promo-3", store_id=OTHER_STORE_ID, name="Other promo",
                      discount_value=Decimal("15.00"), created_at=created_at),
            Bundle(id="bundle-1", store_id=STORE_ID, name="Nonushta to'plami",
                   price=Decimal("32000.00"), created_at=created_at),
            Bundle(id="bundle-2", store_id=OTHER_STORE_ID, name="Other bundle",
                   price=Decimal("1000.00"), created_at=created_at),
            Product(id="prod-1", store_id=STORE_ID, name="Non", barcode="4780001",
                    price=Decimal("4000.00"), stock_quantity=40, created_at=created_at),
            Product(id="prod-2", store_id=STORE_ID, name="Sut", barcode="4780002",
                    price=Decimal("12000.00"), stock_quantity=12, created_at=created_at),
            Product(id="prod-3", store_id=OTHER_STORE_ID, name="Choy",
                    price=Decimal("9000.00"), created_at=created_at),
        ])

    return {"main": main, "other": other}
