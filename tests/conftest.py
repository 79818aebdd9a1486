"""Shared pytest fixtures: a throwaway SQLite database with a small catalog."""

from dataclasses import dataclass
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from core.application.services import CheckoutService, OrderApplicationService, SalesReportingService
from core.data.models import Base, CategoryModel, ProductModel, UserModel
from core.data.repositories import SqlAlchemyProductCatalog, SqlAlchemyUserDirectory
from core.domain.entities import ShippingInfo
from core.infrastructure.adapters.payments import FakeGateway
from core.settings.sections.payments import PaymentSettings


@dataclass(frozen=True)
class SeedData:
    """Identifiers of the seeded rows."""
    category_id: str
    toy_car_id: str      # 9.99
    puzzle_id: str       # 25.00
    kite_id: str         # 5.00
    robot_id: str        # 10.00
    alice_id: str
    bob_id: str


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path):
    """Create test database engine backed by a file in tmp_path.

    A file (not :memory:) so that every session gets its own connection, the
    way the product lookups and the writing unit of work do in production.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}",
        poolclass=NullPool,
        echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enforce_foreign_keys(dbapi_connection, connection_record):
        # Same referential checks as PostgreSQL
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded(test_session_factory) -> SeedData:
    """Insert one category, four products and two users."""
    category = CategoryModel(name="Toys", icon="toy-icon", color="#ff0000")
    toy_car = ProductModel(name="Toy Car", price=Decimal("9.99"), category=category)
    puzzle = ProductModel(name="Puzzle", price=Decimal("25.00"), category=category)
    kite = ProductModel(name="Kite", price=Decimal("5.00"), category=category)
    robot = ProductModel(name="Robot", price=Decimal("10.00"), category=category)
    alice = UserModel(name="Alice", email="alice@example.com")
    bob = UserModel(name="Bob", email="bob@example.com")

    async with test_session_factory() as session:
        session.add_all([category, toy_car, puzzle, kite, robot, alice, bob])
        await session.commit()

    return SeedData(
        category_id=category.id,
        toy_car_id=toy_car.id,
        puzzle_id=puzzle.id,
        kite_id=kite.id,
        robot_id=robot.id,
        alice_id=alice.id,
        bob_id=bob.id,
    )


@pytest.fixture
def catalog(test_session_factory) -> SqlAlchemyProductCatalog:
    return SqlAlchemyProductCatalog(test_session_factory)


@pytest.fixture
def user_directory(test_session_factory) -> SqlAlchemyUserDirectory:
    return SqlAlchemyUserDirectory(test_session_factory)


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def payment_settings() -> PaymentSettings:
    return PaymentSettings(
        secret_key=None,
        currency="cad",
        success_url="https://shop.example.test/success",
        cancel_url="https://shop.example.test/cancel",
    )


@pytest.fixture
def order_service(test_session_factory, catalog, user_directory) -> OrderApplicationService:
    return OrderApplicationService(
        session_factory=test_session_factory, catalog=catalog, users=user_directory
    )


@pytest.fixture
def checkout_service(catalog, fake_gateway, payment_settings) -> CheckoutService:
    return CheckoutService(catalog=catalog, gateway=fake_gateway, settings=payment_settings)


@pytest.fixture
def sales_service(test_session_factory) -> SalesReportingService:
    return SalesReportingService(test_session_factory)


@pytest.fixture
def shipping() -> ShippingInfo:
    return ShippingInfo(
        shipping_address1="12 Maple Street",
        shipping_address2="Unit 4",
        city="Toronto",
        zip="M5V 2T6",
        country="Canada",
        phone="+1 416 555 0100",
    )


@pytest_asyncio.fixture
async def api_client(
    test_session_factory, order_service, checkout_service, sales_service
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the FastAPI app, wired to the test database and fake gateway."""
    from api.dependencies import (
        get_checkout_service,
        get_order_service,
        get_sales_service,
        get_session_factory,
        reset_dependencies,
    )
    from api.main import app

    app.dependency_overrides[get_session_factory] = lambda: test_session_factory
    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_checkout_service] = lambda: checkout_service
    app.dependency_overrides[get_sales_service] = lambda: sales_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
    reset_dependencies()
