"""Fixtures for tests running against a SQLite database file."""

import httpx
import pytest_asyncio

from slot_reservation.infrastructure.database.connection import DatabaseManager
from slot_reservation.infrastructure.database.models import Base, UserModel
from slot_reservation.infrastructure.services import ServiceFactory, set_service_factory
from slot_reservation.presentation.api.main import create_app

SEEDED_USERS = ["user_alice", "user_bob", "user_charlie", "user_dave"]


@pytest_asyncio.fixture
async def database_manager(tmp_path):
    """Create a fresh database with the demo users."""
    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'slots.db'}")
    await manager.connect()

    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with manager.get_session() as session:
        session.add_all(
            UserModel(id=user_id, name=user_id.split("_", 1)[1].title())
            for user_id in SEEDED_USERS
        )

    yield manager

    await manager.disconnect()


@pytest_asyncio.fixture
async def service_factory(database_manager):
    factory = ServiceFactory(database_manager)
    set_service_factory(factory)
    yield factory
    set_service_factory(None)


@pytest_asyncio.fixture
async def client(service_factory):
    """Create test HTTP client bound to the SQLite-backed services."""
    app = create_app(use_lifespan=False)
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
