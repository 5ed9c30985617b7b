"""Script to initialize database tables."""

import asyncio

from slot_reservation.infrastructure.database.connection import DatabaseManager
from slot_reservation.infrastructure.database.models import Base
from slot_reservation.presentation.api.config import get_settings


async def create_tables(database_manager: DatabaseManager) -> None:
    """Create all database tables."""
    async with database_manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    settings = get_settings()
    database_manager = DatabaseManager(settings.database_url, echo=True, ssl=settings.database_ssl)
    await database_manager.connect()

    try:
        await create_tables(database_manager)
        print("✅ Database tables created successfully!")
    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        raise
    finally:
        await database_manager.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
