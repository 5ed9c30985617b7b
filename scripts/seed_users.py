"""Script to reset bookings and seed the demo users."""

import asyncio

from sqlalchemy import delete

from slot_reservation.infrastructure.database.connection import DatabaseManager
from slot_reservation.infrastructure.database.models import BookingModel, UserModel
from slot_reservation.presentation.api.config import get_settings

SEED_USERS = [
    {"id": "user_alice", "name": "Alice"},
    {"id": "user_bob", "name": "Bob"},
    {"id": "user_charlie", "name": "Charlie"},
    {"id": "user_dave", "name": "Dave"},
]


async def seed_users(database_manager: DatabaseManager) -> None:
    """Clear existing data and insert the demo users."""
    async with database_manager.get_session() as session:
        print("Clearing existing data...")
        # Bookings first, they reference users
        await session.execute(delete(BookingModel))
        await session.execute(delete(UserModel))

        print("Seeding users...")
        session.add_all(UserModel(**user) for user in SEED_USERS)

    print(f"Seeded {len(SEED_USERS)} users:")
    for user in SEED_USERS:
        print(f"  - {user['id']}: {user['name']}")


async def main() -> None:
    settings = get_settings()
    database_manager = DatabaseManager(settings.database_url, ssl=settings.database_ssl)
    await database_manager.connect()

    try:
        await seed_users(database_manager)
        print("\n✅ Seed completed successfully!")
    except Exception as e:
        print(f"❌ Seed failed: {e}")
        raise
    finally:
        await database_manager.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
