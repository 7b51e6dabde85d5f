"""Database seeder for the comments API."""
import asyncio
import argparse
import random
import time

from app.database import engine, async_session, Base
from app.stores import SqlCommentStore

USERNAMES = ["alice", "bob", "carol", "dmitry", "olga", "kenji", "amara", "lucas"]

TEXTS = [
    "Great write-up, thanks!",
    "Could you expand on the second point?",
    "Это тестовый комментарий",
    "Комментарий для проверки кодировки",
    "Works for me on the latest release.",
    "このコメントはテストです",
    "I disagree, but it is an interesting take.",
]


async def seed(count: int, reset: bool) -> None:
    print(f"Seeding {count} comments (reset={reset})")
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        store = SqlCommentStore(session)
        for i in range(count):
            await store.create(random.choice(USERNAMES), f"{random.choice(TEXTS)} #{i}")
        total = await store.count()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Comments in store: {total}")


def main():
    parser = argparse.ArgumentParser(description="Seed the comments database")
    parser.add_argument("-n", "--count", type=int, default=100, help="Number of comments to insert")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate the comments table first")
    args = parser.parse_args()
    asyncio.run(seed(args.count, args.reset))


if __name__ == "__main__":
    main()
