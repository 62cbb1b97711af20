#!/usr/bin/env python3
"""
Reset the breed table of the configured database.

By default the table is emptied, the id counter restarted and the three
starter breeds inserted again. With --empty the table is only cleared.

Usage:
  python scripts/reset_db.py [--empty] [--keep-ids]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dog_breeds.application.use_cases.breeds import reset_breeds
from dog_breeds.config.settings import get_settings
from dog_breeds.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
    create_session_factory,
)


async def reset_database(*, empty_only: bool, keep_ids: bool) -> int:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        await create_schema(engine)
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            if empty_only:
                await reset_breeds.clear(uow, reset_ids=not keep_ids)
                return 0
            return await reset_breeds.reseed(uow)
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Clear and re-seed the breed table")
    parser.add_argument("--empty", action="store_true", help="Only clear the table")
    parser.add_argument(
        "--keep-ids",
        action="store_true",
        help="With --empty, keep the id counter so old ids are never handed out again",
    )
    args = parser.parse_args()
    inserted = asyncio.run(reset_database(empty_only=args.empty, keep_ids=args.keep_ids))
    if args.empty:
        print(f"🧹 Breed table cleared ({get_settings().database_url})")
    else:
        print(f"🌱 Breed table reset with {inserted} starter breeds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
