"""Create the campus tables. Run directly with: python -m app.db.init_db"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

import app.core.models  # noqa: F401  (registers every relation on Base.metadata)
from app.db.session import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


async def drop_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def main() -> None:
    from app.db.session import engine

    await create_tables(engine)
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
