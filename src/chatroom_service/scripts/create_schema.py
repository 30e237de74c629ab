"""One-time script: create the chat room tables."""
from __future__ import annotations

import asyncio
import logging

from chatroom_service.config import settings
from chatroom_service.infrastructure.db import models  # noqa: F401  (registers tables)
from chatroom_service.infrastructure.db.base import Base
from chatroom_service.infrastructure.db.session import create_engine

logger = logging.getLogger(__name__)


async def create_schema() -> None:
    engine = create_engine(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "Created tables %s in '%s'",
            ", ".join(sorted(Base.metadata.tables)),
            settings.DATABASE_NAME,
        )
    finally:
        await engine.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_schema())


if __name__ == "__main__":
    main()
