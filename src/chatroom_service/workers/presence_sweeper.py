"""Presence sweeper: periodically evicts participants that stopped sending heartbeats."""
from __future__ import annotations

import asyncio
import logging
from datetime import timedelta

from chatroom_service.application.ports.clock import Clock, SystemClock
from chatroom_service.application.uow import UnitOfWorkFactory
from chatroom_service.config import settings
from chatroom_service.infrastructure.db.session import create_engine, create_session_factory
from chatroom_service.infrastructure.db.uow import SqlAlchemyUoWFactory
from chatroom_service.services import presence_service

logger = logging.getLogger(__name__)


class PresenceSweeper:
    """Background task running one presence sweep every ``interval`` seconds."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        *,
        stale_after: float,
        interval: float,
        clock: Clock | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._stale_after = timedelta(seconds=stale_after)
        self._interval = interval
        self._clock = clock or SystemClock()
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        self._task = asyncio.create_task(self._run(), name="presence-sweeper")
        logger.info(
            "Presence sweeper started (stale_after=%.1fs, interval=%.1fs)",
            self._stale_after.total_seconds(),
            self._interval,
        )

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Presence sweeper stopped")

    async def sweep_once(self) -> list[str]:
        return await presence_service.sweep_inactive(
            self._uow_factory, self._clock, self._stale_after,
        )

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.sweep_once()
            except Exception:
                logger.exception("Presence sweeper loop error")


async def run_sweeper() -> None:
    engine = create_engine(settings)
    sweeper = PresenceSweeper(
        SqlAlchemyUoWFactory(create_session_factory(engine)),
        stale_after=settings.PRESENCE_STALE_SECONDS,
        interval=settings.PRESENCE_SWEEP_INTERVAL,
    )
    await sweeper.start()
    try:
        while True:
            await asyncio.sleep(3600)
    except asyncio.CancelledError:
        pass
    finally:
        await sweeper.stop()
        await engine.dispose()


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_sweeper())


if __name__ == "__main__":
    main()
