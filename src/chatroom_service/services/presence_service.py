"""Participant liveness: heartbeats and the inactivity sweep."""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta

from chatroom_service.application.exceptions import NotFoundError
from chatroom_service.application.ports.clock import Clock
from chatroom_service.application.uow import UnitOfWork, UnitOfWorkFactory
from chatroom_service.domain.entities.message import Message
from chatroom_service.domain.entities.participant import Participant
from chatroom_service.domain.value_objects.enums import MessageType
from chatroom_service.domain.value_objects.room import BROADCAST_TARGET, DEPARTURE_TEXT

logger = logging.getLogger(__name__)


async def heartbeat(name: str | None, clock: Clock, uow: UnitOfWork) -> None:
    if not name or not await uow.participants_w.touch(name, clock.now()):
        raise NotFoundError("Participant not found")
    await uow.commit()


async def sweep_inactive(
    uow_factory: UnitOfWorkFactory,
    clock: Clock,
    stale_after: timedelta,
) -> list[str]:
    """Evict every participant idle for at least ``stale_after``.

    Works on a snapshot of the registry and handles each stale participant in
    its own unit of work, so one failure never aborts the rest of the sweep.
    Returns the names actually evicted.
    """
    try:
        async with uow_factory() as uow:
            snapshot = await uow.participants.list_participants()
    except Exception:
        logger.exception("Presence sweep could not read participants")
        return []

    now = clock.now()
    cutoff = now - stale_after
    evicted: list[str] = []
    for participant in snapshot:
        if now - participant.last_seen < stale_after:
            continue
        try:
            if await _evict(participant, cutoff, clock, uow_factory):
                evicted.append(participant.name)
        except Exception:
            logger.exception("Failed to evict participant %s", participant.name)

    if evicted:
        logger.info("Presence sweep evicted %d participant(s): %s", len(evicted), ", ".join(evicted))
    return evicted


async def _evict(
    participant: Participant,
    cutoff: datetime,
    clock: Clock,
    uow_factory: UnitOfWorkFactory,
) -> bool:
    async with uow_factory() as uow:
        removed = await uow.participants_w.remove(participant.name, last_seen_before=cutoff)
        if not removed:
            logger.debug("Participant %s already gone or refreshed, skipping", participant.name)
            return False

        await uow.messages_w.append(
            Message(
                id=uuid.uuid4(),
                sender=participant.name,
                to=BROADCAST_TARGET,
                text=DEPARTURE_TEXT,
                type=MessageType.STATUS,
                created_at=clock.now(),
            )
        )
        await uow.commit()
    return True
