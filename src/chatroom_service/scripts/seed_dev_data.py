"""Seed development data: a few participants chatting in the room."""
from __future__ import annotations

import asyncio
import logging

from chatroom_service.application.dto.message import MessageContentCommand
from chatroom_service.application.dto.participant import RegisterParticipantCommand
from chatroom_service.application.exceptions import ConflictError
from chatroom_service.application.ports.clock import SystemClock
from chatroom_service.config import settings
from chatroom_service.domain.value_objects.enums import MessageType
from chatroom_service.domain.value_objects.room import BROADCAST_TARGET
from chatroom_service.infrastructure.db.session import create_engine, create_session_factory
from chatroom_service.infrastructure.db.uow import SqlAlchemyUoWFactory
from chatroom_service.services import message_service, participant_service

logger = logging.getLogger(__name__)


async def seed() -> None:
    engine = create_engine(settings)
    uow_factory = SqlAlchemyUoWFactory(create_session_factory(engine))
    clock = SystemClock()

    try:
        for name in ("Alice", "Bob"):
            async with uow_factory() as uow:
                try:
                    await participant_service.register(RegisterParticipantCommand(name), clock, uow)
                except ConflictError:
                    logger.info("Participant %s already present", name)

        messages_data = [
            ("Alice", BROADCAST_TARGET, "Oi, pessoal!", MessageType.MESSAGE),
            ("Bob", BROADCAST_TARGET, "Oi, Alice!", MessageType.MESSAGE),
            ("Alice", "Bob", "Tudo certo por aí?", MessageType.PRIVATE_MESSAGE),
        ]
        for sender, to, text, msg_type in messages_data:
            async with uow_factory() as uow:
                await message_service.post_message(
                    sender, MessageContentCommand(to=to, text=text, type=msg_type), clock, uow,
                )

        logger.info("Seeded room with %d messages", len(messages_data))
    finally:
        await engine.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
