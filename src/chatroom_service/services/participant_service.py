from __future__ import annotations

import logging
import uuid

from chatroom_service.application.dto.participant import RegisterParticipantCommand
from chatroom_service.application.exceptions import ConflictError, ValidationError
from chatroom_service.application.ports.clock import Clock
from chatroom_service.application.uow import UnitOfWork
from chatroom_service.domain.entities.message import Message
from chatroom_service.domain.entities.participant import Participant
from chatroom_service.domain.value_objects.enums import MessageType
from chatroom_service.domain.value_objects.room import ARRIVAL_TEXT, BROADCAST_TARGET

logger = logging.getLogger(__name__)


async def register(
    command: RegisterParticipantCommand,
    clock: Clock,
    uow: UnitOfWork,
) -> Participant:
    """Add a participant to the room and announce the arrival.

    The participant row and the arrival status message are committed together.
    """
    violations = command.validate()
    if violations:
        raise ValidationError(violations)
    assert command.name is not None

    now = clock.now()
    participant = Participant(name=command.name, last_seen=now)
    if not await uow.participants_w.add_if_absent(participant):
        raise ConflictError(f"Name '{command.name}' is already in use")

    await uow.messages_w.append(
        Message(
            id=uuid.uuid4(),
            sender=participant.name,
            to=BROADCAST_TARGET,
            text=ARRIVAL_TEXT,
            type=MessageType.STATUS,
            created_at=now,
        )
    )
    await uow.commit()
    logger.info("Participant %s joined", participant.name)
    return participant


async def list_participants(uow: UnitOfWork) -> list[Participant]:
    return await uow.participants.list_participants()
