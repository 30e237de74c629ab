from __future__ import annotations

import logging
import uuid

from chatroom_service.application.dto.message import MessageContentCommand, recipient_violations
from chatroom_service.application.dto.violations import FieldViolation
from chatroom_service.application.exceptions import NotFoundError, ValidationError
from chatroom_service.application.policies.permissions import assert_message_owner
from chatroom_service.application.policies.visibility import filter_visible
from chatroom_service.application.ports.clock import Clock
from chatroom_service.application.uow import UnitOfWork
from chatroom_service.domain.entities.message import Message

logger = logging.getLogger(__name__)


def _parse_message_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except (TypeError, ValueError) as exc:
        raise NotFoundError("Message not found") from exc


def _validate(command: MessageContentCommand) -> None:
    violations = command.validate()
    if violations:
        raise ValidationError(violations)


async def post_message(
    sender: str | None,
    command: MessageContentCommand,
    clock: Clock,
    uow: UnitOfWork,
) -> Message:
    if not sender or not await uow.participants.exists(sender):
        raise ValidationError([FieldViolation("user", "is not a participant of the room")])
    _validate(command)
    assert command.to is not None and command.text is not None

    msg = Message(
        id=uuid.uuid4(),
        sender=sender,
        to=command.to,
        text=command.text,
        type=command.resolved_type(),
        created_at=clock.now(),
    )
    msg = await uow.messages_w.append(msg)
    await uow.commit()
    return msg


async def list_messages(
    viewer: str | None,
    limit: int | None,
    uow: UnitOfWork,
) -> list[Message]:
    """The viewer's feed: the shared log filtered for visibility, then truncated."""
    log = await uow.messages.list_messages()
    return filter_visible(log, viewer, limit)


async def edit_message(
    message_id: str,
    requester: str | None,
    command: MessageContentCommand,
    uow: UnitOfWork,
) -> None:
    _validate(command)
    assert command.to is not None and command.text is not None

    mid = _parse_message_id(message_id)
    current = assert_message_owner(await uow.messages.get_by_id(mid), requester)
    new_type = command.resolved_type(current.type)
    # An edit that keeps a private type may still retarget it at everyone
    violations = recipient_violations(command.to, new_type)
    if violations:
        raise ValidationError(violations)

    updated = await uow.messages_w.update_owned(
        current.id,
        current.sender,
        to=command.to,
        text=command.text,
        type=new_type,
    )
    if not updated:
        # Nothing changed, or the message vanished in between
        raise NotFoundError("Message not modified")
    await uow.commit()


async def delete_message(
    message_id: str,
    requester: str | None,
    uow: UnitOfWork,
) -> None:
    mid = _parse_message_id(message_id)
    current = assert_message_owner(await uow.messages.get_by_id(mid), requester)

    if not await uow.messages_w.delete_owned(current.id, current.sender):
        raise NotFoundError("Message not found")
    await uow.commit()
    logger.debug("Message %s deleted by %s", current.id, current.sender)
