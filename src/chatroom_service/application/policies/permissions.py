from __future__ import annotations

from chatroom_service.application.exceptions import NotFoundError, UnauthorizedError
from chatroom_service.domain.entities.message import Message


def assert_message_owner(message: Message | None, requester: str | None) -> Message:
    """Raise if the message doesn't exist or the requester may not change it."""
    if message is None:
        raise NotFoundError("Message not found")

    if not requester or message.sender != requester:
        raise UnauthorizedError("Only the author can change this message")

    # Arrival/departure notices belong to the room, not to the participant
    if message.is_status:
        raise UnauthorizedError("Status messages cannot be changed")

    return message
