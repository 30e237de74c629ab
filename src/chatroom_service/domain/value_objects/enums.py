from __future__ import annotations

from enum import StrEnum


class MessageType(StrEnum):
    MESSAGE = "message"
    PRIVATE_MESSAGE = "private_message"
    STATUS = "status"


# Types a participant may post or edit into; status is system-owned.
USER_MESSAGE_TYPES: frozenset[MessageType] = frozenset(
    {MessageType.MESSAGE, MessageType.PRIVATE_MESSAGE}
)
