from __future__ import annotations

from typing import Protocol
from uuid import UUID

from chatroom_service.domain.entities.message import Message


class MessageReader(Protocol):
    async def list_messages(self, *, limit: int | None = None) -> list[Message]:
        """Raw log, oldest first. With a limit, only the most recent ``limit`` rows."""
        ...

    async def get_by_id(self, message_id: UUID) -> Message | None: ...


class MessageWriter(Protocol):
    async def append(self, message: Message) -> Message: ...

    async def update_owned(
        self,
        message_id: UUID,
        sender: str,
        *,
        to: str,
        text: str,
        type: str,
    ) -> bool:
        """Replace mutable fields of a non-status message owned by ``sender``.

        Returns False when nothing matched or nothing changed.
        """
        ...

    async def delete_owned(self, message_id: UUID, sender: str) -> bool: ...
