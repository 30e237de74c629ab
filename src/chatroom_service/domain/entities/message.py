from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from chatroom_service.domain.value_objects.enums import MessageType


@dataclass(frozen=True, slots=True)
class Message:
    id: UUID
    sender: str
    to: str
    text: str
    type: str
    created_at: datetime
    seq: int | None = None  # assigned by the store on insert

    @property
    def is_status(self) -> bool:
        return self.type == MessageType.STATUS

    @property
    def is_private(self) -> bool:
        return self.type == MessageType.PRIVATE_MESSAGE

    @property
    def time(self) -> str:
        """Wall-clock display of ``created_at``, always rendered in UTC."""
        return self.created_at.astimezone(timezone.utc).strftime("%H:%M:%S")
