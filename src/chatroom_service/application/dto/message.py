from __future__ import annotations

from dataclasses import dataclass

from chatroom_service.application.dto.violations import FieldViolation, require_text
from chatroom_service.domain.value_objects.enums import USER_MESSAGE_TYPES, MessageType
from chatroom_service.domain.value_objects.room import BROADCAST_TARGET


def recipient_violations(to: str | None, type: str | None) -> list[FieldViolation]:
    """A private message needs a real participant on the other end."""
    if type == MessageType.PRIVATE_MESSAGE and to is not None and to.strip() == BROADCAST_TARGET:
        return [FieldViolation("to", "private messages cannot be sent to everyone")]
    return []


@dataclass(frozen=True, slots=True)
class MessageContentCommand:
    """Body of a post or an edit. ``type=None`` means "default" (post) or "keep" (edit)."""

    to: str | None
    text: str | None
    type: str | None = None

    def validate(self) -> list[FieldViolation]:
        violations = require_text("to", self.to) + require_text("text", self.text)
        if self.type is not None and self.type not in USER_MESSAGE_TYPES:
            allowed = ", ".join(sorted(USER_MESSAGE_TYPES))
            violations.append(FieldViolation("type", f"must be one of: {allowed}"))
        violations.extend(recipient_violations(self.to, self.type))
        return violations

    def resolved_type(self, current: str = MessageType.MESSAGE) -> str:
        return self.type if self.type is not None else current
