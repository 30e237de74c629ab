from __future__ import annotations

from dataclasses import dataclass

from chatroom_service.application.dto.violations import FieldViolation, require_text
from chatroom_service.domain.value_objects.room import BROADCAST_TARGET


@dataclass(frozen=True, slots=True)
class RegisterParticipantCommand:
    name: str | None

    def validate(self) -> list[FieldViolation]:
        violations = require_text("name", self.name)
        if not violations and self.name.strip() == BROADCAST_TARGET:
            violations.append(FieldViolation("name", "is reserved"))
        return violations
