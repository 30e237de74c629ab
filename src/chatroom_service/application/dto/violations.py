from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldViolation:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def require_text(field: str, value: str | None) -> list[FieldViolation]:
    if value is None:
        return [FieldViolation(field, "is required")]
    if not value.strip():
        return [FieldViolation(field, "must not be empty")]
    return []
