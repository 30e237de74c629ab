from __future__ import annotations

from chatroom_service.application.dto.violations import FieldViolation


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    pass


class UnauthorizedError(AppError):
    pass


class ConflictError(AppError):
    pass


class ValidationError(AppError):
    """Malformed or missing fields; carries every violated field rule."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = violations
        super().__init__("; ".join(str(v) for v in violations))


class StoreError(AppError):
    """Persistence failure. The detail is logged, never sent to clients."""
