"""Per-viewer read model over the shared message log."""
from __future__ import annotations

from collections.abc import Iterable

from chatroom_service.domain.entities.message import Message


def is_visible_to(message: Message, viewer: str | None) -> bool:
    """Public and status messages are visible to all; private ones only to their two ends."""
    if not message.is_private:
        return True
    if not viewer:
        return False
    return viewer in (message.sender, message.to)


def filter_visible(
    messages: Iterable[Message],
    viewer: str | None,
    limit: int | None = None,
) -> list[Message]:
    """Return the messages ``viewer`` may see, oldest first.

    The limit is applied after filtering, so a viewer always gets up to
    ``limit`` messages they are allowed to read.
    """
    visible = [m for m in messages if is_visible_to(m, viewer)]
    if limit is not None and limit > 0:
        return visible[-limit:]
    return visible


def parse_limit(raw: str | int | None) -> int | None:
    """Interpret a ``limit`` query value; anything unusable means no limit."""
    if raw is None:
        return None
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return None
    return limit if limit > 0 else None
