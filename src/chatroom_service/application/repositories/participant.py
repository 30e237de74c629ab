from __future__ import annotations

from datetime import datetime
from typing import Protocol

from chatroom_service.domain.entities.participant import Participant


class ParticipantReader(Protocol):
    async def get(self, name: str) -> Participant | None: ...

    async def exists(self, name: str) -> bool: ...

    async def list_participants(self) -> list[Participant]: ...


class ParticipantWriter(Protocol):
    async def add_if_absent(self, participant: Participant) -> bool:
        """Insert participant. Return False if the name is already taken."""
        ...

    async def touch(self, name: str, ts: datetime) -> bool:
        """Set last_seen. Return False if the participant is absent."""
        ...

    async def remove(self, name: str, *, last_seen_before: datetime | None = None) -> bool:
        """Delete participant if still present (and still stale when a cutoff is given).

        Returns whether a row was actually removed.
        """
        ...
