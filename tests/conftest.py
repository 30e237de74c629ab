"""Shared test fixtures."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from types import TracebackType
from uuid import UUID

import pytest

from chatroom_service.application.exceptions import StoreError
from chatroom_service.domain.entities.message import Message
from chatroom_service.domain.entities.participant import Participant
from chatroom_service.domain.value_objects.enums import MessageType
from chatroom_service.domain.value_objects.room import BROADCAST_TARGET

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = T0) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def make_participant(name: str = "Alice", *, last_seen: datetime = T0) -> Participant:
    return Participant(name=name, last_seen=last_seen)


def make_message(
    *,
    sender: str = "Alice",
    to: str = BROADCAST_TARGET,
    text: str = "hello",
    type: str = MessageType.MESSAGE,
    created_at: datetime = T0,
    seq: int | None = None,
) -> Message:
    return Message(
        id=uuid.uuid4(),
        sender=sender,
        to=to,
        text=text,
        type=type,
        created_at=created_at,
        seq=seq,
    )


@dataclass
class FakeParticipantReader:
    _store: dict[str, Participant] = field(default_factory=dict)

    async def get(self, name: str) -> Participant | None:
        return self._store.get(name)

    async def exists(self, name: str) -> bool:
        return name in self._store

    async def list_participants(self) -> list[Participant]:
        return list(self._store.values())


@dataclass
class FakeParticipantWriter:
    _reader: FakeParticipantReader
    _fail_on: set[str] = field(default_factory=set)

    async def add_if_absent(self, participant: Participant) -> bool:
        if participant.name in self._reader._store:
            return False
        self._reader._store[participant.name] = participant
        return True

    async def touch(self, name: str, ts: datetime) -> bool:
        current = self._reader._store.get(name)
        if current is None:
            return False
        self._reader._store[name] = replace(current, last_seen=ts)
        return True

    async def remove(self, name: str, *, last_seen_before: datetime | None = None) -> bool:
        if name in self._fail_on:
            raise StoreError("participants.remove failed")
        current = self._reader._store.get(name)
        if current is None:
            return False
        if last_seen_before is not None and current.last_seen > last_seen_before:
            return False
        del self._reader._store[name]
        return True


@dataclass
class FakeMessageReader:
    _messages: list[Message] = field(default_factory=list)

    async def list_messages(self, *, limit: int | None = None) -> list[Message]:
        if limit is not None:
            return self._messages[-limit:]
        return list(self._messages)

    async def get_by_id(self, message_id: UUID) -> Message | None:
        for m in self._messages:
            if m.id == message_id:
                return m
        return None


@dataclass
class FakeMessageWriter:
    _reader: FakeMessageReader
    _seq: int = 0

    async def append(self, message: Message) -> Message:
        self._seq += 1
        stored = replace(message, seq=self._seq)
        self._reader._messages.append(stored)
        return stored

    def _find_owned(self, message_id: UUID, sender: str) -> int | None:
        for i, m in enumerate(self._reader._messages):
            if m.id == message_id and m.sender == sender and not m.is_status:
                return i
        return None

    async def update_owned(
        self,
        message_id: UUID,
        sender: str,
        *,
        to: str,
        text: str,
        type: str,
    ) -> bool:
        idx = self._find_owned(message_id, sender)
        if idx is None:
            return False
        current = self._reader._messages[idx]
        updated = replace(current, to=to, text=text, type=type)
        if updated == current:
            return False
        self._reader._messages[idx] = updated
        return True

    async def delete_owned(self, message_id: UUID, sender: str) -> bool:
        idx = self._find_owned(message_id, sender)
        if idx is None:
            return False
        del self._reader._messages[idx]
        return True


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    participants: FakeParticipantReader = field(default_factory=FakeParticipantReader)
    participants_w: FakeParticipantWriter | None = None
    messages: FakeMessageReader = field(default_factory=FakeMessageReader)
    messages_w: FakeMessageWriter | None = None
    _committed: bool = False
    _rolled_back: bool = False

    def __post_init__(self) -> None:
        if self.participants_w is None:
            self.participants_w = FakeParticipantWriter(self.participants)
        if self.messages_w is None:
            self.messages_w = FakeMessageWriter(self.messages)

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        self._rolled_back = True

    async def __aenter__(self) -> FakeUoW:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()

    def factory(self):
        """A UoW factory that always hands out this same in-memory store."""
        return lambda: self


@pytest.fixture
def uow() -> FakeUoW:
    return FakeUoW()
