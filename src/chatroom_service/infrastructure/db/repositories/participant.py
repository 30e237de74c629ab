from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from chatroom_service.domain.entities.participant import Participant
from chatroom_service.infrastructure.db.mappers import participant as mapper
from chatroom_service.infrastructure.db.models.participant import ParticipantModel
from chatroom_service.infrastructure.db.repositories._errors import store_errors


class ParticipantReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, name: str) -> Participant | None:
        with store_errors("participants.get"):
            model = await self._session.get(ParticipantModel, name)
        return mapper.model_to_entity(model) if model else None

    async def exists(self, name: str) -> bool:
        stmt = select(ParticipantModel.name).where(ParticipantModel.name == name).limit(1)
        with store_errors("participants.exists"):
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_participants(self) -> list[Participant]:
        with store_errors("participants.list"):
            result = await self._session.execute(select(ParticipantModel))
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class ParticipantWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_if_absent(self, participant: Participant) -> bool:
        stmt = (
            pg_insert(ParticipantModel)
            .values(**mapper.entity_to_values(participant))
            .on_conflict_do_nothing(index_elements=[ParticipantModel.name])
            .returning(ParticipantModel.name)
        )
        with store_errors("participants.add"):
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def touch(self, name: str, ts: datetime) -> bool:
        stmt = (
            update(ParticipantModel)
            .where(ParticipantModel.name == name)
            .values(last_seen=ts)
            .execution_options(synchronize_session=False)
        )
        with store_errors("participants.touch"):
            result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def remove(self, name: str, *, last_seen_before: datetime | None = None) -> bool:
        stmt = delete(ParticipantModel).where(ParticipantModel.name == name)
        if last_seen_before is not None:
            # A heartbeat that lands between snapshot and delete wins
            stmt = stmt.where(ParticipantModel.last_seen <= last_seen_before)
        stmt = stmt.execution_options(synchronize_session=False)
        with store_errors("participants.remove"):
            result = await self._session.execute(stmt)
        return result.rowcount == 1
