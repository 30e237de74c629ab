from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from chatroom_service.domain.entities.message import Message
from chatroom_service.domain.value_objects.enums import MessageType
from chatroom_service.infrastructure.db.mappers import message as mapper
from chatroom_service.infrastructure.db.models.message import MessageModel
from chatroom_service.infrastructure.db.repositories._errors import store_errors


class MessageReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_messages(self, *, limit: int | None = None) -> list[Message]:
        if limit is None:
            stmt = select(MessageModel).order_by(MessageModel.seq.asc())
        else:
            stmt = select(MessageModel).order_by(MessageModel.seq.desc()).limit(limit)
        with store_errors("messages.list"):
            result = await self._session.execute(stmt)
        rows = result.scalars().all()
        if limit is not None:
            rows = list(reversed(rows))
        return [mapper.model_to_entity(m) for m in rows]

    async def get_by_id(self, message_id: UUID) -> Message | None:
        with store_errors("messages.get"):
            model = await self._session.get(MessageModel, message_id)
        return mapper.model_to_entity(model) if model else None


class MessageWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, message: Message) -> Message:
        stmt = (
            pg_insert(MessageModel)
            .values(**mapper.entity_to_values(message))
            .returning(MessageModel)
        )
        with store_errors("messages.append"):
            result = await self._session.execute(stmt)
        return mapper.model_to_entity(result.scalar_one())

    async def update_owned(
        self,
        message_id: UUID,
        sender: str,
        *,
        to: str,
        text: str,
        type: str,
    ) -> bool:
        stmt = (
            update(MessageModel)
            .where(
                MessageModel.id == message_id,
                MessageModel.sender == sender,
                MessageModel.type != MessageType.STATUS.value,
                # No-op edits report zero updated rows
                or_(
                    MessageModel.recipient != to,
                    MessageModel.text != text,
                    MessageModel.type != type,
                ),
            )
            .values(recipient=to, text=text, type=type)
            .execution_options(synchronize_session=False)
        )
        with store_errors("messages.update"):
            result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def delete_owned(self, message_id: UUID, sender: str) -> bool:
        stmt = (
            delete(MessageModel)
            .where(
                MessageModel.id == message_id,
                MessageModel.sender == sender,
                MessageModel.type != MessageType.STATUS.value,
            )
            .execution_options(synchronize_session=False)
        )
        with store_errors("messages.delete"):
            result = await self._session.execute(stmt)
        return result.rowcount == 1
