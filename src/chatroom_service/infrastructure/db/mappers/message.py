from __future__ import annotations

from chatroom_service.domain.entities.message import Message
from chatroom_service.infrastructure.db.models.message import MessageModel


def model_to_entity(model: MessageModel) -> Message:
    return Message(
        id=model.id,
        sender=model.sender,
        to=model.recipient,
        text=model.text,
        type=model.type,
        created_at=model.created_at,
        seq=model.seq,
    )


def entity_to_values(entity: Message) -> dict[str, object]:
    """Column values for an INSERT; ``seq`` is left to the database."""
    return {
        "id": entity.id,
        "sender": entity.sender,
        "recipient": entity.to,
        "text": entity.text,
        "type": entity.type,
        "created_at": entity.created_at,
    }
