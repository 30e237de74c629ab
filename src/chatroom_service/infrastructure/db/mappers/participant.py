from __future__ import annotations

from chatroom_service.domain.entities.participant import Participant
from chatroom_service.infrastructure.db.models.participant import ParticipantModel


def model_to_entity(model: ParticipantModel) -> Participant:
    return Participant(
        name=model.name,
        last_seen=model.last_seen,
    )


def entity_to_values(entity: Participant) -> dict[str, object]:
    return {
        "name": entity.name,
        "last_seen": entity.last_seen,
    }
