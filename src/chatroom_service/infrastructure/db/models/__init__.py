"""Import all models so Base.metadata knows every table."""
from chatroom_service.infrastructure.db.models.message import MessageModel
from chatroom_service.infrastructure.db.models.participant import ParticipantModel

__all__ = [
    "MessageModel",
    "ParticipantModel",
]
