from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field

from chatroom_service.domain.value_objects.enums import MessageType


class MessageContentRequest(BaseModel):
    to: str
    text: str
    type: MessageType | None = None


class MessageResponse(BaseModel):
    id: UUID
    sender: str = Field(
        validation_alias=AliasChoices("sender", "from"),
        serialization_alias="from",
    )
    to: str
    text: str
    type: str
    time: str = Field(description="Creation time as HH:MM:SS, in UTC")
    created_at: datetime

    model_config = {"from_attributes": True}
