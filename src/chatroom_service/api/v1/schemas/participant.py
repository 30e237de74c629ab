from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class RegisterParticipantRequest(BaseModel):
    name: str


class ParticipantResponse(BaseModel):
    name: str
    last_seen: datetime

    model_config = {"from_attributes": True}
