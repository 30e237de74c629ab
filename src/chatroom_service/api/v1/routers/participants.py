from __future__ import annotations

from fastapi import APIRouter

from chatroom_service.api.deps import ClockDep, UoWDep
from chatroom_service.api.v1.schemas.participant import (
    ParticipantResponse,
    RegisterParticipantRequest,
)
from chatroom_service.application.dto.participant import RegisterParticipantCommand
from chatroom_service.services import participant_service

router = APIRouter(prefix="/participants", tags=["participants"])


@router.get("", response_model=list[ParticipantResponse])
async def list_participants(uow: UoWDep) -> list[ParticipantResponse]:
    participants = await participant_service.list_participants(uow)
    return [ParticipantResponse.model_validate(p, from_attributes=True) for p in participants]


@router.post("", response_model=ParticipantResponse, status_code=201)
async def register_participant(
    body: RegisterParticipantRequest,
    clock: ClockDep,
    uow: UoWDep,
) -> ParticipantResponse:
    participant = await participant_service.register(
        RegisterParticipantCommand(name=body.name), clock, uow,
    )
    return ParticipantResponse.model_validate(participant, from_attributes=True)
