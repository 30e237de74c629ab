from __future__ import annotations

from fastapi import APIRouter, Response, status

from chatroom_service.api.deps import ClockDep, CurrentUser, UoWDep
from chatroom_service.services import presence_service

router = APIRouter(tags=["presence"])


@router.post("/status", status_code=200)
async def heartbeat(user: CurrentUser, clock: ClockDep, uow: UoWDep) -> Response:
    await presence_service.heartbeat(user, clock, uow)
    return Response(status_code=status.HTTP_200_OK)
