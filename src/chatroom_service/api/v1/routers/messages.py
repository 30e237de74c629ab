from __future__ import annotations

from fastapi import APIRouter, Query, Response, status

from chatroom_service.api.deps import ClockDep, CurrentUser, UoWDep
from chatroom_service.api.v1.schemas.message import MessageContentRequest, MessageResponse
from chatroom_service.application.dto.message import MessageContentCommand
from chatroom_service.application.policies.visibility import parse_limit
from chatroom_service.services import message_service

router = APIRouter(prefix="/messages", tags=["messages"])


def _to_command(body: MessageContentRequest) -> MessageContentCommand:
    return MessageContentCommand(to=body.to, text=body.text, type=body.type)


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    user: CurrentUser,
    uow: UoWDep,
    limit: str | None = Query(None),
) -> list[MessageResponse]:
    messages = await message_service.list_messages(user, parse_limit(limit), uow)
    return [MessageResponse.model_validate(m, from_attributes=True) for m in messages]


@router.post("", response_model=MessageResponse, status_code=201)
async def post_message(
    body: MessageContentRequest,
    user: CurrentUser,
    clock: ClockDep,
    uow: UoWDep,
) -> MessageResponse:
    msg = await message_service.post_message(user, _to_command(body), clock, uow)
    return MessageResponse.model_validate(msg, from_attributes=True)


@router.put("/{message_id}", status_code=202)
async def edit_message(
    message_id: str,
    body: MessageContentRequest,
    user: CurrentUser,
    uow: UoWDep,
) -> Response:
    await message_service.edit_message(message_id, user, _to_command(body), uow)
    return Response(status_code=status.HTTP_202_ACCEPTED)


@router.delete("/{message_id}", status_code=200)
async def delete_message(
    message_id: str,
    user: CurrentUser,
    uow: UoWDep,
) -> Response:
    await message_service.delete_message(message_id, user, uow)
    return Response(status_code=status.HTTP_200_OK)
