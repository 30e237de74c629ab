"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, Header, Request

from chatroom_service.application.ports.clock import Clock, SystemClock
from chatroom_service.application.uow import UnitOfWork

_system_clock = SystemClock()


async def get_uow(request: Request) -> AsyncIterator[UnitOfWork]:
    async with request.app.state.uow_factory() as uow:
        yield uow


UoWDep = Annotated[UnitOfWork, Depends(get_uow)]


def get_clock() -> Clock:
    return _system_clock


ClockDep = Annotated[Clock, Depends(get_clock)]


async def get_current_user(
    user: Annotated[str | None, Header()] = None,
) -> str | None:
    """Display name from the ``user`` header; the room has no other identity."""
    return user or None


CurrentUser = Annotated[str | None, Depends(get_current_user)]
