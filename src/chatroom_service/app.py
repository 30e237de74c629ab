from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chatroom_service.api.middleware.correlation_id import CorrelationIdMiddleware
from chatroom_service.api.middleware.metrics import RequestTimingMiddleware
from chatroom_service.api.v1.routers import (
    health,
    messages,
    participants,
    status,
)
from chatroom_service.application.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    UnauthorizedError,
    ValidationError,
)
from chatroom_service.config import settings
from chatroom_service.infrastructure.db.session import create_engine, create_session_factory
from chatroom_service.infrastructure.db.uow import SqlAlchemyUoWFactory
from chatroom_service.workers.presence_sweeper import PresenceSweeper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    app.state.engine = create_engine(settings)
    app.state.uow_factory = SqlAlchemyUoWFactory(create_session_factory(app.state.engine))
    logger.info("Database engine created for %s", settings.DATABASE_NAME)

    sweeper: PresenceSweeper | None = None
    if settings.PRESENCE_SWEEPER_ENABLED:
        sweeper = PresenceSweeper(
            app.state.uow_factory,
            stale_after=settings.PRESENCE_STALE_SECONDS,
            interval=settings.PRESENCE_SWEEP_INTERVAL,
        )
        await sweeper.start()

    yield

    if sweeper is not None:
        await sweeper.stop()
    await app.state.engine.dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Chat Room Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(participants.router)
    app.include_router(messages.router)
    app.include_router(status.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(_req: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.detail})

    @app.exception_handler(UnauthorizedError)
    async def _unauthorized(_req: Request, exc: UnauthorizedError) -> JSONResponse:
        return JSONResponse(status_code=401, content={"detail": exc.detail})

    @app.exception_handler(ConflictError)
    async def _conflict(_req: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.detail})

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": [str(v) for v in exc.violations]},
        )

    @app.exception_handler(RequestValidationError)
    async def _request_validation(_req: Request, exc: RequestValidationError) -> JSONResponse:
        detail = [
            f"{'.'.join(str(p) for p in err['loc'][1:]) or err['loc'][0]}: {err['msg']}"
            for err in exc.errors()
        ]
        return JSONResponse(status_code=422, content={"detail": detail})

    @app.exception_handler(StoreError)
    async def _store(_req: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store error: %s", exc.detail)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
