"""Router factory for fastapi-lockers."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from fastapi_lockers.config import LockerNetworkConfig
from fastapi_lockers.routes.deliveries import router as deliveries_router
from fastapi_lockers.routes.lockers import router as lockers_router
from fastapi_lockers.routes.reports import router as reports_router
from fastapi_lockers.service import LockerService


def create_locker_router(
    *,
    config: LockerNetworkConfig,
    service: LockerService | None = None,
) -> APIRouter:
    """Create a configured API router.

    Without an explicit ``service`` one is built from ``config``. The
    including app must call ``register_exception_handlers`` itself so
    locker errors map to HTTP responses.
    """
    actual_service = service or LockerService.from_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        app.state.lockers_config = config
        app.state.lockers_service = actual_service
        yield

    router = APIRouter(lifespan=lifespan)
    router.include_router(deliveries_router)
    router.include_router(lockers_router)
    router.include_router(reports_router)
    return router
