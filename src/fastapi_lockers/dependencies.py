"""Dependency providers for request handlers."""

from __future__ import annotations

from fastapi import Request

from fastapi_lockers.config import LockerNetworkConfig
from fastapi_lockers.service import LockerService


def get_config(request: Request) -> LockerNetworkConfig:
    """Read config from FastAPI app state."""
    return request.app.state.lockers_config


def get_service(request: Request) -> LockerService:
    """Read the locker service from FastAPI app state."""
    return request.app.state.lockers_service
