"""Parcel-locker network engine with a FastAPI adapter."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "DeliveryRepository",
    "LockerNetworkConfig",
    "LockerService",
    "LockerServiceError",
    "Parcel",
    "__version__",
    "create_locker_router",
    "register_exception_handlers",
]

if TYPE_CHECKING:
    from fastapi_lockers.config import LockerNetworkConfig
    from fastapi_lockers.errors import LockerServiceError
    from fastapi_lockers.exceptions import register_exception_handlers
    from fastapi_lockers.protocols import DeliveryRepository
    from fastapi_lockers.router import create_locker_router
    from fastapi_lockers.service import LockerService
    from fastapi_lockers.types import Parcel


def __getattr__(name: str):
    # Lazy imports to avoid loading FastAPI on package import.
    if name == "LockerNetworkConfig":
        from fastapi_lockers.config import LockerNetworkConfig

        return LockerNetworkConfig
    if name == "LockerService":
        from fastapi_lockers.service import LockerService

        return LockerService
    if name == "create_locker_router":
        from fastapi_lockers.router import create_locker_router

        return create_locker_router
    if name == "register_exception_handlers":
        from fastapi_lockers import exceptions

        return exceptions.register_exception_handlers
    if name == "LockerServiceError":
        from fastapi_lockers import errors

        return errors.LockerServiceError
    if name == "DeliveryRepository":
        from fastapi_lockers import protocols

        return protocols.DeliveryRepository
    if name == "Parcel":
        from fastapi_lockers.types import Parcel

        return Parcel
    raise AttributeError(
        f"module 'fastapi_lockers' has no attribute {name!r}"
    )
