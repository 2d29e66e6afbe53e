"""Exception handlers mapping locker engine errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fastapi_lockers.errors import (
    DeliveryNotFoundError,
    DeliveryStateError,
    InvalidSecurityCodeError,
    InvalidTransitionError,
    LockerNotFoundError,
    LockerServiceError,
    NoSpaceInLockerError,
    NotReadyForCollectionError,
)

__all__ = [
    "DeliveryNotFoundError",
    "DeliveryStateError",
    "InvalidSecurityCodeError",
    "InvalidTransitionError",
    "LockerNotFoundError",
    "LockerServiceError",
    "NoSpaceInLockerError",
    "NotReadyForCollectionError",
    "register_exception_handlers",
]


def _error_response(
    exc: Exception, *, status_code: int, code: str
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register locker exception handlers on a FastAPI app.

    More specific handlers must be registered first so FastAPI
    matches them before the generic LockerServiceError handler.

    Handler order (most specific first):
    1. LockerNotFoundError → 404
    2. DeliveryNotFoundError → 404
    3. NoSpaceInLockerError → 409
    4. InvalidSecurityCodeError → 403
    5. NotReadyForCollectionError → 409
    6. LockerServiceError → 400 (catch-all)

    DeliveryStateError is left unmapped and ends up as a 500.
    """

    @app.exception_handler(LockerNotFoundError)
    async def _locker_not_found(
        request: Request,
        exc: LockerNotFoundError,
    ) -> JSONResponse:
        return _error_response(exc, status_code=404, code="locker_not_found")

    @app.exception_handler(DeliveryNotFoundError)
    async def _delivery_not_found(
        request: Request,
        exc: DeliveryNotFoundError,
    ) -> JSONResponse:
        return _error_response(
            exc, status_code=404, code="delivery_not_found"
        )

    @app.exception_handler(NoSpaceInLockerError)
    async def _no_space(
        request: Request,
        exc: NoSpaceInLockerError,
    ) -> JSONResponse:
        return _error_response(
            exc, status_code=409, code="no_space_in_locker"
        )

    @app.exception_handler(InvalidSecurityCodeError)
    async def _invalid_code(
        request: Request,
        exc: InvalidSecurityCodeError,
    ) -> JSONResponse:
        return _error_response(
            exc, status_code=403, code="invalid_security_code"
        )

    @app.exception_handler(NotReadyForCollectionError)
    async def _not_ready(
        request: Request,
        exc: NotReadyForCollectionError,
    ) -> JSONResponse:
        return _error_response(
            exc, status_code=409, code="not_ready_for_collection"
        )

    @app.exception_handler(LockerServiceError)
    async def _locker_error(
        request: Request,
        exc: LockerServiceError,
    ) -> JSONResponse:
        return _error_response(exc, status_code=400, code="locker_error")
