"""Client-facing delivery endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fastapi_lockers.dependencies import get_service
from fastapi_lockers.schemas import (
    CollectParcelRequest,
    CollectParcelResponse,
    DeliveryResponse,
    SendParcelRequest,
    SendParcelResponse,
)
from fastapi_lockers.service import LockerService

router = APIRouter()


@router.get("/deliveries/health")
async def deliveries_health() -> dict[str, str]:
    """Healthcheck endpoint for delivery routes."""
    return {"status": "ok"}


@router.post("/deliveries", response_model=SendParcelResponse)
def send_parcel(
    body: SendParcelRequest,
    service: LockerService = Depends(get_service),
) -> SendParcelResponse:
    """Deposit a parcel in its source locker."""
    result = service.client_send(
        body.parcel.to_parcel(), body.from_locker_id, body.to_locker_id
    )
    return SendParcelResponse.from_result(result)


@router.get("/deliveries/{delivery_id}", response_model=DeliveryResponse)
def get_delivery(
    delivery_id: int,
    service: LockerService = Depends(get_service),
) -> DeliveryResponse:
    return DeliveryResponse.from_delivery(service.get_delivery(delivery_id))


@router.post(
    "/deliveries/{delivery_id}/collect",
    response_model=CollectParcelResponse,
)
def collect_parcel(
    delivery_id: int,
    body: CollectParcelRequest,
    service: LockerService = Depends(get_service),
) -> CollectParcelResponse:
    """Collect a delivered parcel with its security code."""
    shelf_id = service.client_receive(delivery_id, body.security_code)
    return CollectParcelResponse(delivery_id=delivery_id, shelf_id=shelf_id)
