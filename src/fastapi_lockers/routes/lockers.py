"""Courier endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fastapi_lockers.dependencies import get_service
from fastapi_lockers.schemas import LockerDeliveriesResponse
from fastapi_lockers.service import LockerService

router = APIRouter()


@router.post(
    "/lockers/{locker_id}/pickup",
    response_model=LockerDeliveriesResponse,
)
def pick_up_parcels(
    locker_id: int,
    service: LockerService = Depends(get_service),
) -> LockerDeliveriesResponse:
    """Take waiting parcels from a locker to the base."""
    picked = service.pick_up_parcels_from_locker(locker_id)
    return LockerDeliveriesResponse(locker_id=locker_id, delivery_ids=picked)


@router.post(
    "/lockers/{locker_id}/deliver",
    response_model=LockerDeliveriesResponse,
)
def deliver_parcels(
    locker_id: int,
    service: LockerService = Depends(get_service),
) -> LockerDeliveriesResponse:
    """Place base-held parcels into the destination locker."""
    delivered = service.deliver_parcels(locker_id)
    return LockerDeliveriesResponse(
        locker_id=locker_id, delivery_ids=delivered
    )
