"""Reporting endpoints."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from fastapi_lockers.dependencies import get_service
from fastapi_lockers.reports import ensure_aware
from fastapi_lockers.schemas import (
    AverageDeliveryTimeResponse,
    MonthlyIncomeResponse,
)
from fastapi_lockers.service import LockerService

router = APIRouter()


@router.get("/reports/monthly-income", response_model=MonthlyIncomeResponse)
def monthly_income(
    service: LockerService = Depends(get_service),
) -> MonthlyIncomeResponse:
    return MonthlyIncomeResponse.from_report(service.monthly_income_report())


@router.get(
    "/reports/average-delivery-time",
    response_model=AverageDeliveryTimeResponse,
)
def average_delivery_time(
    period_start: datetime,
    period_end: datetime,
    service: LockerService = Depends(get_service),
) -> AverageDeliveryTimeResponse:
    """Average send-to-collection time for parcels collected in the period."""
    period_start = ensure_aware(period_start)
    period_end = ensure_aware(period_end)
    if period_end < period_start:
        raise HTTPException(
            status_code=400,
            detail="period_end must not be before period_start",
        )
    duration = service.average_delivery_time(period_start, period_end)
    return AverageDeliveryTimeResponse.from_duration(
        period_start, period_end, duration
    )
