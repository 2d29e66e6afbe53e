"""Pydantic request/response schemas."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fastapi_lockers.reports import MonthlyIncome
from fastapi_lockers.service import SendResult
from fastapi_lockers.types import DeliveryRecord, DeliveryStatus, Parcel


class ParcelSchema(BaseModel):
    """Parcel dimensions and handling flags."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    depth: int = Field(gt=0)
    is_fragile: bool = False
    is_priority: bool = False

    def to_parcel(self) -> Parcel:
        return Parcel(
            width=self.width,
            height=self.height,
            depth=self.depth,
            is_fragile=self.is_fragile,
            is_priority=self.is_priority,
        )

    @classmethod
    def from_parcel(cls, parcel: Parcel) -> ParcelSchema:
        return cls(
            width=parcel.width,
            height=parcel.height,
            depth=parcel.depth,
            is_fragile=parcel.is_fragile,
            is_priority=parcel.is_priority,
        )


class SendParcelRequest(BaseModel):
    parcel: ParcelSchema
    from_locker_id: int
    to_locker_id: int


class SendParcelResponse(BaseModel):
    delivery_id: int
    security_code: str
    price: Decimal

    @classmethod
    def from_result(cls, result: SendResult) -> SendParcelResponse:
        return cls(
            delivery_id=result.delivery_id,
            security_code=result.security_code,
            price=result.price,
        )


class CollectParcelRequest(BaseModel):
    security_code: str


class CollectParcelResponse(BaseModel):
    delivery_id: int
    shelf_id: int


class DeliveryResponse(BaseModel):
    """Public view of a delivery; the security code is never exposed."""

    id: int
    parcel: ParcelSchema
    from_locker_id: int
    to_locker_id: int
    price: Decimal
    status: DeliveryStatus
    created_at: datetime
    picked_up_at: datetime | None = None
    arrived_at_base_at: datetime | None = None
    delivered_to_locker_at: datetime | None = None
    collected_at: datetime | None = None
    location_shelf_id: int | None = None

    @classmethod
    def from_delivery(cls, delivery: DeliveryRecord) -> DeliveryResponse:
        return cls(
            id=delivery.id,
            parcel=ParcelSchema.from_parcel(delivery.parcel),
            from_locker_id=delivery.from_locker_id,
            to_locker_id=delivery.to_locker_id,
            price=delivery.price,
            status=delivery.status,
            created_at=delivery.created_at,
            picked_up_at=delivery.picked_up_at,
            arrived_at_base_at=delivery.arrived_at_base_at,
            delivered_to_locker_at=delivery.delivered_to_locker_at,
            collected_at=delivery.collected_at,
            location_shelf_id=delivery.location_shelf_id,
        )


class LockerDeliveriesResponse(BaseModel):
    """Deliveries moved by a courier run, in processing order."""

    locker_id: int
    delivery_ids: list[int]


class MonthlyIncomeResponse(BaseModel):
    year: int
    month: int
    income: Decimal

    @classmethod
    def from_report(cls, report: MonthlyIncome) -> MonthlyIncomeResponse:
        return cls(year=report.year, month=report.month, income=report.income)


class AverageDeliveryTimeResponse(BaseModel):
    period_start: datetime
    period_end: datetime
    average_seconds: float

    @classmethod
    def from_duration(
        cls,
        period_start: datetime,
        period_end: datetime,
        duration: timedelta,
    ) -> AverageDeliveryTimeResponse:
        return cls(
            period_start=period_start,
            period_end=period_end,
            average_seconds=duration.total_seconds(),
        )
