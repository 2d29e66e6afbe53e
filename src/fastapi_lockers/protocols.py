"""Protocols for pluggable parts of the locker engine."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from typing import Protocol, runtime_checkable

from fastapi_lockers.types import DeliveryRecord, DeliveryStatus, Parcel

Clock = Callable[[], datetime]


@runtime_checkable
class DeliveryRepository(Protocol):
    """Ledger of delivery records."""

    def create(
        self,
        parcel: Parcel,
        from_locker_id: int,
        to_locker_id: int,
        price: Decimal,
        shelf_id: int,
    ) -> DeliveryRecord: ...

    def get_by_id(self, delivery_id: int) -> DeliveryRecord: ...

    def list_by_from_locker(
        self, locker_id: int, status: DeliveryStatus
    ) -> list[DeliveryRecord]: ...

    def list_by_to_locker(
        self, locker_id: int, status: DeliveryStatus
    ) -> list[DeliveryRecord]: ...

    def list_all(self) -> list[DeliveryRecord]: ...
