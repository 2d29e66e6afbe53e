"""In-memory delivery ledger."""

from __future__ import annotations

import logging
import random
from datetime import UTC, datetime
from decimal import Decimal

from fastapi_lockers.errors import DeliveryNotFoundError
from fastapi_lockers.protocols import Clock
from fastapi_lockers.types import DeliveryRecord, DeliveryStatus, Parcel

logger = logging.getLogger(__name__)

SECURITY_CODE_LENGTH = 6


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def generate_security_code(
    rng: random.Random, length: int = SECURITY_CODE_LENGTH
) -> str:
    """Return ``length`` independent random decimal digits.

    Codes are not unique across deliveries.
    """
    return "".join(str(rng.randrange(10)) for _ in range(length))


class InMemoryDeliveryStore:
    """Delivery records kept in creation order; nothing is ever deleted."""

    def __init__(
        self,
        *,
        clock: Clock = utc_now,
        rng: random.Random | None = None,
        security_code_length: int = SECURITY_CODE_LENGTH,
    ) -> None:
        self.items: dict[int, DeliveryRecord] = {}
        self._counter = 0
        self._clock = clock
        self._rng = rng or random.Random()
        self._security_code_length = security_code_length

    def generate_security_code(self) -> str:
        return generate_security_code(self._rng, self._security_code_length)

    def create(
        self,
        parcel: Parcel,
        from_locker_id: int,
        to_locker_id: int,
        price: Decimal,
        shelf_id: int,
    ) -> DeliveryRecord:
        self._counter += 1
        record = DeliveryRecord(
            id=self._counter,
            parcel=parcel,
            from_locker_id=from_locker_id,
            to_locker_id=to_locker_id,
            security_code=self.generate_security_code(),
            price=price,
            status=DeliveryStatus.AWAITING_PICKUP,
            created_at=self._clock(),
            location_shelf_id=shelf_id,
        )
        self.items[record.id] = record
        logger.debug("Stored delivery %s", record.id)
        return record

    def get_by_id(self, delivery_id: int) -> DeliveryRecord:
        try:
            return self.items[delivery_id]
        except KeyError as e:
            raise DeliveryNotFoundError(delivery_id) from e

    def list_by_from_locker(
        self, locker_id: int, status: DeliveryStatus
    ) -> list[DeliveryRecord]:
        return [
            d
            for d in self.items.values()
            if d.from_locker_id == locker_id and d.status == status
        ]

    def list_by_to_locker(
        self, locker_id: int, status: DeliveryStatus
    ) -> list[DeliveryRecord]:
        return [
            d
            for d in self.items.values()
            if d.to_locker_id == locker_id and d.status == status
        ]

    def list_all(self) -> list[DeliveryRecord]:
        return list(self.items.values())
