"""Locker network service: the public entry point of the engine."""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Iterable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import NamedTuple

from fastapi_lockers.config import LockerNetworkConfig
from fastapi_lockers.errors import LockerNotFoundError, NoSpaceInLockerError
from fastapi_lockers.placement import DeliveryPlacement
from fastapi_lockers.pricing import calculate_price
from fastapi_lockers.protocols import Clock, DeliveryRepository
from fastapi_lockers.receiving import ClientReceiveValidator
from fastapi_lockers.reports import (
    MonthlyIncome,
    average_delivery_time,
    monthly_income,
)
from fastapi_lockers.scheduler import PickupScheduler, VehicleEnvelope
from fastapi_lockers.shelves import ShelfSpaceTracker, find_shelf
from fastapi_lockers.store import (
    SECURITY_CODE_LENGTH,
    InMemoryDeliveryStore,
    generate_security_code,
    utc_now,
)
from fastapi_lockers.types import DeliveryRecord, Locker, Parcel, Shelf

logger = logging.getLogger(__name__)


class SendResult(NamedTuple):
    delivery_id: int
    security_code: str
    price: Decimal


def build_lockers(config: LockerNetworkConfig) -> list[Locker]:
    """Turn configured locker settings into domain lockers."""
    return [
        Locker(
            id=item.id,
            distance_to_base=item.distance_to_base,
            shelves=tuple(
                Shelf(id=shelf.id, tier=shelf.tier) for shelf in item.shelves
            ),
        )
        for item in config.lockers
    ]


class LockerService:
    """Centralized locker network.

    Parcels travel from a source locker to the base and from the base to
    the destination locker. The service owns all mutable state (shelf
    space and the delivery ledger) and runs each public operation under a
    single lock, so concurrent callers never over-book a shelf or lose a
    freshly sent parcel during a pickup.
    """

    def __init__(
        self,
        lockers: Iterable[Locker],
        *,
        company_name: str = "",
        repository: DeliveryRepository | None = None,
        envelope: VehicleEnvelope | None = None,
        clock: Clock = utc_now,
        rng: random.Random | None = None,
        security_code_length: int = SECURITY_CODE_LENGTH,
    ) -> None:
        self.company_name = company_name
        self._lockers: dict[int, Locker] = {}
        shelf_ids: set[int] = set()
        for locker in lockers:
            if locker.id in self._lockers:
                raise ValueError(f"Duplicate locker id {locker.id}")
            for shelf in locker.shelves:
                if shelf.id in shelf_ids:
                    raise ValueError(f"Duplicate shelf id {shelf.id}")
                shelf_ids.add(shelf.id)
            self._lockers[locker.id] = locker
        self._clock = clock
        self._rng = rng or random.Random()
        self._security_code_length = security_code_length
        self._lock = threading.Lock()

        self.tracker = ShelfSpaceTracker()
        self.repository = repository or InMemoryDeliveryStore(
            clock=clock,
            rng=self._rng,
            security_code_length=security_code_length,
        )
        self.scheduler = PickupScheduler(
            repository=self.repository,
            tracker=self.tracker,
            clock=clock,
            envelope=envelope,
        )
        self.placement = DeliveryPlacement(
            repository=self.repository, tracker=self.tracker, clock=clock
        )
        self.receiver = ClientReceiveValidator(
            repository=self.repository, tracker=self.tracker, clock=clock
        )

    @classmethod
    def from_config(
        cls, config: LockerNetworkConfig, **kwargs
    ) -> LockerService:
        envelope = VehicleEnvelope(
            width=config.vehicle_max_width,
            height=config.vehicle_max_height,
            depth=config.vehicle_max_depth,
        )
        return cls(
            build_lockers(config),
            company_name=config.company_name,
            envelope=envelope,
            security_code_length=config.security_code_length,
            **kwargs,
        )

    @property
    def lockers(self) -> list[Locker]:
        return list(self._lockers.values())

    def get_locker(self, locker_id: int) -> Locker:
        try:
            return self._lockers[locker_id]
        except KeyError as e:
            raise LockerNotFoundError(locker_id) from e

    def get_delivery(self, delivery_id: int) -> DeliveryRecord:
        with self._lock:
            return self.repository.get_by_id(delivery_id)

    def generate_security_code(self) -> str:
        return generate_security_code(self._rng, self._security_code_length)

    def client_send(
        self, parcel: Parcel, from_locker_id: int, to_locker_id: int
    ) -> SendResult:
        """Deposit ``parcel`` in the source locker and open a delivery."""
        from_locker = self.get_locker(from_locker_id)
        to_locker = self.get_locker(to_locker_id)

        with self._lock:
            shelf = find_shelf(from_locker, parcel, self.tracker)
            if shelf is None:
                logger.warning(
                    "No space in locker %s for parcel %sx%sx%s",
                    from_locker_id,
                    parcel.width,
                    parcel.height,
                    parcel.depth,
                )
                raise NoSpaceInLockerError(from_locker_id)

            price = calculate_price(parcel, from_locker, to_locker, shelf.tier)
            delivery = self.repository.create(
                parcel, from_locker_id, to_locker_id, price, shelf.id
            )
            self.tracker.reserve(shelf.id, parcel, delivery.id)

        logger.info(
            "Delivery %s sent from locker %s to %s on shelf %s, price %s",
            delivery.id,
            from_locker_id,
            to_locker_id,
            shelf.id,
            price,
        )
        return SendResult(delivery.id, delivery.security_code, delivery.price)

    def client_receive(self, delivery_id: int, security_code: str) -> int:
        """Hand a delivered parcel over; returns the shelf to unlock."""
        with self._lock:
            shelf_id = self.receiver.receive(delivery_id, security_code)
        logger.info(
            "Delivery %s collected from shelf %s", delivery_id, shelf_id
        )
        return shelf_id

    def pick_up_parcels_from_locker(self, locker_id: int) -> list[int]:
        """Load waiting parcels into the courier vehicle and bring them
        to the base."""
        locker = self.get_locker(locker_id)
        with self._lock:
            picked = self.scheduler.pick_up(locker)
        logger.info(
            "Picked up %d deliveries from locker %s: %s",
            len(picked),
            locker_id,
            picked,
        )
        return picked

    def deliver_parcels(self, locker_id: int) -> list[int]:
        locker = self.get_locker(locker_id)
        with self._lock:
            delivered = self.placement.deliver(locker)
        logger.info(
            "Delivered %d parcels to locker %s: %s",
            len(delivered),
            locker_id,
            delivered,
        )
        return delivered

    def monthly_income_report(self) -> MonthlyIncome:
        with self._lock:
            return monthly_income(self.repository.list_all(), self._clock())

    def average_delivery_time(
        self, period_start: datetime, period_end: datetime
    ) -> timedelta:
        with self._lock:
            return average_delivery_time(
                self.repository.list_all(), period_start, period_end
            )
