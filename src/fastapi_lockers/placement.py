"""Placing parcels held at the base into destination lockers."""

from __future__ import annotations

import logging

from fastapi_lockers.protocols import Clock, DeliveryRepository
from fastapi_lockers.shelves import ShelfSpaceTracker, find_shelf
from fastapi_lockers.types import DeliveryRecord, DeliveryStatus, Locker

logger = logging.getLogger(__name__)


class DeliveryPlacement:
    def __init__(
        self,
        *,
        repository: DeliveryRepository,
        tracker: ShelfSpaceTracker,
        clock: Clock,
    ) -> None:
        self.repository = repository
        self.tracker = tracker
        self.clock = clock

    def deliver(self, locker: Locker) -> list[int]:
        """Shelve every base-held parcel bound for ``locker`` that fits.

        Parcels without a free shelf stay at the base and are tried again
        on the next call.
        """
        pending = self.repository.list_by_to_locker(
            locker.id, DeliveryStatus.AT_BASE
        )
        return [
            delivery.id
            for delivery in pending
            if self._place(delivery, locker)
        ]

    def _place(self, delivery: DeliveryRecord, locker: Locker) -> bool:
        shelf = find_shelf(locker, delivery.parcel, self.tracker)
        if shelf is None:
            logger.info(
                "Delivery %s stays at base: no free shelf in locker %s",
                delivery.id,
                locker.id,
            )
            return False

        self.tracker.reserve(shelf.id, delivery.parcel, delivery.id)
        delivery.transition_to(DeliveryStatus.AWAITING_COLLECTION)
        delivery.delivered_to_locker_at = self.clock()
        delivery.location_shelf_id = shelf.id
        return True
