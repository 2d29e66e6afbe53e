"""Final hand-over of a parcel to its recipient."""

from __future__ import annotations

import logging

from fastapi_lockers.errors import (
    DeliveryStateError,
    InvalidSecurityCodeError,
    NotReadyForCollectionError,
)
from fastapi_lockers.protocols import Clock, DeliveryRepository
from fastapi_lockers.shelves import ShelfSpaceTracker
from fastapi_lockers.types import DeliveryRecord, DeliveryStatus

logger = logging.getLogger(__name__)


class ClientReceiveValidator:
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

    def validate(
        self, delivery_id: int, security_code: str
    ) -> DeliveryRecord:
        """Return the delivery if it may be collected with this code.

        Checks run in a fixed order: unknown id, wrong code, wrong status.
        Nothing is modified.
        """
        delivery = self.repository.get_by_id(delivery_id)
        if delivery.security_code != security_code:
            logger.warning(
                "Rejected collection of delivery %s: invalid security code",
                delivery_id,
            )
            raise InvalidSecurityCodeError(delivery_id)
        if delivery.status != DeliveryStatus.AWAITING_COLLECTION:
            raise NotReadyForCollectionError(delivery_id, delivery.status)
        return delivery

    def receive(self, delivery_id: int, security_code: str) -> int:
        """Hand the parcel over and return the shelf to unlock."""
        delivery = self.validate(delivery_id, security_code)
        shelf_id = delivery.location_shelf_id
        if shelf_id is None:
            raise DeliveryStateError(
                f"Delivery {delivery_id} awaits collection "
                "but has no shelf assigned"
            )

        delivery.transition_to(DeliveryStatus.DELIVERED)
        delivery.collected_at = self.clock()
        self.tracker.release(shelf_id, delivery.parcel, delivery.id)
        delivery.location_shelf_id = None
        return shelf_id
