"""Courier pickup scheduling under the vehicle capacity limit."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fastapi_lockers.protocols import Clock, DeliveryRepository
from fastapi_lockers.shelves import ShelfSpaceTracker
from fastapi_lockers.types import (
    DeliveryRecord,
    DeliveryStatus,
    Locker,
    Parcel,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VehicleEnvelope:
    """Cargo space of a courier vehicle."""

    width: int = 800
    height: int = 200
    depth: int = 200


@dataclass
class VehicleLoad:
    """Running usage of a vehicle envelope.

    Parcels are lined up along the width, so width adds up while height
    and depth only track the tallest and deepest parcel loaded so far.
    """

    envelope: VehicleEnvelope
    used_width: int = 0
    used_height: int = 0
    used_depth: int = 0

    def fits(self, parcel: Parcel) -> bool:
        return (
            self.used_width + parcel.width <= self.envelope.width
            and max(self.used_height, parcel.height) <= self.envelope.height
            and max(self.used_depth, parcel.depth) <= self.envelope.depth
        )

    def try_load(self, parcel: Parcel) -> bool:
        if not self.fits(parcel):
            return False
        self.used_width += parcel.width
        self.used_height = max(self.used_height, parcel.height)
        self.used_depth = max(self.used_depth, parcel.depth)
        return True


def order_for_pickup(
    deliveries: Iterable[DeliveryRecord],
) -> list[DeliveryRecord]:
    """Priority parcels first, then oldest first, then by id."""
    return sorted(
        deliveries,
        key=lambda d: (not d.parcel.is_priority, d.created_at, d.id),
    )


def select_for_pickup(
    deliveries: Iterable[DeliveryRecord], envelope: VehicleEnvelope
) -> list[DeliveryRecord]:
    """Choose which deliveries the courier takes, in loading order.

    Priority parcels are always taken, even when they overflow the
    envelope. Usage only grows for parcels that actually fit.
    """
    load = VehicleLoad(envelope)
    selected: list[DeliveryRecord] = []
    for delivery in order_for_pickup(deliveries):
        if load.try_load(delivery.parcel) or delivery.parcel.is_priority:
            selected.append(delivery)
        else:
            logger.info(
                "Delivery %s left in locker %s: vehicle is full",
                delivery.id,
                delivery.from_locker_id,
            )
    return selected


class PickupScheduler:
    """Moves waiting parcels from a locker to the base."""

    def __init__(
        self,
        *,
        repository: DeliveryRepository,
        tracker: ShelfSpaceTracker,
        clock: Clock,
        envelope: VehicleEnvelope | None = None,
    ) -> None:
        self.repository = repository
        self.tracker = tracker
        self.clock = clock
        self.envelope = envelope or VehicleEnvelope()

    def pick_up(self, locker: Locker) -> list[int]:
        waiting = self.repository.list_by_from_locker(
            locker.id, DeliveryStatus.AWAITING_PICKUP
        )
        if not waiting:
            return []

        picked: list[int] = []
        for delivery in select_for_pickup(waiting, self.envelope):
            self._move_to_base(delivery)
            picked.append(delivery.id)
        return picked

    def _move_to_base(self, delivery: DeliveryRecord) -> None:
        if delivery.location_shelf_id is not None:
            self.tracker.release(
                delivery.location_shelf_id, delivery.parcel, delivery.id
            )
        # Transit takes no time: both stamps share one instant.
        now = self.clock()
        delivery.transition_to(DeliveryStatus.IN_TRANSIT_TO_BASE)
        delivery.picked_up_at = now
        delivery.location_shelf_id = None
        delivery.transition_to(DeliveryStatus.AT_BASE)
        delivery.arrived_at_base_at = now
