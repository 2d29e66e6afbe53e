"""Domain types for the parcel-locker network."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from fastapi_lockers.errors import InvalidTransitionError


class ShelfTier(StrEnum):
    """Shelf size class with fixed nominal dimensions and tariff."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def dimensions(self) -> tuple[int, int, int]:
        """Nominal (width, height, depth) of an empty shelf."""
        return TIER_DIMENSIONS[self]

    @property
    def price_per_unit(self) -> Decimal:
        """Price per distance unit for parcels resting on this tier."""
        return TIER_PRICE_PER_UNIT[self]

    def accepts(self, parcel: Parcel) -> bool:
        """Whether an empty shelf of this tier can hold the parcel."""
        width, height, depth = self.dimensions
        return (
            parcel.width <= width
            and parcel.height <= height
            and parcel.depth <= depth
        )


TIER_DIMENSIONS: dict[ShelfTier, tuple[int, int, int]] = {
    ShelfTier.SMALL: (50, 60, 70),
    ShelfTier.MEDIUM: (100, 60, 200),
    ShelfTier.LARGE: (400, 100, 300),
}

TIER_PRICE_PER_UNIT: dict[ShelfTier, Decimal] = {
    ShelfTier.SMALL: Decimal("0.05"),
    ShelfTier.MEDIUM: Decimal("0.10"),
    ShelfTier.LARGE: Decimal("0.40"),
}


class DeliveryStatus(StrEnum):
    AWAITING_PICKUP = "awaiting_pickup"
    IN_TRANSIT_TO_BASE = "in_transit_to_base"
    AT_BASE = "at_base"
    IN_TRANSIT_TO_DESTINATION = "in_transit_to_destination"
    AWAITING_COLLECTION = "awaiting_collection"
    DELIVERED = "delivered"


# Statuses during which the parcel physically rests on a shelf.
SHELVED_STATUSES = frozenset(
    {DeliveryStatus.AWAITING_PICKUP, DeliveryStatus.AWAITING_COLLECTION}
)

ALLOWED_TRANSITIONS: dict[DeliveryStatus, frozenset[DeliveryStatus]] = {
    DeliveryStatus.AWAITING_PICKUP: frozenset(
        {DeliveryStatus.IN_TRANSIT_TO_BASE}
    ),
    DeliveryStatus.IN_TRANSIT_TO_BASE: frozenset({DeliveryStatus.AT_BASE}),
    DeliveryStatus.AT_BASE: frozenset(
        {
            DeliveryStatus.IN_TRANSIT_TO_DESTINATION,
            DeliveryStatus.AWAITING_COLLECTION,
        }
    ),
    DeliveryStatus.IN_TRANSIT_TO_DESTINATION: frozenset(
        {DeliveryStatus.AWAITING_COLLECTION}
    ),
    DeliveryStatus.AWAITING_COLLECTION: frozenset({DeliveryStatus.DELIVERED}),
    DeliveryStatus.DELIVERED: frozenset(),
}


@dataclass(frozen=True)
class Parcel:
    """Physical parcel handed in by a client."""

    width: int
    height: int
    depth: int
    is_fragile: bool = False
    is_priority: bool = False


@dataclass(frozen=True)
class Shelf:
    id: int
    tier: ShelfTier


@dataclass(frozen=True)
class Locker:
    """Locker station with a fixed, ordered set of shelves."""

    id: int
    distance_to_base: int
    shelves: tuple[Shelf, ...] = ()


@dataclass
class ShelfSpace:
    """Remaining capacity of a single shelf.

    Each axis is tracked on its own: reserving a parcel subtracts its
    width, height and depth from the matching axis. This is a coarse
    stand-in for real packing and is kept that way on purpose.
    """

    available_width: int
    available_height: int
    available_depth: int
    delivery_ids: set[int] = field(default_factory=set)

    @classmethod
    def for_tier(cls, tier: ShelfTier) -> ShelfSpace:
        width, height, depth = tier.dimensions
        return cls(
            available_width=width,
            available_height=height,
            available_depth=depth,
        )

    @property
    def available_volume(self) -> int:
        return (
            self.available_width
            * self.available_height
            * self.available_depth
        )

    def fits(self, parcel: Parcel) -> bool:
        return (
            parcel.width <= self.available_width
            and parcel.height <= self.available_height
            and parcel.depth <= self.available_depth
        )


@dataclass
class DeliveryRecord:
    """Ledger entry following one parcel from sender to recipient."""

    id: int
    parcel: Parcel
    from_locker_id: int
    to_locker_id: int
    security_code: str
    price: Decimal
    status: DeliveryStatus
    created_at: datetime
    picked_up_at: datetime | None = None
    arrived_at_base_at: datetime | None = None
    delivered_to_locker_at: datetime | None = None
    collected_at: datetime | None = None
    location_shelf_id: int | None = None

    def may_transition(self, status: DeliveryStatus) -> bool:
        return status in ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, status: DeliveryStatus) -> None:
        """Move to ``status``, refusing moves outside the lifecycle."""
        if not self.may_transition(status):
            raise InvalidTransitionError(self.id, self.status, status)
        self.status = status
