"""Shelf space bookkeeping and shelf selection."""

from __future__ import annotations

import logging

from fastapi_lockers.errors import DeliveryStateError
from fastapi_lockers.types import Locker, Parcel, Shelf, ShelfSpace

logger = logging.getLogger(__name__)


class ShelfSpaceTracker:
    """Remaining capacity per shelf id, created lazily at full tier size."""

    def __init__(self) -> None:
        self._spaces: dict[int, ShelfSpace] = {}

    def ensure(self, shelf: Shelf) -> ShelfSpace:
        space = self._spaces.get(shelf.id)
        if space is None:
            space = ShelfSpace.for_tier(shelf.tier)
            self._spaces[shelf.id] = space
        return space

    def get(self, shelf_id: int) -> ShelfSpace:
        try:
            return self._spaces[shelf_id]
        except KeyError as e:
            raise DeliveryStateError(
                f"Shelf {shelf_id} used before its space was initialized"
            ) from e

    def fits(self, shelf_id: int, parcel: Parcel) -> bool:
        return self.get(shelf_id).fits(parcel)

    def reserve(
        self, shelf_id: int, parcel: Parcel, delivery_id: int
    ) -> None:
        """Take the parcel's dimensions off each axis of the shelf.

        Callers must have checked ``fits`` first; no check happens here.
        """
        space = self.get(shelf_id)
        space.available_width -= parcel.width
        space.available_height -= parcel.height
        space.available_depth -= parcel.depth
        space.delivery_ids.add(delivery_id)

    def release(
        self, shelf_id: int, parcel: Parcel, delivery_id: int
    ) -> None:
        space = self.get(shelf_id)
        space.available_width += parcel.width
        space.available_height += parcel.height
        space.available_depth += parcel.depth
        space.delivery_ids.discard(delivery_id)


def find_shelf(
    locker: Locker, parcel: Parcel, tracker: ShelfSpaceTracker
) -> Shelf | None:
    """Pick the fullest shelf in ``locker`` that still takes ``parcel``.

    A shelf qualifies when both its tier's nominal dimensions and its
    tracked remaining space fit the parcel. Among those, the one with the
    smallest remaining volume wins so larger shelves stay free for larger
    parcels; ties go to the shelf listed first. Nothing is reserved.
    """
    best: Shelf | None = None
    best_volume = 0
    for shelf in locker.shelves:
        space = tracker.ensure(shelf)
        if not shelf.tier.accepts(parcel) or not space.fits(parcel):
            continue
        volume = space.available_volume
        if best is None or volume < best_volume:
            best = shelf
            best_volume = volume

    if best is None:
        logger.debug(
            "No shelf in locker %s fits parcel %sx%sx%s",
            locker.id,
            parcel.width,
            parcel.height,
            parcel.depth,
        )
    return best
