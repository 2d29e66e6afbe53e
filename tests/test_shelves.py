"""Shelf space tracker and shelf allocator tests."""

from __future__ import annotations

import pytest

from conftest import make_locker
from fastapi_lockers.errors import DeliveryStateError
from fastapi_lockers.shelves import ShelfSpaceTracker, find_shelf
from fastapi_lockers.types import Parcel, Shelf, ShelfSpace, ShelfTier


class TestShelfSpaceTracker:
    def test_ensure_starts_at_tier_dimensions(self) -> None:
        tracker = ShelfSpaceTracker()
        space = tracker.ensure(Shelf(id=1, tier=ShelfTier.MEDIUM))

        assert (
            space.available_width,
            space.available_height,
            space.available_depth,
        ) == (100, 60, 200)
        assert space.delivery_ids == set()

    def test_ensure_is_idempotent(self) -> None:
        tracker = ShelfSpaceTracker()
        shelf = Shelf(id=1, tier=ShelfTier.SMALL)
        first = tracker.ensure(shelf)
        tracker.reserve(1, Parcel(10, 10, 10), delivery_id=7)

        second = tracker.ensure(shelf)

        assert second is first
        assert second.available_width == 40
        assert second.delivery_ids == {7}

    def test_reserve_decrements_each_axis_independently(self) -> None:
        tracker = ShelfSpaceTracker()
        tracker.ensure(Shelf(id=1, tier=ShelfTier.LARGE))

        tracker.reserve(1, Parcel(300, 100, 100), delivery_id=1)

        space = tracker.get(1)
        assert space.available_width == 100
        assert space.available_height == 0
        assert space.available_depth == 200

    def test_release_is_inverse_of_reserve(self) -> None:
        tracker = ShelfSpaceTracker()
        tracker.ensure(Shelf(id=1, tier=ShelfTier.SMALL))
        parcel = Parcel(20, 30, 40)

        tracker.reserve(1, parcel, delivery_id=3)
        tracker.release(1, parcel, delivery_id=3)

        assert tracker.get(1) == ShelfSpace.for_tier(ShelfTier.SMALL)

    def test_fits_compares_every_axis(self) -> None:
        tracker = ShelfSpaceTracker()
        tracker.ensure(Shelf(id=1, tier=ShelfTier.SMALL))

        assert tracker.fits(1, Parcel(50, 60, 70))
        assert not tracker.fits(1, Parcel(51, 1, 1))
        assert not tracker.fits(1, Parcel(1, 61, 1))
        assert not tracker.fits(1, Parcel(1, 1, 71))

    def test_unknown_shelf_is_internal_fault(self) -> None:
        tracker = ShelfSpaceTracker()

        with pytest.raises(DeliveryStateError):
            tracker.reserve(99, Parcel(1, 1, 1), delivery_id=1)


class TestFindShelf:
    def _locker(self):
        return make_locker(
            1,
            100,
            [
                (1, ShelfTier.SMALL),
                (2, ShelfTier.MEDIUM),
                (3, ShelfTier.LARGE),
            ],
        )

    def test_small_parcel_goes_to_small_shelf(self) -> None:
        shelf = find_shelf(
            self._locker(), Parcel(40, 50, 60), ShelfSpaceTracker()
        )

        assert shelf == Shelf(id=1, tier=ShelfTier.SMALL)

    def test_selection_is_deterministic(self) -> None:
        picks = {
            find_shelf(
                self._locker(), Parcel(4, 5, 6), ShelfSpaceTracker()
            ).id
            for _ in range(5)
        }
        assert picks == {1}

    def test_parcel_too_big_for_tier_skips_shelf(self) -> None:
        shelf = find_shelf(
            self._locker(), Parcel(90, 50, 150), ShelfSpaceTracker()
        )

        assert shelf.tier is ShelfTier.MEDIUM

    def test_prefers_fullest_shelf(self) -> None:
        locker = make_locker(
            1, 100, [(1, ShelfTier.LARGE), (2, ShelfTier.LARGE)]
        )
        tracker = ShelfSpaceTracker()
        tracker.ensure(locker.shelves[1])
        tracker.reserve(2, Parcel(100, 10, 10), delivery_id=1)

        shelf = find_shelf(locker, Parcel(10, 10, 10), tracker)

        assert shelf.id == 2

    def test_tie_goes_to_first_shelf(self) -> None:
        locker = make_locker(
            1, 100, [(5, ShelfTier.MEDIUM), (6, ShelfTier.MEDIUM)]
        )

        shelf = find_shelf(locker, Parcel(10, 10, 10), ShelfSpaceTracker())

        assert shelf.id == 5

    def test_full_shelf_overflows_to_next_tier(self) -> None:
        locker = self._locker()
        tracker = ShelfSpaceTracker()
        first = find_shelf(locker, Parcel(50, 60, 70), tracker)
        tracker.reserve(first.id, Parcel(50, 60, 70), delivery_id=1)

        second = find_shelf(locker, Parcel(1, 1, 1), tracker)

        assert first.id == 1
        assert second.id == 2

    def test_returns_none_when_nothing_fits(self) -> None:
        shelf = find_shelf(
            self._locker(), Parcel(401, 1, 1), ShelfSpaceTracker()
        )

        assert shelf is None

    def test_does_not_reserve(self) -> None:
        tracker = ShelfSpaceTracker()

        find_shelf(self._locker(), Parcel(10, 10, 10), tracker)

        assert tracker.get(1) == ShelfSpace.for_tier(ShelfTier.SMALL)
