"""Pricing engine tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from conftest import make_locker
from fastapi_lockers.pricing import (
    apply_modifiers,
    calculate_base_price,
    calculate_price,
)
from fastapi_lockers.types import Parcel, ShelfTier

LOCKER_A = make_locker(1, 100, [(1, ShelfTier.SMALL)])
LOCKER_B = make_locker(2, 200, [(2, ShelfTier.SMALL)])


@pytest.mark.parametrize(
    ("tier", "expected"),
    [
        (ShelfTier.SMALL, Decimal("15.00")),
        (ShelfTier.MEDIUM, Decimal("30.00")),
        (ShelfTier.LARGE, Decimal("120.00")),
    ],
)
def test_base_price_is_distance_times_tariff(tier, expected) -> None:
    price = calculate_price(Parcel(40, 50, 60), LOCKER_A, LOCKER_B, tier)

    assert price == expected


def test_fragile_adds_thirty_percent() -> None:
    plain = calculate_price(
        Parcel(4, 5, 6), LOCKER_A, LOCKER_B, ShelfTier.SMALL
    )
    fragile = calculate_price(
        Parcel(4, 5, 6, is_fragile=True),
        LOCKER_A,
        LOCKER_B,
        ShelfTier.SMALL,
    )

    assert fragile == (plain * Decimal("1.3")).quantize(Decimal("0.01"))
    assert fragile == Decimal("19.50")


def test_priority_doubles_price() -> None:
    plain = calculate_price(
        Parcel(4, 5, 6), LOCKER_A, LOCKER_B, ShelfTier.MEDIUM
    )
    priority = calculate_price(
        Parcel(4, 5, 6, is_priority=True),
        LOCKER_A,
        LOCKER_B,
        ShelfTier.MEDIUM,
    )

    assert priority == 2 * plain


def test_fragile_and_priority_both_apply() -> None:
    price = calculate_price(
        Parcel(4, 5, 6, is_fragile=True, is_priority=True),
        LOCKER_A,
        LOCKER_B,
        ShelfTier.SMALL,
    )

    assert price == Decimal("39.00")


def test_price_is_strictly_monotonic_in_distance() -> None:
    parcel = Parcel(4, 5, 6)
    prices = [
        calculate_price(
            parcel,
            make_locker(1, distance, [(1, ShelfTier.SMALL)]),
            LOCKER_B,
            ShelfTier.SMALL,
        )
        for distance in range(0, 50)
    ]

    assert all(a < b for a, b in zip(prices, prices[1:]))


def test_rounds_half_away_from_zero() -> None:
    # 0.05 * 1.3 = 0.065 -> 0.07
    assert apply_modifiers(
        Decimal("0.05"), Parcel(1, 1, 1, is_fragile=True)
    ) == Decimal("0.07")


def test_zero_distance_is_free() -> None:
    home = make_locker(1, 0, [(1, ShelfTier.LARGE)])

    assert calculate_base_price(home, home, ShelfTier.LARGE) == 0
