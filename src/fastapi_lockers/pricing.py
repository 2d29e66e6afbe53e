"""Delivery price calculation."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from fastapi_lockers.types import Locker, Parcel, ShelfTier

FRAGILE_MULTIPLIER = Decimal("1.30")
PRIORITY_MULTIPLIER = Decimal("2.00")

_CENTS = Decimal("0.01")


def calculate_base_price(
    from_locker: Locker, to_locker: Locker, tier: ShelfTier
) -> Decimal:
    """Distance via the base times the tier's tariff."""
    distance = from_locker.distance_to_base + to_locker.distance_to_base
    return Decimal(distance) * tier.price_per_unit


def apply_modifiers(base_price: Decimal, parcel: Parcel) -> Decimal:
    """Apply fragile and priority surcharges and round to cents.

    ``ROUND_HALF_UP`` on ``Decimal`` rounds halves away from zero.
    """
    price = base_price
    if parcel.is_fragile:
        price *= FRAGILE_MULTIPLIER
    if parcel.is_priority:
        price *= PRIORITY_MULTIPLIER
    return price.quantize(_CENTS, rounding=ROUND_HALF_UP)


def calculate_price(
    parcel: Parcel,
    from_locker: Locker,
    to_locker: Locker,
    tier: ShelfTier,
) -> Decimal:
    return apply_modifiers(
        calculate_base_price(from_locker, to_locker, tier), parcel
    )
