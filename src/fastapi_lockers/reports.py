"""Reporting queries over the delivery ledger."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import NamedTuple

from fastapi_lockers.types import DeliveryRecord


class MonthlyIncome(NamedTuple):
    year: int
    month: int
    income: Decimal


def ensure_aware(value: datetime) -> datetime:
    """Read naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def monthly_income(
    records: Iterable[DeliveryRecord], now: datetime
) -> MonthlyIncome:
    """Sum of all delivery prices, labelled with the month of ``now``.

    Every record counts, whatever its status.
    """
    income = sum((record.price for record in records), Decimal("0.00"))
    return MonthlyIncome(year=now.year, month=now.month, income=income)


def average_delivery_time(
    records: Iterable[DeliveryRecord],
    period_start: datetime,
    period_end: datetime,
) -> timedelta:
    """Mean time from sending to collection for parcels collected in
    ``[period_start, period_end]``.

    Returns ``timedelta(0)`` when no parcel was collected in the period.
    """
    start = ensure_aware(period_start)
    end = ensure_aware(period_end)
    durations = [
        record.collected_at - record.created_at
        for record in records
        if record.collected_at is not None
        and start <= ensure_aware(record.collected_at) <= end
    ]
    if not durations:
        return timedelta(0)
    return sum(durations, timedelta(0)) / len(durations)
