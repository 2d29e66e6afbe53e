"""Errors raised by the locker network engine."""

from __future__ import annotations

from typing import Any


class LockerServiceError(Exception):
    """Base class for errors caused by caller input."""


class LockerNotFoundError(LockerServiceError):
    """Referenced locker is not part of the configured topology."""

    def __init__(self, locker_id: int) -> None:
        self.locker_id = locker_id
        super().__init__(f"Locker {locker_id} not found")


class DeliveryNotFoundError(LockerServiceError):
    def __init__(self, delivery_id: int) -> None:
        self.delivery_id = delivery_id
        super().__init__(f"Delivery {delivery_id} not found")


class NoSpaceInLockerError(LockerServiceError):
    """No shelf in the locker can take the parcel, by tier or occupancy."""

    def __init__(self, locker_id: int) -> None:
        self.locker_id = locker_id
        super().__init__(
            f"No suitable shelf found in locker {locker_id} "
            "for the given parcel dimensions"
        )


class InvalidSecurityCodeError(LockerServiceError):
    def __init__(self, delivery_id: int) -> None:
        self.delivery_id = delivery_id
        super().__init__("Invalid security code provided")


class NotReadyForCollectionError(LockerServiceError):
    def __init__(self, delivery_id: int, status: Any) -> None:
        self.delivery_id = delivery_id
        self.status = status
        super().__init__(
            "Delivery is not ready for collection. "
            f"Current status: {status}"
        )


class DeliveryStateError(RuntimeError):
    """Ledger or shelf bookkeeping is inconsistent.

    Raised for bugs in allocation or placement bookkeeping, never for
    bad caller input. Callers are not expected to catch it.
    """


class InvalidTransitionError(DeliveryStateError):
    def __init__(self, delivery_id: int, current: Any, target: Any) -> None:
        self.delivery_id = delivery_id
        self.current = current
        self.target = target
        super().__init__(
            f"Delivery {delivery_id} cannot move from {current} to {target}"
        )
