"""Shared fixtures for fastapi-lockers tests."""

from __future__ import annotations

import random
from datetime import UTC, datetime, timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fastapi_lockers.config import LockerNetworkConfig
from fastapi_lockers.exceptions import register_exception_handlers
from fastapi_lockers.router import create_locker_router
from fastapi_lockers.service import LockerService
from fastapi_lockers.types import Locker, Parcel, Shelf, ShelfTier


class FakeClock:
    """Controllable clock; each call returns the current instant."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 5, 15, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


def make_locker(
    locker_id: int,
    distance_to_base: int,
    shelves: list[tuple[int, ShelfTier]],
) -> Locker:
    return Locker(
        id=locker_id,
        distance_to_base=distance_to_base,
        shelves=tuple(Shelf(id=i, tier=t) for i, t in shelves),
    )


def mixed_topology() -> list[Locker]:
    """Three lockers, each with one shelf of every tier."""
    return [
        make_locker(
            1,
            100,
            [
                (1, ShelfTier.SMALL),
                (2, ShelfTier.MEDIUM),
                (3, ShelfTier.LARGE),
            ],
        ),
        make_locker(
            2,
            200,
            [
                (4, ShelfTier.SMALL),
                (5, ShelfTier.MEDIUM),
                (6, ShelfTier.LARGE),
            ],
        ),
        make_locker(
            3,
            300,
            [
                (7, ShelfTier.SMALL),
                (8, ShelfTier.MEDIUM),
                (9, ShelfTier.LARGE),
            ],
        ),
    ]


def large_only_topology(shelves_per_locker: int = 4) -> list[Locker]:
    lockers = []
    shelf_id = 0
    for locker_id, distance in ((1, 100), (2, 200), (3, 300)):
        shelves = []
        for _ in range(shelves_per_locker):
            shelf_id += 1
            shelves.append((shelf_id, ShelfTier.LARGE))
        lockers.append(make_locker(locker_id, distance, shelves))
    return lockers


def small_parcel(**flags) -> Parcel:
    return Parcel(width=4, height=5, depth=6, **flags)


def medium_parcel(**flags) -> Parcel:
    return Parcel(width=90, height=50, depth=150, **flags)


def large_parcel(**flags) -> Parcel:
    return Parcel(width=200, height=90, depth=200, **flags)


MIXED_CONFIG = {
    "company_name": "Test Parcel Service",
    "lockers": [
        {
            "id": locker.id,
            "distance_to_base": locker.distance_to_base,
            "shelves": [
                {"id": shelf.id, "tier": str(shelf.tier)}
                for shelf in locker.shelves
            ],
        }
        for locker in mixed_topology()
    ],
}


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def service(clock) -> LockerService:
    return LockerService(
        mixed_topology(),
        company_name="Test Parcel Service",
        clock=clock,
        rng=random.Random(1234),
    )


@pytest.fixture()
def large_service(clock) -> LockerService:
    return LockerService(
        large_only_topology(), clock=clock, rng=random.Random(1234)
    )


@pytest.fixture()
def config() -> LockerNetworkConfig:
    return LockerNetworkConfig(**MIXED_CONFIG)


@pytest.fixture()
def client(config, clock):
    """TestClient over an app wired with the mixed topology."""
    service = LockerService.from_config(
        config, clock=clock, rng=random.Random(1234)
    )
    app = FastAPI()
    app.include_router(create_locker_router(config=config, service=service))
    register_exception_handlers(app)
    with TestClient(app) as test_client:
        test_client.service = service
        yield test_client
