"""FastAPI example app demonstrating fastapi-lockers."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from fastapi_lockers import (
    LockerNetworkConfig,
    LockerService,
    create_locker_router,
    register_exception_handlers,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# --- Network topology ---

config = LockerNetworkConfig(
    company_name="Demo Lockers",
    lockers=[
        {
            "id": 1,
            "distance_to_base": 100,
            "shelves": [
                {"id": 1, "tier": "small"},
                {"id": 2, "tier": "medium"},
                {"id": 3, "tier": "large"},
            ],
        },
        {
            "id": 2,
            "distance_to_base": 200,
            "shelves": [
                {"id": 4, "tier": "small"},
                {"id": 5, "tier": "medium"},
                {"id": 6, "tier": "large"},
            ],
        },
        {
            "id": 3,
            "distance_to_base": 300,
            "shelves": [
                {"id": 7, "tier": "small"},
                {"id": 8, "tier": "medium"},
                {"id": 9, "tier": "large"},
            ],
        },
    ],
)
service = LockerService.from_config(config)

# --- FastAPI app ---

app = FastAPI(title="fastapi-lockers demo")
app.include_router(
    create_locker_router(config=config, service=service),
    prefix="/api/lockers",
)
register_exception_handlers(app)


@app.get("/")
async def home() -> dict:
    """Network overview."""
    return {
        "company": service.company_name,
        "lockers": [
            {
                "id": locker.id,
                "distance_to_base": locker.distance_to_base,
                "shelves": [
                    {"id": shelf.id, "tier": str(shelf.tier)}
                    for shelf in locker.shelves
                ],
            }
            for locker in service.lockers
        ],
    }
