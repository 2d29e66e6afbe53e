"""Locker network configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_lockers.types import ShelfTier


class ShelfSettings(BaseModel):
    id: int
    tier: ShelfTier


class LockerSettings(BaseModel):
    id: int
    distance_to_base: int = Field(ge=0)
    shelves: list[ShelfSettings] = Field(min_length=1)


class LockerNetworkConfig(BaseSettings):
    """Runtime config for the locker network."""

    model_config = SettingsConfigDict(env_prefix="LOCKERS_")

    company_name: str = "Parcel Locker Network"
    lockers: list[LockerSettings] = Field(default_factory=list)
    vehicle_max_width: int = Field(default=800, gt=0)
    vehicle_max_height: int = Field(default=200, gt=0)
    vehicle_max_depth: int = Field(default=200, gt=0)
    security_code_length: int = Field(default=6, gt=0)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> LockerNetworkConfig:
        locker_ids = [locker.id for locker in self.lockers]
        if len(locker_ids) != len(set(locker_ids)):
            raise ValueError("locker ids must be unique")
        shelf_ids = [
            shelf.id for locker in self.lockers for shelf in locker.shelves
        ]
        if len(shelf_ids) != len(set(shelf_ids)):
            raise ValueError("shelf ids must be unique across lockers")
        return self
