"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ridewise.domain.enums import RideStatus, VehicleType


# ── Requests ──────────────────────────────────────────────────────────


class _Request(BaseModel):
    model_config = {"str_strip_whitespace": True}


class RegisterRequest(_Request):
    name: str = Field(..., min_length=1, max_length=120)
    location: str = Field(..., min_length=1, max_length=120)


class LocationUpdateRequest(_Request):
    location: str = Field(..., min_length=1, max_length=120)


class RideCreateRequest(_Request):
    rider_id: str = Field(..., min_length=1)
    distance_km: float = Field(..., gt=0, description="Trip length in km.")
    vehicle_type: VehicleType


# ── Responses ─────────────────────────────────────────────────────────


class RiderResponse(BaseModel):
    id: str
    name: str
    location: str

    model_config = {"from_attributes": True}


class DriverResponse(BaseModel):
    id: str
    name: str
    location: str
    is_available: bool
    rides_completed: int

    model_config = {"from_attributes": True}


class FareReceiptResponse(BaseModel):
    ride_id: str
    amount: float
    generated_at: datetime

    model_config = {"from_attributes": True}


class RideResponse(BaseModel):
    id: str
    rider_id: str
    driver_id: Optional[str] = None
    distance_km: float
    vehicle_type: VehicleType
    status: RideStatus
    fare_receipt: Optional[FareReceiptResponse] = None
    requested_at: datetime


class StatsResponse(BaseModel):
    riders: int
    drivers: int
    available_drivers: int
    rides_by_status: dict[str, int]
    matching_strategy: str
    fare_strategy: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
