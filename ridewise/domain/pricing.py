"""
Fare Engine  (Strategy Pattern)
===============================

Formula
-------
Fare = (Base_Fare + Distance x Rate_Per_KM) x Multiplier

* Base fare and per-km rate come from the vehicle's row in ``FARE_TABLE``.
  Anything not in the table is priced as an AUTO.
* **Multiplier** is 1.0 for the default strategy and 1.5 for peak hours.

A fare strategy only looks at the ride's vehicle type and distance, never
at its status or receipt.

Complexity: O(1) per fare calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple

from .entities import Ride
from .enums import VehicleType


class Rate(NamedTuple):
    base_fare: float
    rate_per_km: float


FARE_TABLE: dict[VehicleType, Rate] = {
    VehicleType.BIKE: Rate(30.0, 8.0),
    VehicleType.AUTO: Rate(50.0, 12.0),
    VehicleType.CAR: Rate(80.0, 15.0),
}

FALLBACK_RATE = FARE_TABLE[VehicleType.AUTO]


def rate_for(vehicle_type) -> Rate:
    return FARE_TABLE.get(vehicle_type, FALLBACK_RATE)


# ── Strategy hierarchy ────────────────────────────────────────────────


class FareStrategy(ABC):
    name: str = ""

    @abstractmethod
    def calculate_fare(self, ride: Ride) -> float: ...


class DefaultFareStrategy(FareStrategy):
    name = "default"

    def calculate_fare(self, ride: Ride) -> float:
        rate = rate_for(ride.vehicle_type)
        return rate.base_fare + ride.distance_km * rate.rate_per_km


class PeakHourFareStrategy(FareStrategy):
    name = "peak_hour"

    def __init__(self, multiplier: float = 1.5):
        if multiplier < 0:
            raise ValueError("Peak multiplier cannot be negative")
        self.multiplier = multiplier

    def calculate_fare(self, ride: Ride) -> float:
        rate = rate_for(ride.vehicle_type)
        return (rate.base_fare + ride.distance_km * rate.rate_per_km) * self.multiplier


# ── Registry ──────────────────────────────────────────────────────────

FARE_STRATEGIES: dict[str, type[FareStrategy]] = {
    DefaultFareStrategy.name: DefaultFareStrategy,
    PeakHourFareStrategy.name: PeakHourFareStrategy,
}


def get_fare_strategy(name: str, peak_multiplier: float = 1.5) -> FareStrategy:
    if name == PeakHourFareStrategy.name:
        return PeakHourFareStrategy(peak_multiplier)
    try:
        return FARE_STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown fare strategy {name!r}; "
            f"expected one of {sorted(FARE_STRATEGIES)}"
        ) from None
