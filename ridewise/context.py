"""
Application context -- wires one set of directories, strategies and the
ride service together.

Built once per application by ``build_context`` and handed to request
handlers via FastAPI dependency injection (see ``api/dependencies.py``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ridewise.config import Settings, settings as default_settings
from ridewise.domain.matching import get_matching_strategy
from ridewise.domain.pricing import get_fare_strategy
from ridewise.infrastructure.ids import IdGenerator
from ridewise.infrastructure.repositories import (
    DriverRepository,
    RideRepository,
    RiderRepository,
)
from ridewise.services.rides import RideService


@dataclass
class AppContext:
    settings: Settings
    riders: RiderRepository
    drivers: DriverRepository
    ride_service: RideService


def build_context(settings: Optional[Settings] = None) -> AppContext:
    settings = settings or default_settings
    ids = IdGenerator()
    riders = RiderRepository(ids)
    drivers = DriverRepository(ids)
    ride_service = RideService(
        rides=RideRepository(ids),
        drivers=drivers,
        matching_strategy=get_matching_strategy(settings.matching_strategy),
        fare_strategy=get_fare_strategy(
            settings.fare_strategy, peak_multiplier=settings.peak_multiplier
        ),
    )
    return AppContext(
        settings=settings, riders=riders, drivers=drivers, ride_service=ride_service
    )
