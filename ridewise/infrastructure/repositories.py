"""
Repository Pattern -- in-memory directories for riders, drivers and rides.

Each repository owns a dict keyed by entity id.  Lookups hand back the
stored object itself (not a copy), so the ride service's updates to a
driver are visible through the driver directory.  Listings preserve
insertion order.
"""

from __future__ import annotations

from typing import Optional

from .ids import IdGenerator
from ridewise.domain.entities import Driver, Ride, Rider


class RiderRepository:
    def __init__(self, ids: IdGenerator):
        self.ids = ids
        self._riders: dict[str, Rider] = {}

    def register(self, name: str, location: str) -> Rider:
        rider = Rider(id=self.ids.next_rider_id(), name=name, location=location)
        self._riders[rider.id] = rider
        return rider

    def get_by_id(self, rider_id: str) -> Optional[Rider]:
        return self._riders.get(rider_id)

    def list_all(self) -> list[Rider]:
        return list(self._riders.values())

    def update_location(self, rider_id: str, location: str) -> Optional[Rider]:
        rider = self._riders.get(rider_id)
        if rider:
            rider.location = location
        return rider

    def count(self) -> int:
        return len(self._riders)


class DriverRepository:
    def __init__(self, ids: IdGenerator):
        self.ids = ids
        self._drivers: dict[str, Driver] = {}

    def register(self, name: str, location: str) -> Driver:
        driver = Driver(id=self.ids.next_driver_id(), name=name, location=location)
        self._drivers[driver.id] = driver
        return driver

    def get_by_id(self, driver_id: str) -> Optional[Driver]:
        return self._drivers.get(driver_id)

    def list_all(self) -> list[Driver]:
        return list(self._drivers.values())

    def list_available(self) -> list[Driver]:
        return [d for d in self._drivers.values() if d.is_available]

    def update_location(self, driver_id: str, location: str) -> Optional[Driver]:
        driver = self._drivers.get(driver_id)
        if driver:
            driver.location = location
        return driver

    def count(self) -> int:
        return len(self._drivers)

    def count_available(self) -> int:
        return len(self.list_available())


class RideRepository:
    def __init__(self, ids: IdGenerator):
        self.ids = ids
        self._rides: dict[str, Ride] = {}

    def next_id(self) -> str:
        return self.ids.next_ride_id()

    def add(self, ride: Ride) -> Ride:
        self._rides[ride.id] = ride
        return ride

    def get_by_id(self, ride_id: str) -> Optional[Ride]:
        return self._rides.get(ride_id)

    def list_all(self) -> list[Ride]:
        return list(self._rides.values())

    def count_by_status(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for ride in self._rides.values():
            counts[ride.status.value] = counts.get(ride.status.value, 0) + 1
        return counts
