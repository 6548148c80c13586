"""
Ride Orchestrator
=================

Owns the ride collection, drives the ride state machine and calls the two
pluggable strategies.

Lifecycle
---------
1. ``request_ride``  -- match a driver, reserve it, record the ride as
   ASSIGNED.  All-or-nothing: on ``NoDriverAvailable`` no ride is stored,
   no id is consumed and no driver changes.
2. ``complete_ride`` -- price the ride, attach the receipt, free the
   driver and bump its completed-ride counter.
3. ``cancel_ride``   -- free the driver (if any); no receipt.

Complete/cancel on an unknown or ineligible ride is a no-op that returns
``False`` and logs a warning.

Concurrency safety
------------------
* Every mutating call runs under one ``RLock``, so reading the pool,
  matching, reserving and recording form a single critical section.
* ``Driver.reserve`` is a compare-and-set; a lost race surfaces as
  ``NoDriverAvailable`` rather than a double-booked driver.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from ridewise.domain.entities import FareReceipt, Ride, Rider
from ridewise.domain.enums import RideStatus, VehicleType
from ridewise.domain.matching import MatchingStrategy, NoDriverAvailable
from ridewise.domain.pricing import FareStrategy
from ridewise.infrastructure.repositories import DriverRepository, RideRepository

logger = logging.getLogger(__name__)


class RideService:
    def __init__(
        self,
        rides: RideRepository,
        drivers: DriverRepository,
        matching_strategy: MatchingStrategy,
        fare_strategy: FareStrategy,
    ):
        self.rides = rides
        self.drivers = drivers
        self.matching_strategy = matching_strategy
        self.fare_strategy = fare_strategy
        self._lock = threading.RLock()

    # ── Commands ──────────────────────────────────────────────────────

    def request_ride(
        self, rider: Rider, distance_km: float, vehicle_type: VehicleType
    ) -> Ride:
        with self._lock:
            driver = self.matching_strategy.find_driver(
                rider, self.drivers.list_all()
            )
            if not driver.reserve():
                raise NoDriverAvailable(f"Driver {driver.id} is already on a ride")

            ride = Ride(
                id=self.rides.next_id(),
                rider=rider,
                distance_km=distance_km,
                vehicle_type=vehicle_type,
            )
            ride.assign(driver)
            self.rides.add(ride)

        logger.info(
            "Ride %s assigned: rider=%s driver=%s (%s, %.1f km)",
            ride.id, rider.id, driver.id, vehicle_type.value, distance_km,
        )
        return ride

    def complete_ride(self, ride_id: str) -> bool:
        with self._lock:
            ride = self.rides.get_by_id(ride_id)
            if ride is None or not ride.can_transition_to(RideStatus.COMPLETED):
                self._log_ignored("complete", ride_id, ride)
                return False

            amount = self.fare_strategy.calculate_fare(ride)
            ride.complete(FareReceipt(ride_id=ride.id, amount=amount))
            ride.driver.release()
            ride.driver.record_completed_ride()

        logger.info(
            "Ride %s completed: fare=%.2f driver=%s", ride.id, amount, ride.driver.id
        )
        return True

    def cancel_ride(self, ride_id: str) -> bool:
        with self._lock:
            ride = self.rides.get_by_id(ride_id)
            if ride is None or not ride.can_transition_to(RideStatus.CANCELLED):
                self._log_ignored("cancel", ride_id, ride)
                return False

            ride.cancel()
            if ride.driver is not None:
                ride.driver.release()

        logger.info("Ride %s cancelled", ride.id)
        return True

    # ── Queries ───────────────────────────────────────────────────────

    def get_ride_by_id(self, ride_id: str) -> Optional[Ride]:
        return self.rides.get_by_id(ride_id)

    def get_all_rides(self) -> list[Ride]:
        return self.rides.list_all()

    # ── Internals ─────────────────────────────────────────────────────

    @staticmethod
    def _log_ignored(action: str, ride_id: str, ride: Optional[Ride]) -> None:
        if ride is None:
            logger.warning("Ignoring %s for unknown ride %s", action, ride_id)
        else:
            logger.warning(
                "Ignoring %s for ride %s in status %s",
                action, ride_id, ride.status.value,
            )
