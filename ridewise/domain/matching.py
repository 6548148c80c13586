"""
Ride Matching  (Strategy Pattern)
=================================

Given a rider and the full driver pool (available or not), pick exactly
one **available** driver.

* **Nearest**      -- smallest placeholder distance between the rider's
  and the driver's location labels (see ``distance.py``).
* **Least active** -- smallest completed-ride counter; spreads work across
  the fleet.

Ties go to the first driver encountered in iteration order (strict ``<``
comparison).  Strategies are stateless and never mutate drivers, so a
single instance can be shared freely.

Complexity: O(D) per call, D = drivers in the pool.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from .distance import placeholder_distance
from .entities import Driver, Rider


class NoDriverAvailable(Exception):
    """Raised when the pool has no driver that can take the ride."""


# ── Strategy hierarchy ────────────────────────────────────────────────


class MatchingStrategy(ABC):
    name: str = ""

    @abstractmethod
    def find_driver(self, rider: Rider, drivers: Iterable[Driver]) -> Driver: ...


class NearestDriverStrategy(MatchingStrategy):
    name = "nearest"

    def find_driver(self, rider: Rider, drivers: Iterable[Driver]) -> Driver:
        nearest = None
        min_distance = None
        for driver in drivers:
            if not driver.is_available:
                continue
            d = placeholder_distance(rider.location, driver.location)
            if min_distance is None or d < min_distance:
                nearest, min_distance = driver, d

        if nearest is None:
            raise NoDriverAvailable("No available drivers found nearby")
        return nearest


class LeastActiveDriverStrategy(MatchingStrategy):
    name = "least_active"

    def find_driver(self, rider: Rider, drivers: Iterable[Driver]) -> Driver:
        least_active = None
        for driver in drivers:
            if not driver.is_available:
                continue
            if (
                least_active is None
                or driver.rides_completed < least_active.rides_completed
            ):
                least_active = driver

        if least_active is None:
            raise NoDriverAvailable("No available drivers found")
        return least_active


# ── Registry ──────────────────────────────────────────────────────────

MATCHING_STRATEGIES: dict[str, type[MatchingStrategy]] = {
    NearestDriverStrategy.name: NearestDriverStrategy,
    LeastActiveDriverStrategy.name: LeastActiveDriverStrategy,
}


def get_matching_strategy(name: str) -> MatchingStrategy:
    try:
        return MATCHING_STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown matching strategy {name!r}; "
            f"expected one of {sorted(MATCHING_STRATEGIES)}"
        ) from None
