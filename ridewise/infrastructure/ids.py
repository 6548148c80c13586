"""
Monotonic identifier generation.

One counter per entity kind, guarded by a lock so concurrent registrations
never hand out the same id.  Format: ``<PREFIX><4-digit sequence>``,
e.g. ``RDR0001``, ``DRV0001``, ``RIDE0001``.
"""

from __future__ import annotations

import itertools
import threading


class IdGenerator:
    RIDER = "RDR"
    DRIVER = "DRV"
    RIDE = "RIDE"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: dict[str, itertools.count] = {}

    def next_id(self, prefix: str) -> str:
        with self._lock:
            counter = self._counters.setdefault(prefix, itertools.count(1))
            return f"{prefix}{next(counter):04d}"

    def next_rider_id(self) -> str:
        return self.next_id(self.RIDER)

    def next_driver_id(self) -> str:
        return self.next_id(self.DRIVER)

    def next_ride_id(self) -> str:
        return self.next_id(self.RIDE)
