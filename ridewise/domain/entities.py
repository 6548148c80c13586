"""
Domain entities with business logic.

Patterns used
-------------
- **State Pattern** on ``Ride``: enforces valid lifecycle transitions
  (REQUESTED -> ASSIGNED -> COMPLETED | CANCELLED).
- ``Driver.reserve`` is a compare-and-set on the availability flag so a
  driver can never be handed to two rides at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .enums import RIDE_TRANSITIONS, RideStatus, VehicleType


class InvalidStateTransition(Exception):
    """Raised when a ride status change violates the state machine."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class FareReceipt:
    ride_id: str
    amount: float
    generated_at: datetime = field(default_factory=_utcnow)


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Rider:
    id: str
    name: str
    location: str


@dataclass
class Driver:
    id: str
    name: str
    location: str
    is_available: bool = True
    rides_completed: int = 0

    def reserve(self) -> bool:
        """Flip to unavailable. Returns False if someone got here first."""
        if not self.is_available:
            return False
        self.is_available = False
        return True

    def release(self) -> None:
        self.is_available = True

    def record_completed_ride(self) -> None:
        self.rides_completed += 1


@dataclass
class Ride:
    id: str
    rider: Rider
    distance_km: float
    vehicle_type: VehicleType
    driver: Optional[Driver] = None
    status: RideStatus = RideStatus.REQUESTED
    fare_receipt: Optional[FareReceipt] = None
    requested_at: datetime = field(default_factory=_utcnow)

    def can_transition_to(self, new_status: RideStatus) -> bool:
        return new_status in RIDE_TRANSITIONS.get(self.status, set())

    def transition_to(self, new_status: RideStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        if not self.can_transition_to(new_status):
            raise InvalidStateTransition(
                f"Cannot transition from {self.status} to {new_status}"
            )
        self.status = new_status

    def assign(self, driver: Driver) -> None:
        if self.driver is not None:
            raise InvalidStateTransition(
                f"Ride {self.id} already has driver {self.driver.id}"
            )
        self.transition_to(RideStatus.ASSIGNED)
        self.driver = driver

    def complete(self, receipt: FareReceipt) -> None:
        self.transition_to(RideStatus.COMPLETED)
        self.fare_receipt = receipt

    def cancel(self) -> None:
        self.transition_to(RideStatus.CANCELLED)
