"""Unit tests for ride entity state transitions (State Pattern)."""

import pytest

from ridewise.domain.entities import (
    Driver,
    FareReceipt,
    InvalidStateTransition,
    Ride,
    Rider,
)
from ridewise.domain.enums import RideStatus, VehicleType


def _ride(status: RideStatus = RideStatus.REQUESTED) -> Ride:
    return Ride(
        id="RIDE0001",
        rider=Rider(id="RDR0001", name="Asha", location="Andheri"),
        distance_km=5.0,
        vehicle_type=VehicleType.CAR,
        status=status,
    )


class TestRideStateMachine:
    def test_initial_status_is_requested(self):
        ride = _ride()
        assert ride.status == RideStatus.REQUESTED
        assert ride.driver is None
        assert ride.fare_receipt is None

    # ── Valid transitions ─────────────────────────────────────────

    def test_requested_to_assigned(self):
        ride = _ride()
        ride.transition_to(RideStatus.ASSIGNED)
        assert ride.status == RideStatus.ASSIGNED

    def test_requested_to_cancelled(self):
        ride = _ride()
        ride.transition_to(RideStatus.CANCELLED)
        assert ride.status == RideStatus.CANCELLED

    def test_assigned_to_completed(self):
        ride = _ride(RideStatus.ASSIGNED)
        ride.transition_to(RideStatus.COMPLETED)
        assert ride.status == RideStatus.COMPLETED

    def test_assigned_to_cancelled(self):
        ride = _ride(RideStatus.ASSIGNED)
        ride.transition_to(RideStatus.CANCELLED)
        assert ride.status == RideStatus.CANCELLED

    # ── Invalid transitions ───────────────────────────────────────

    def test_requested_to_completed_fails(self):
        ride = _ride()
        with pytest.raises(InvalidStateTransition):
            ride.transition_to(RideStatus.COMPLETED)

    def test_completed_to_anything_fails(self):
        ride = _ride(RideStatus.COMPLETED)
        for status in RideStatus:
            assert not ride.can_transition_to(status)
        with pytest.raises(InvalidStateTransition):
            ride.transition_to(RideStatus.CANCELLED)

    def test_cancelled_to_anything_fails(self):
        ride = _ride(RideStatus.CANCELLED)
        with pytest.raises(InvalidStateTransition):
            ride.transition_to(RideStatus.ASSIGNED)


class TestRideHelpers:
    def test_assign_sets_driver_and_status(self):
        ride = _ride()
        driver = Driver(id="DRV0001", name="Ravi", location="Juhu")
        ride.assign(driver)
        assert ride.driver is driver
        assert ride.status == RideStatus.ASSIGNED

    def test_driver_is_set_at_most_once(self):
        ride = _ride()
        ride.assign(Driver(id="DRV0001", name="Ravi", location="Juhu"))
        with pytest.raises(InvalidStateTransition):
            ride.assign(Driver(id="DRV0002", name="Kiran", location="Worli"))
        assert ride.driver.id == "DRV0001"

    def test_complete_attaches_receipt(self):
        ride = _ride(RideStatus.ASSIGNED)
        receipt = FareReceipt(ride_id=ride.id, amount=155.0)
        ride.complete(receipt)
        assert ride.fare_receipt is receipt
        assert ride.status == RideStatus.COMPLETED

    def test_complete_from_requested_leaves_no_receipt(self):
        ride = _ride()
        with pytest.raises(InvalidStateTransition):
            ride.complete(FareReceipt(ride_id=ride.id, amount=10.0))
        assert ride.fare_receipt is None

    def test_receipt_is_immutable(self):
        receipt = FareReceipt(ride_id="RIDE0001", amount=70.0)
        with pytest.raises(AttributeError):
            receipt.amount = 0.0  # type: ignore[misc]
        assert receipt.generated_at.tzinfo is not None


class TestDriverReservation:
    def test_reserve_is_compare_and_set(self):
        driver = Driver(id="DRV0001", name="Ravi", location="Juhu")
        assert driver.reserve() is True
        assert driver.is_available is False
        assert driver.reserve() is False

    def test_release_and_counter(self):
        driver = Driver(id="DRV0001", name="Ravi", location="Juhu")
        driver.reserve()
        driver.release()
        driver.record_completed_ride()
        assert driver.is_available is True
        assert driver.rides_completed == 1
