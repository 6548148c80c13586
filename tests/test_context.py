"""Tests for settings-driven wiring and demo seeding."""

import pytest

from ridewise.config import Settings
from ridewise.context import build_context
from ridewise.domain.matching import LeastActiveDriverStrategy, NearestDriverStrategy
from ridewise.domain.pricing import DefaultFareStrategy, PeakHourFareStrategy
from ridewise.seed import DRIVERS, RIDERS, seed_demo_data


class TestBuildContext:
    def test_defaults(self):
        ctx = build_context(Settings())
        assert isinstance(ctx.ride_service.matching_strategy, NearestDriverStrategy)
        assert isinstance(ctx.ride_service.fare_strategy, DefaultFareStrategy)
        assert ctx.ride_service.drivers is ctx.drivers

    def test_strategies_selected_by_name(self):
        ctx = build_context(
            Settings(
                matching_strategy="least_active",
                fare_strategy="peak_hour",
                peak_multiplier=2.0,
            )
        )
        service = ctx.ride_service
        assert isinstance(service.matching_strategy, LeastActiveDriverStrategy)
        assert isinstance(service.fare_strategy, PeakHourFareStrategy)
        assert service.fare_strategy.multiplier == 2.0

    def test_unknown_strategy_fails_fast(self):
        with pytest.raises(ValueError):
            build_context(Settings(matching_strategy="teleport"))

    def test_contexts_do_not_share_state(self):
        a, b = build_context(Settings()), build_context(Settings())
        a.riders.register("Asha", "Andheri")
        assert b.riders.count() == 0
        assert b.riders.register("Ravi", "Juhu").id == "RDR0001"


class TestSeed:
    def test_seed_populates_directories(self):
        ctx = build_context(Settings())
        seed_demo_data(ctx)
        assert ctx.riders.count() == len(RIDERS)
        assert ctx.drivers.count() == len(DRIVERS)
        assert ctx.drivers.count_available() == len(DRIVERS)

    def test_seed_is_skipped_when_populated(self):
        ctx = build_context(Settings())
        seed_demo_data(ctx)
        seed_demo_data(ctx)
        assert ctx.riders.count() == len(RIDERS)
