"""
Shared test fixtures.

Everything is in-memory, so each test gets fresh directories, a fresh id
generator and a fresh application -- no database or network needed.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ridewise.api.app import create_app
from ridewise.config import Settings
from ridewise.domain.matching import NearestDriverStrategy
from ridewise.domain.pricing import DefaultFareStrategy
from ridewise.infrastructure.ids import IdGenerator
from ridewise.infrastructure.repositories import (
    DriverRepository,
    RideRepository,
    RiderRepository,
)
from ridewise.services.rides import RideService


# ── Directories ───────────────────────────────────────────────────────


@pytest.fixture
def ids() -> IdGenerator:
    return IdGenerator()


@pytest.fixture
def riders(ids) -> RiderRepository:
    return RiderRepository(ids)


@pytest.fixture
def drivers(ids) -> DriverRepository:
    return DriverRepository(ids)


@pytest.fixture
def rides(ids) -> RideRepository:
    return RideRepository(ids)


# ── Ride service ──────────────────────────────────────────────────────


@pytest.fixture
def make_service(rides, drivers):
    """Build a ``RideService`` over the shared fixtures with any strategies."""

    def _make(matching=None, fare=None) -> RideService:
        return RideService(
            rides=rides,
            drivers=drivers,
            matching_strategy=matching or NearestDriverStrategy(),
            fare_strategy=fare or DefaultFareStrategy(),
        )

    return _make


@pytest.fixture
def service(make_service) -> RideService:
    return make_service()


# ── API ───────────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by a freshly built app with empty directories."""
    app = create_app(Settings(seed_demo_data=False))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
