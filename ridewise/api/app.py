"""
FastAPI application factory.

* Builds the application context (directories, strategies, ride service)
  and stores it on ``app.state`` for dependency injection.
* Registers routes for riders, drivers, rides and admin.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from ridewise.api.middleware import build_limiter
from ridewise.api.routes import admin, drivers, riders, rides
from ridewise.config import Settings, settings as default_settings
from ridewise.context import build_context
from ridewise.seed import seed_demo_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = app.state.context.ride_service
    logger.info(
        "RideWise started (matching=%s, fare=%s)",
        service.matching_strategy.name,
        service.fare_strategy.name,
    )
    yield
    logger.info("RideWise stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="RideWise API",
        description=(
            "Registers riders and drivers, matches ride requests to an "
            "available driver and prices completed rides.  Matching and "
            "fare calculation are pluggable strategies."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.context = build_context(settings)
    if settings.seed_demo_data:
        seed_demo_data(app.state.context)

    # Rate limiter
    app.state.limiter = build_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(riders.router, prefix="/api/v1")
    app.include_router(drivers.router, prefix="/api/v1")
    app.include_router(rides.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
