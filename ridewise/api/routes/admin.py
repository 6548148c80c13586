"""
Admin / observability endpoints
===============================

GET /api/v1/admin/stats  -- directory sizes, rides per status, strategies
GET /api/v1/admin/health -- simple health check
"""

from fastapi import APIRouter, Depends

from ridewise.api.dependencies import get_context
from ridewise.api.schemas import HealthResponse, StatsResponse
from ridewise.context import AppContext

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=StatsResponse, summary="System statistics")
async def get_stats(ctx: AppContext = Depends(get_context)):
    service = ctx.ride_service
    return StatsResponse(
        riders=ctx.riders.count(),
        drivers=ctx.drivers.count(),
        available_drivers=ctx.drivers.count_available(),
        rides_by_status=service.rides.count_by_status(),
        matching_strategy=service.matching_strategy.name,
        fare_strategy=service.fare_strategy.name,
    )


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
