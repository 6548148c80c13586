"""
Rider directory endpoints
=========================

POST  /api/v1/riders                   -- register a rider
GET   /api/v1/riders                   -- list riders
GET   /api/v1/riders/{rider_id}        -- look up a rider
PATCH /api/v1/riders/{rider_id}/location -- move a rider
"""

from fastapi import APIRouter, Depends, HTTPException

from ridewise.api.dependencies import get_context
from ridewise.api.schemas import LocationUpdateRequest, RegisterRequest, RiderResponse
from ridewise.context import AppContext

router = APIRouter(prefix="/riders", tags=["riders"])


@router.post(
    "",
    status_code=201,
    response_model=RiderResponse,
    summary="Register a rider",
)
async def register_rider(
    body: RegisterRequest,
    ctx: AppContext = Depends(get_context),
):
    return ctx.riders.register(body.name, body.location)


@router.get("", response_model=list[RiderResponse], summary="List riders")
async def list_riders(ctx: AppContext = Depends(get_context)):
    return ctx.riders.list_all()


@router.get("/{rider_id}", response_model=RiderResponse, summary="Get a rider")
async def get_rider(
    rider_id: str,
    ctx: AppContext = Depends(get_context),
):
    rider = ctx.riders.get_by_id(rider_id)
    if not rider:
        raise HTTPException(status_code=404, detail="Rider not found")
    return rider


@router.patch(
    "/{rider_id}/location",
    response_model=RiderResponse,
    summary="Update a rider's location",
)
async def update_rider_location(
    rider_id: str,
    body: LocationUpdateRequest,
    ctx: AppContext = Depends(get_context),
):
    rider = ctx.riders.update_location(rider_id, body.location)
    if not rider:
        raise HTTPException(status_code=404, detail="Rider not found")
    return rider
