"""
Ride endpoints
==============

POST  /api/v1/rides                    -- request a ride (matched immediately)
GET   /api/v1/rides                    -- list rides
GET   /api/v1/rides/{ride_id}          -- check status and fare
PATCH /api/v1/rides/{ride_id}/complete -- complete a ride and issue a receipt
PATCH /api/v1/rides/{ride_id}/cancel   -- cancel a ride
"""

from fastapi import APIRouter, Depends, HTTPException

from ridewise.api.dependencies import get_context
from ridewise.api.schemas import (
    ErrorResponse,
    FareReceiptResponse,
    RideCreateRequest,
    RideResponse,
)
from ridewise.context import AppContext
from ridewise.domain.entities import Ride
from ridewise.domain.matching import NoDriverAvailable

router = APIRouter(prefix="/rides", tags=["rides"])


def ride_to_response(ride: Ride) -> RideResponse:
    receipt = ride.fare_receipt
    return RideResponse(
        id=ride.id,
        rider_id=ride.rider.id,
        driver_id=ride.driver.id if ride.driver else None,
        distance_km=ride.distance_km,
        vehicle_type=ride.vehicle_type,
        status=ride.status,
        fare_receipt=(
            FareReceiptResponse(
                ride_id=receipt.ride_id,
                amount=receipt.amount,
                generated_at=receipt.generated_at,
            )
            if receipt
            else None
        ),
        requested_at=ride.requested_at,
    )


def _get_ride_or_404(ctx: AppContext, ride_id: str) -> Ride:
    ride = ctx.ride_service.get_ride_by_id(ride_id)
    if not ride:
        raise HTTPException(status_code=404, detail="Ride not found")
    return ride


@router.post(
    "",
    status_code=201,
    response_model=RideResponse,
    summary="Request a ride",
    responses={
        404: {"model": ErrorResponse, "description": "Rider not found."},
        409: {"model": ErrorResponse, "description": "No driver available."},
    },
)
async def request_ride(
    body: RideCreateRequest,
    ctx: AppContext = Depends(get_context),
):
    rider = ctx.riders.get_by_id(body.rider_id)
    if not rider:
        raise HTTPException(status_code=404, detail="Rider not found")

    try:
        ride = ctx.ride_service.request_ride(
            rider, body.distance_km, body.vehicle_type
        )
    except NoDriverAvailable as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return ride_to_response(ride)


@router.get("", response_model=list[RideResponse], summary="List rides")
async def list_rides(ctx: AppContext = Depends(get_context)):
    return [ride_to_response(r) for r in ctx.ride_service.get_all_rides()]


@router.get(
    "/{ride_id}",
    response_model=RideResponse,
    summary="Get ride status and fare",
)
async def get_ride(
    ride_id: str,
    ctx: AppContext = Depends(get_context),
):
    return ride_to_response(_get_ride_or_404(ctx, ride_id))


@router.patch(
    "/{ride_id}/complete",
    response_model=RideResponse,
    summary="Complete a ride",
    description=(
        "Transitions an ASSIGNED ride to COMPLETED, prices it with the "
        "configured fare strategy and frees the driver."
    ),
)
async def complete_ride(
    ride_id: str,
    ctx: AppContext = Depends(get_context),
):
    ride = _get_ride_or_404(ctx, ride_id)
    if not ctx.ride_service.complete_ride(ride_id):
        raise HTTPException(
            status_code=409,
            detail=f"Cannot complete ride in status {ride.status.value}",
        )
    return ride_to_response(ride)


@router.patch(
    "/{ride_id}/cancel",
    response_model=RideResponse,
    summary="Cancel a ride",
    description=(
        "Transitions a REQUESTED or ASSIGNED ride to CANCELLED. "
        "If a driver was assigned, the driver becomes available again."
    ),
)
async def cancel_ride(
    ride_id: str,
    ctx: AppContext = Depends(get_context),
):
    ride = _get_ride_or_404(ctx, ride_id)
    if not ctx.ride_service.cancel_ride(ride_id):
        raise HTTPException(
            status_code=409,
            detail=f"Cannot cancel ride in status {ride.status.value}",
        )
    return ride_to_response(ride)
