"""
Driver directory endpoints
==========================

POST  /api/v1/drivers                     -- register a driver
GET   /api/v1/drivers?available=true      -- list (optionally only available)
GET   /api/v1/drivers/{driver_id}         -- look up a driver
PATCH /api/v1/drivers/{driver_id}/location -- move a driver

Availability is read-only here; only the ride service flips it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ridewise.api.dependencies import get_context
from ridewise.api.schemas import DriverResponse, LocationUpdateRequest, RegisterRequest
from ridewise.context import AppContext

router = APIRouter(prefix="/drivers", tags=["drivers"])


@router.post(
    "",
    status_code=201,
    response_model=DriverResponse,
    summary="Register a driver",
)
async def register_driver(
    body: RegisterRequest,
    ctx: AppContext = Depends(get_context),
):
    return ctx.drivers.register(body.name, body.location)


@router.get("", response_model=list[DriverResponse], summary="List drivers")
async def list_drivers(
    available: Optional[bool] = None,
    ctx: AppContext = Depends(get_context),
):
    if available:
        return ctx.drivers.list_available()
    drivers = ctx.drivers.list_all()
    if available is False:
        drivers = [d for d in drivers if not d.is_available]
    return drivers


@router.get("/{driver_id}", response_model=DriverResponse, summary="Get a driver")
async def get_driver(
    driver_id: str,
    ctx: AppContext = Depends(get_context),
):
    driver = ctx.drivers.get_by_id(driver_id)
    if not driver:
        raise HTTPException(status_code=404, detail="Driver not found")
    return driver


@router.patch(
    "/{driver_id}/location",
    response_model=DriverResponse,
    summary="Update a driver's location",
)
async def update_driver_location(
    driver_id: str,
    body: LocationUpdateRequest,
    ctx: AppContext = Depends(get_context),
):
    driver = ctx.drivers.update_location(driver_id, body.location)
    if not driver:
        raise HTTPException(status_code=404, detail="Driver not found")
    return driver
