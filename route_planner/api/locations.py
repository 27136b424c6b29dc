"""Location API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.database import get_db
from route_planner.schemas import (
    LocationCreate,
    LocationListResponse,
    LocationResponse,
    LocationUpdate,
)
from route_planner.services import LocationService

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=LocationListResponse)
async def get_locations(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    """Get all locations ordered by name."""
    service = LocationService(db)
    locations, total = await service.get_locations(skip=skip, limit=limit)
    return LocationListResponse(items=locations, total=total)


@router.get("/{location_id}", response_model=LocationResponse)
async def get_location(
    location_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a location by ID."""
    service = LocationService(db)
    location = await service.get_location(location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.post("", response_model=LocationResponse, status_code=201)
async def create_location(
    data: LocationCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new location."""
    service = LocationService(db)
    if await service.name_taken(data.name):
        raise HTTPException(status_code=409, detail="Location name already exists")
    return await service.create_location(data)


@router.patch("/{location_id}", response_model=LocationResponse)
async def update_location(
    location_id: int,
    data: LocationUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a location."""
    service = LocationService(db)
    if data.name is not None and await service.name_taken(data.name, exclude_id=location_id):
        raise HTTPException(status_code=409, detail="Location name already exists")
    location = await service.update_location(location_id, data)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.delete("/{location_id}", status_code=204)
async def delete_location(
    location_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a location and every leg touching it."""
    service = LocationService(db)
    deleted = await service.delete_location(location_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Location not found")
