"""Race API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.database import get_db
from route_planner.schemas import (
    RaceCreate,
    RaceDetailResponse,
    RaceListResponse,
    RaceResponse,
    RaceUpdate,
)
from route_planner.services import RaceService

router = APIRouter(prefix="/races", tags=["races"])


@router.get("", response_model=RaceListResponse)
async def get_races(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    """Get all races with pagination."""
    service = RaceService(db)
    races, total = await service.get_races(skip=skip, limit=limit)
    return RaceListResponse(items=races, total=total)


@router.get("/{race_id}", response_model=RaceDetailResponse)
async def get_race(
    race_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a race by ID with its location pool."""
    service = RaceService(db)
    race = await service.get_race(race_id)
    if not race:
        raise HTTPException(status_code=404, detail="Race not found")
    return race


@router.post("", response_model=RaceResponse, status_code=201)
async def create_race(
    data: RaceCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new race."""
    service = RaceService(db)
    return await service.create_race(data)


@router.patch("/{race_id}", response_model=RaceResponse)
async def update_race(
    race_id: int,
    data: RaceUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a race."""
    service = RaceService(db)
    race = await service.update_race(race_id, data)
    if not race:
        raise HTTPException(status_code=404, detail="Race not found")
    return race


@router.post("/{race_id}/duplicate", response_model=RaceResponse, status_code=201)
async def duplicate_race(
    race_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Copy a race's settings and pool into a new race."""
    service = RaceService(db)
    race = await service.duplicate_race(race_id)
    if not race:
        raise HTTPException(status_code=404, detail="Race not found")
    return race


@router.delete("/{race_id}", status_code=204)
async def delete_race(
    race_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a race and its routes."""
    service = RaceService(db)
    deleted = await service.delete_race(race_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Race not found")
