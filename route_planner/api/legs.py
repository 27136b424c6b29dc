"""Leg API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.database import get_db
from route_planner.repositories import RaceRepository
from route_planner.schemas import LegCreate, LegListResponse, LegResponse, MessageResponse
from route_planner.services import LegService

router = APIRouter(prefix="/legs", tags=["legs"])


@router.get("", response_model=LegListResponse)
async def get_legs(
    race_id: int | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
):
    """Get legs, optionally only those inside a race's pool."""
    location_ids = None
    if race_id is not None:
        race = await RaceRepository(db).get_with_locations(race_id)
        if not race:
            raise HTTPException(status_code=404, detail="Race not found")
        location_ids = {loc.id for loc in race.locations}
        location_ids |= {i for i in (race.start_id, race.finish_id) if i is not None}

    service = LegService(db)
    legs, total = await service.get_legs(location_ids=location_ids, skip=skip, limit=limit)
    return LegListResponse(count=total, legs=legs)


@router.post("", response_model=LegResponse, status_code=201)
async def create_leg(
    data: LegCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a leg and its mirror. The distance is looked up when omitted."""
    service = LegService(db)
    return await service.create_leg(data.start_id, data.finish_id, data.distance)


@router.delete("/{leg_id}", status_code=204)
async def delete_leg(
    leg_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a leg and its mirror."""
    service = LegService(db)
    deleted = await service.delete_leg(leg_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Leg not found")


@router.delete("", response_model=MessageResponse)
async def delete_all_legs(db: AsyncSession = Depends(get_db)):
    """Delete every leg."""
    service = LegService(db)
    count = await service.delete_all_legs()
    return MessageResponse(message="All legs deleted", count=count)
