"""Route API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.database import get_db
from route_planner.schemas import (
    BulkSelectRequest,
    BulkSelectResponse,
    CustomRouteCreate,
    MessageResponse,
    RouteDetailResponse,
    RouteResponse,
    RouteUpdate,
)
from route_planner.services import RouteService

router = APIRouter(prefix="/races/{race_id}/routes", tags=["routes"])


@router.get("", response_model=list[RouteResponse])
async def get_routes(
    race_id: int,
    selected: bool | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Get a race's complete routes."""
    service = RouteService(db)
    return await service.get_routes(race_id, selected=selected)


@router.get("/{route_id}", response_model=RouteDetailResponse)
async def get_route(
    race_id: int,
    route_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a route with its legs."""
    service = RouteService(db)
    route = await service.get_route(race_id, route_id)
    if not route:
        raise HTTPException(status_code=404, detail="Route not found")
    return route


@router.post("", response_model=RouteDetailResponse, status_code=201)
async def create_custom_route(
    race_id: int,
    data: CustomRouteCreate,
    db: AsyncSession = Depends(get_db),
):
    """Build a route by hand through the given checkpoints."""
    service = RouteService(db)
    return await service.create_custom_route(race_id, data.location_ids, data.name)


@router.post("/select", response_model=BulkSelectResponse)
async def bulk_select(
    race_id: int,
    data: BulkSelectRequest,
    db: AsyncSession = Depends(get_db),
):
    """Make exactly the given routes selected."""
    service = RouteService(db)
    selected_ids = await service.bulk_select(race_id, data.ids)
    return BulkSelectResponse(selected_ids=selected_ids)


@router.patch("/{route_id}", response_model=RouteDetailResponse)
async def update_route(
    race_id: int,
    route_id: int,
    data: RouteUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a route's name, notes or selection."""
    service = RouteService(db)
    route = await service.update_route(race_id, route_id, data)
    if not route:
        raise HTTPException(status_code=404, detail="Route not found")
    return route


@router.delete("/{route_id}", status_code=204)
async def delete_route(
    race_id: int,
    route_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a route."""
    service = RouteService(db)
    deleted = await service.delete_route(race_id, route_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Route not found")


@router.delete("", response_model=MessageResponse)
async def delete_routes(
    race_id: int,
    ids: list[int] | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Delete the given routes, or every route of the race when no ids are given."""
    service = RouteService(db)
    count = await service.delete_routes(race_id, ids)
    return MessageResponse(message="Routes deleted", count=count)
