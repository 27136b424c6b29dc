"""Race planning operations: leg and route generation, ranking, selection."""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from route_planner.config import get_settings
from route_planner.database import get_db, get_session_factory
from route_planner.jobs import (
    JOB_GENERATE_LEGS,
    JOB_GENERATE_ROUTES,
    JOB_RANK_ROUTES,
    queue_job,
    run_generate_legs,
    run_generate_routes,
    run_rank_routes,
)
from route_planner.repositories import RaceRepository
from route_planner.schemas import (
    AutoSelectRequest,
    AutoSelectResponse,
    GenerateLegsRequest,
    JobAcceptedResponse,
)
from route_planner.services import RouteBalancer

router = APIRouter(prefix="/races/{race_id}", tags=["operations"])


async def _require_race(db: AsyncSession, race_id: int) -> None:
    if not await RaceRepository(db).get(race_id):
        raise HTTPException(status_code=404, detail="Race not found")


@router.post("/generate_legs", response_model=JobAcceptedResponse, status_code=202)
async def generate_legs(
    race_id: int,
    background_tasks: BackgroundTasks,
    data: GenerateLegsRequest | None = None,
    db: AsyncSession = Depends(get_db),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Start connecting every pair of locations in the race pool."""
    await _require_race(db, race_id)
    mock = data.mock if data else get_settings().mock_distances
    job = await queue_job(db, JOB_GENERATE_LEGS, {"race_id": race_id, "mock": mock})
    background_tasks.add_task(
        run_generate_legs,
        race_id,
        mock=mock,
        job_status_id=job.id,
        session_factory=session_factory,
    )
    return JobAcceptedResponse(job_status_id=job.id)


@router.post("/generate_routes", response_model=JobAcceptedResponse, status_code=202)
async def generate_routes(
    race_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Start generating every valid route for the race."""
    await _require_race(db, race_id)
    job = await queue_job(db, JOB_GENERATE_ROUTES, {"race_id": race_id})
    background_tasks.add_task(
        run_generate_routes,
        race_id,
        job_status_id=job.id,
        session_factory=session_factory,
    )
    return JobAcceptedResponse(job_status_id=job.id)


@router.post("/rank_routes", response_model=JobAcceptedResponse, status_code=202)
async def rank_routes(
    race_id: int,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Start scoring the race's complete routes by rarity."""
    await _require_race(db, race_id)
    job = await queue_job(db, JOB_RANK_ROUTES, {"race_id": race_id})
    background_tasks.add_task(
        run_rank_routes,
        race_id,
        job_status_id=job.id,
        session_factory=session_factory,
    )
    return JobAcceptedResponse(job_status_id=job.id)


@router.post("/auto_select", response_model=AutoSelectResponse)
async def auto_select(
    race_id: int,
    data: AutoSelectRequest,
    db: AsyncSession = Depends(get_db),
):
    """Pick ``count`` routes that spread teams evenly across checkpoints."""
    await _require_race(db, race_id)
    balancer = RouteBalancer(db)
    available = await balancer.available_count(race_id)
    if data.count < 1 or data.count > available:
        raise HTTPException(
            status_code=422,
            detail=f"Count must be between 1 and {available}",
        )
    route_ids = await balancer.select(race_id, data.count)
    return AutoSelectResponse(route_ids=route_ids)
