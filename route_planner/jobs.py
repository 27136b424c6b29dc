"""Background job runners.

Each runner opens its own session, records progress on a JobStatus row and
marks it completed or failed. Failures are re-raised after being recorded.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from route_planner.database import AsyncSessionLocal
from route_planner.exceptions import NotFoundError
from route_planner.logging_utils import log_event
from route_planner.models import JobStatus
from route_planner.repositories import JobStatusRepository, LegRepository, RaceRepository
from route_planner.services import LegService, RarityRanker, RouteGenerator

JOB_GENERATE_LEGS = "generate_legs"
JOB_GENERATE_ROUTES = "generate_routes"
JOB_RANK_ROUTES = "rank_routes"

# Routes stored between progress updates
ROUTE_PROGRESS_EVERY = 100


async def queue_job(
    session: AsyncSession, job_type: str, metadata: dict[str, Any] | None = None
) -> JobStatus:
    """Create a pending job record and commit it so runners can see it."""
    job = await JobStatusRepository(session).queue(job_type, metadata)
    await session.commit()
    return job


async def _open_job(
    job_repo: JobStatusRepository,
    job_type: str,
    job_status_id: int | None,
    metadata: dict[str, Any],
) -> JobStatus:
    if job_status_id is None:
        return await job_repo.start(job_type, metadata)
    job = await job_repo.get_fresh(job_status_id)
    if job is None:
        raise NotFoundError("JobStatus", job_status_id)
    return await job_repo.mark_running(job)


async def _fail(
    session: AsyncSession,
    job_repo: JobStatusRepository,
    job_id: int,
    job_type: str,
    error: Exception,
) -> None:
    await session.rollback()
    job = await job_repo.get_fresh(job_id)
    await job_repo.fail(job, str(error))
    await session.commit()
    log_event(
        "job_failed",
        level=logging.ERROR,
        job_id=job_id,
        job_type=job_type,
        error=str(error),
        error_type=type(error).__name__,
    )


async def run_generate_routes(
    race_id: int,
    job_status_id: int | None = None,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> int:
    """Generate all routes for a race. Returns the number created."""
    async with session_factory() as session:
        job_repo = JobStatusRepository(session)
        job = await _open_job(job_repo, JOB_GENERATE_ROUTES, job_status_id, {"race_id": race_id})
        job_id = job.id
        await session.commit()

        async def on_progress(created: int) -> None:
            if created % ROUTE_PROGRESS_EVERY == 0:
                job.progress = created
                job.message = f"Generated {created} routes"

        try:
            created = await RouteGenerator(session).generate(race_id, on_progress)
            job.total = created
            await job_repo.complete(job, f"Generated {created} routes")
            await session.commit()
        except Exception as e:
            await _fail(session, job_repo, job_id, JOB_GENERATE_ROUTES, e)
            raise

    log_event(
        "job_completed", job_id=job_id, job_type=JOB_GENERATE_ROUTES, routes_created=created
    )
    return created


async def run_rank_routes(
    race_id: int,
    job_status_id: int | None = None,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> int:
    """Score every complete route of a race. Returns the number scored."""
    async with session_factory() as session:
        job_repo = JobStatusRepository(session)
        job = await _open_job(job_repo, JOB_RANK_ROUTES, job_status_id, {"race_id": race_id})
        job_id = job.id
        await session.commit()

        async def on_progress(scored: int, total: int) -> None:
            job.total = total
            await job_repo.tick(job, f"Scored route {scored}/{total}")
            if scored % ROUTE_PROGRESS_EVERY == 0:
                await session.commit()

        try:
            scored = await RarityRanker(session).rank(race_id, on_progress)
            await job_repo.complete(job, f"Ranked {scored} routes")
            await session.commit()
        except Exception as e:
            await _fail(session, job_repo, job_id, JOB_RANK_ROUTES, e)
            raise

    log_event("job_completed", job_id=job_id, job_type=JOB_RANK_ROUTES, scored=scored)
    return scored


async def run_generate_legs(
    race_id: int,
    mock: bool = False,
    job_status_id: int | None = None,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
    leg_service_factory=LegService,
) -> int:
    """
    Connect every pair of locations in a race's pool.

    With ``mock`` set, distances are drawn at random from the race's leg
    bounds instead of being looked up.

    Returns:
        Number of directed legs created
    """
    async with session_factory() as session:
        job_repo = JobStatusRepository(session)
        job = await _open_job(
            job_repo, JOB_GENERATE_LEGS, job_status_id, {"race_id": race_id, "mock": mock}
        )
        job_id = job.id
        await session.commit()

        async def on_progress(done: int, total: int) -> None:
            job.total = total
            await job_repo.tick(job, f"Processed origin {done}/{total}")
            await session.commit()

        try:
            race = await RaceRepository(session).get_with_locations(race_id)
            if race is None:
                raise NotFoundError("Race", race_id)

            pool_ids = sorted(
                {loc.id for loc in race.locations}
                | {i for i in (race.start_id, race.finish_id) if i is not None}
            )
            mock_bounds = (race.min_leg_distance_m, race.max_leg_distance_m) if mock else None
            created = await leg_service_factory(session).generate_legs(
                pool_ids, mock_bounds=mock_bounds, on_progress=on_progress
            )

            leg_count = await LegRepository(session).count()
            job.total = len(pool_ids)
            await job_repo.complete(job, f"Created legs. Total legs: {leg_count}")
            await session.commit()
        except Exception as e:
            await _fail(session, job_repo, job_id, JOB_GENERATE_LEGS, e)
            raise

    log_event(
        "job_completed", job_id=job_id, job_type=JOB_GENERATE_LEGS, legs_created=created
    )
    return created
