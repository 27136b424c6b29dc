"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from route_planner.api import (
    job_statuses_router,
    legs_router,
    locations_router,
    operations_router,
    races_router,
    routes_router,
)
from route_planner.config import get_settings
from route_planner.database import init_db
from route_planner.exceptions import (
    DistanceLookupError,
    LegError,
    NotFoundError,
    RaceConfigurationError,
    RoutePersistenceError,
    RouteValidationError,
)
from route_planner.logging_utils import get_logger, log_event

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    get_logger()
    await init_db()
    log_event("app_started", app_name=settings.app_name, version=settings.app_version)
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Scavenger-hunt race route planning service",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": f"{exc.resource} not found"})


@app.exception_handler(RouteValidationError)
async def route_validation_handler(request: Request, exc: RouteValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.errors})


@app.exception_handler(RaceConfigurationError)
@app.exception_handler(LegError)
async def unprocessable_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(DistanceLookupError)
async def distance_lookup_handler(request: Request, exc: DistanceLookupError):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(RoutePersistenceError)
async def persistence_handler(request: Request, exc: RoutePersistenceError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register API routers
app.include_router(locations_router, prefix="/api")
app.include_router(races_router, prefix="/api")
app.include_router(legs_router, prefix="/api")
app.include_router(routes_router, prefix="/api")
app.include_router(operations_router, prefix="/api")
app.include_router(job_statuses_router, prefix="/api")
