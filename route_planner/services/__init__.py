"""Business logic services."""

from route_planner.services.leg_service import LegService
from route_planner.services.location_service import LocationService
from route_planner.services.race_service import RaceService
from route_planner.services.rarity_ranker import RarityRanker
from route_planner.services.route_balancer import RouteBalancer
from route_planner.services.route_generator import RouteGenerator
from route_planner.services.route_service import RouteService

__all__ = [
    "LocationService",
    "RaceService",
    "LegService",
    "RouteService",
    "RouteGenerator",
    "RarityRanker",
    "RouteBalancer",
]
