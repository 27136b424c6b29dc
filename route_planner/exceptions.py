"""Route planner errors."""


class RoutePlannerError(Exception):
    """Base class for route planner errors."""


class NotFoundError(RoutePlannerError):
    """A referenced record does not exist."""

    def __init__(self, resource: str, id: int):
        self.resource = resource
        self.id = id
        super().__init__(f"{resource} not found: {id}")


class RaceConfigurationError(RoutePlannerError):
    """The race cannot be planned as configured."""


class LegError(RoutePlannerError):
    """A leg cannot be created as requested."""


class RouteValidationError(RoutePlannerError):
    """Appending a leg would break a route invariant."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class RoutePersistenceError(RoutePlannerError):
    """A discovered route could not be committed."""


class DistanceLookupError(RoutePlannerError):
    """The distance service failed or returned no distance."""
