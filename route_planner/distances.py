"""Distance unit conversions.

Leg distances are always stored in meters. Races keep their bounds in a
display unit (miles or kilometres).
"""

METERS_PER_MILE = 1609.344
KM_PER_MILE = 1.609344

UNIT_MILES = "mi"
UNIT_KILOMETERS = "km"


def mi_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def km_to_mi(km: float) -> float:
    return km / KM_PER_MILE


def mi_to_m(miles: float) -> float:
    return miles * METERS_PER_MILE


def m_to_mi(meters: float) -> float:
    return meters / METERS_PER_MILE


def km_to_m(km: float) -> float:
    return km * 1000.0


def m_to_km(meters: float) -> float:
    return meters / 1000.0


def to_meters(value: float, unit: str) -> float:
    """Convert a value in ``unit`` to meters."""
    if unit == UNIT_MILES:
        return mi_to_m(value)
    if unit == UNIT_KILOMETERS:
        return km_to_m(value)
    raise ValueError(f"Unknown distance unit: {unit}")


def from_meters(meters: float, unit: str) -> float:
    """Convert meters to ``unit``."""
    if unit == UNIT_MILES:
        return m_to_mi(meters)
    if unit == UNIT_KILOMETERS:
        return m_to_km(meters)
    raise ValueError(f"Unknown distance unit: {unit}")


def m_to_s(meters: float | None, unit: str | None = None) -> str:
    """Format meters for display in ``unit``."""
    if meters is None:
        return "?"
    if unit == UNIT_MILES:
        return f"{round(m_to_mi(meters), 2)} mi"
    if unit == UNIT_KILOMETERS:
        return f"{int(meters // 1000)} km"
    return f"{meters:g} m"
