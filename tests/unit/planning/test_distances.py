"""Tests for distance conversions."""

import pytest

from route_planner.distances import (
    from_meters,
    km_to_m,
    km_to_mi,
    m_to_km,
    m_to_mi,
    m_to_s,
    mi_to_km,
    mi_to_m,
    to_meters,
)


class TestConversions:
    """Tests for unit conversion helpers."""

    def test_miles_and_meters(self):
        assert mi_to_m(1) == pytest.approx(1609.344)
        assert m_to_mi(1609.344) == pytest.approx(1.0)

    def test_kilometers_and_meters(self):
        assert km_to_m(2.5) == 2500.0
        assert m_to_km(2500.0) == 2.5

    def test_miles_and_kilometers(self):
        assert mi_to_km(1) == pytest.approx(1.609344)
        assert km_to_mi(1.609344) == pytest.approx(1.0)

    def test_to_meters_by_unit(self):
        assert to_meters(2, "km") == 2000.0
        assert to_meters(1, "mi") == pytest.approx(1609.344)
        assert from_meters(2000.0, "km") == 2.0

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            to_meters(1, "ft")
        with pytest.raises(ValueError):
            from_meters(1, "ft")


class TestMetersToString:
    """Tests for m_to_s."""

    def test_unknown_distance(self):
        assert m_to_s(None) == "?"

    def test_miles(self):
        assert m_to_s(1609.344, "mi") == "1.0 mi"
        assert m_to_s(2414.016, "mi") == "1.5 mi"

    def test_kilometers(self):
        assert m_to_s(2750.0, "km") == "2 km"

    def test_meters(self):
        assert m_to_s(850.0) == "850 m"
