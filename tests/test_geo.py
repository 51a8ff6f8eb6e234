"""Unit-Tests für geo.py.

Testet die Großkreis-Distanzen:
- Haversine in Kilometern (haversine_km)
- Distanz zwischen Trackpunkten (great_circle_distance)
- Summierte Pfaddistanz (path_distance_km)
"""

import pytest

from got_tracker.geo import great_circle_distance, haversine_km, path_distance_km
from got_tracker.models import TrackPoint


class TestHaversine:
    """Tests für die haversine_km Funktion."""

    def test_haversine_same_point(self):
        """Testet Distanz zwischen identischen Punkten."""
        assert haversine_km(48.1351, 11.5820, 48.1351, 11.5820) == 0.0

    def test_haversine_berlin_to_munich(self):
        """Testet Distanz Berlin -> München (~504km)."""
        distance = haversine_km(52.5200, 13.4050, 48.1351, 11.5820)
        assert distance == pytest.approx(504.2, rel=0.01)

    def test_haversine_one_degree_latitude(self):
        """Ein Breitengrad entspricht R * pi / 180."""
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19493, rel=1e-6)

    def test_haversine_across_dateline(self):
        """Testet Distanzberechnung über die Datumsgrenze (~222km statt ~40000km)."""
        distance = haversine_km(0.0, 179.0, 0.0, -179.0)
        assert distance == pytest.approx(222.39, rel=0.01)

    def test_haversine_custom_radius(self):
        """Der Radius skaliert die Distanz linear."""
        base = haversine_km(10.0, 10.0, 11.0, 12.0)
        assert haversine_km(10.0, 10.0, 11.0, 12.0, radius_km=2 * 6371.0) == pytest.approx(2 * base)


class TestGreatCircleDistance:
    """Tests für great_circle_distance auf Trackpunkten."""

    def test_zero_for_same_point(self):
        p = TrackPoint(49.2, 20.0, 1500.0)
        assert great_circle_distance(p, p) == 0.0

    def test_symmetry(self):
        a = TrackPoint(49.2, 20.0, 1000.0)
        b = TrackPoint(49.25, 20.1, 1800.0)
        assert great_circle_distance(a, b) == great_circle_distance(b, a)

    def test_elevation_is_ignored(self):
        """Nur die horizontale Distanz zählt."""
        low = TrackPoint(49.2, 20.0, 0.0)
        high = TrackPoint(49.2, 20.0, 2000.0)
        assert great_circle_distance(low, high) == 0.0

    def test_out_of_range_coordinates_do_not_raise(self):
        a = TrackPoint(120.0, 400.0, 0.0)
        b = TrackPoint(-95.0, -200.0, 0.0)
        assert great_circle_distance(a, b) >= 0.0


class TestPathDistance:
    """Tests für path_distance_km."""

    def test_empty_and_single_point(self):
        assert path_distance_km([]) == 0.0
        assert path_distance_km([TrackPoint(50.0, 20.0, 0.0)]) == 0.0

    def test_sums_consecutive_pairs(self):
        points = [TrackPoint(0.0, 0.0, 0.0), TrackPoint(1.0, 0.0, 0.0), TrackPoint(2.0, 0.0, 0.0)]
        assert path_distance_km(points) == pytest.approx(2 * 111.19493, rel=1e-6)

    def test_back_and_forth_counts_both_ways(self):
        points = [TrackPoint(0.0, 0.0, 0.0), TrackPoint(1.0, 0.0, 0.0), TrackPoint(0.0, 0.0, 0.0)]
        assert path_distance_km(points) == pytest.approx(2 * 111.19493, rel=1e-6)
