"""Großkreis-Distanzen zwischen Trackpunkten."""

import math
from collections.abc import Sequence

from .models import TrackPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float, radius_km: float = EARTH_RADIUS_KM) -> float:
    """Berechnet die Distanz zwischen zwei Koordinaten in Kilometern.

    Verwendet die Haversine-Formel für Großkreisberechnungen auf einer Kugel.
    Koordinaten außerhalb des gültigen Bereichs werden nicht geprüft; das
    Ergebnis ist dann numerisch definiert, aber bedeutungslos.

    Args:
        lat1: Breitengrad Punkt 1 in Dezimalgrad.
        lon1: Längengrad Punkt 1 in Dezimalgrad.
        lat2: Breitengrad Punkt 2 in Dezimalgrad.
        lon2: Längengrad Punkt 2 in Dezimalgrad.
        radius_km: Mittlerer Erdradius (Default: 6371.0 km).

    Returns:
        Distanz in Kilometern als float.

    Example:
        >>> distance = haversine_km(52.5200, 13.4050, 48.1351, 11.5820)  # Berlin -> München
        >>> print(f"{distance:.1f} km")
        504.2 km
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * radius_km * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def great_circle_distance(p1: TrackPoint, p2: TrackPoint, radius_km: float = EARTH_RADIUS_KM) -> float:
    """Horizontale Distanz zwischen zwei Trackpunkten in Kilometern (Höhe wird ignoriert)."""
    return haversine_km(p1.latitude, p1.longitude, p2.latitude, p2.longitude, radius_km)


def path_distance_km(points: Sequence[TrackPoint], radius_km: float = EARTH_RADIUS_KM) -> float:
    """Summiert die Distanzen aller aufeinanderfolgenden Punktpaare.

    Args:
        points: Geordnete Trackpunkte.
        radius_km: Mittlerer Erdradius.

    Returns:
        Gesamtdistanz in Kilometern, 0.0 bei weniger als zwei Punkten.
    """
    total = 0.0
    for i in range(1, len(points)):
        total += great_circle_distance(points[i - 1], points[i], radius_km)
    return total
