"""Conversion of distance and ascent into GOT points.

Rounding rule: halves are rounded away from zero (12.5 -> 13, 0.5 -> 1).
Python's built-in ``round`` rounds halves to even and would turn 12.5 into
12, so it is not used here.
"""

import math

from .models import Result, ScoreCard

DAILY_POINT_LIMIT = 50
METRES_PER_POINT = 100.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def distance_points(distance_km: float) -> int:
    """One GOT point per kilometer."""
    return round_half_away_from_zero(distance_km)


def ascent_points(ascent_m: float, metres_per_point: float = METRES_PER_POINT) -> int:
    """One GOT point per ``metres_per_point`` meters of ascent (100 m by default)."""
    return round_half_away_from_zero(ascent_m / metres_per_point)


def score_result(
    result: Result, daily_limit: int = DAILY_POINT_LIMIT, metres_per_point: float = METRES_PER_POINT
) -> ScoreCard:
    """Compute the GOT score card for a result.

    The literal total is always kept. When it reaches ``daily_limit`` the card
    is marked as capped and only ``daily_limit`` points are creditable.

    Args:
        result: Distance and ascent of one unit.
        daily_limit: Maximum creditable points per unit.
        metres_per_point: Meters of ascent per GOT point.

    Returns:
        ScoreCard for the result.

    Example:
        >>> score_result(Result(distance_km=45.6, ascent_m=820)).capped_at
        50
    """
    dist = distance_points(result.distance_km)
    asc = ascent_points(result.ascent_m, metres_per_point)
    total = dist + asc

    return ScoreCard(
        distance_points=dist,
        ascent_points=asc,
        total_points=total,
        capped_at=daily_limit if total >= daily_limit else None,
    )
