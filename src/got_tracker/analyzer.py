"""Whole-track and per-day analysis of track collections."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import tzinfo

from .ascent import calculate_cumulative_ascent
from .bucketing import MissingTimestampPolicy, group_by_day, resolve_timezone
from .config import get_config
from .geo import path_distance_km
from .logger import get_logger
from .models import Result, TrackCollection, TrackPoint, UnitReport
from .scoring import score_result
from .smoothing import smooth_elevation, smooth_position

logger = get_logger()

# (key, points) pair processed on its own
WorkUnit = tuple[str, list[TrackPoint]]


class TrackAnalyzer:
    """Computes distance and ascent for whole tracks or for calendar days.

    Every unit of work (one track segment, or the part of a segment that falls
    on one day) is processed on its own:

    1. **Smoothing**: elevation first, then latitude/longitude, both with a
       centered moving average of ``window_size`` points.
    2. **Distance**: haversine distance summed over consecutive smoothed points.
    3. **Ascent**: climb runs on the smoothed elevations, discarding runs below
       ``climb_threshold_m``.

    Smoothing never reaches across a segment or day boundary. Results that end
    up under the same key (several segments of one track, or several tracks on
    the same day) are summed afterwards.

    Attributes:
        window_size: Moving-average window in points.
        climb_threshold_m: Minimum climb run in meters that counts as ascent.
        earth_radius_km: Sphere radius used for the haversine distance.
        max_workers: Number of worker threads for the units. 1 runs sequentially.
    """

    def __init__(
        self,
        window_size: int | None = None,
        climb_threshold_m: float | None = None,
        earth_radius_km: float | None = None,
        max_workers: int | None = None,
    ):
        """Initializes the TrackAnalyzer.

        Args:
            window_size: Moving-average window. Default from config if None.
            climb_threshold_m: Climb threshold in meters. Default from config if None.
            earth_radius_km: Earth radius in km. Default from config if None.
            max_workers: Worker threads for independent units. Default from config if None.
        """
        config = get_config()

        self.window_size = window_size if window_size is not None else config.analysis.window_size
        self.climb_threshold_m = (
            climb_threshold_m if climb_threshold_m is not None else config.analysis.climb_threshold_m
        )
        self.earth_radius_km = earth_radius_km if earth_radius_km is not None else config.analysis.earth_radius_km
        self.max_workers = max_workers if max_workers is not None else config.analysis.max_workers

    def smooth(self, points: Sequence[TrackPoint]) -> list[TrackPoint]:
        """Applies elevation smoothing followed by position smoothing."""
        smoothed = smooth_elevation(points, self.window_size)
        return list(smooth_position(smoothed, self.window_size))

    def analyze_points(self, points: Sequence[TrackPoint]) -> Result:
        """Analyzes a single unit of work.

        Args:
            points: Ordered points of one segment or one day.

        Returns:
            Result with distance and ascent of the smoothed points.
        """
        smoothed = self.smooth(points)
        return Result(
            distance_km=path_distance_km(smoothed, self.earth_radius_km),
            ascent_m=calculate_cumulative_ascent(smoothed, self.climb_threshold_m),
        )

    def analyze_segments(self, segments: Sequence[Sequence[TrackPoint]]) -> Result:
        """Analyzes each segment on its own and sums the results."""
        total = Result()
        for segment in segments:
            total.update(self.analyze_points(segment))
        return total

    def analyze(
        self,
        tracks: TrackCollection,
        tz: tzinfo | str | None = None,
        missing_timestamp: MissingTimestampPolicy | str | None = None,
    ) -> dict[str, Result]:
        """Analyzes a track collection per track or per calendar day.

        Args:
            tracks: Mapping of track name to its segments of ordered points.
            tz: Timezone (or IANA name) for day bucketing. None analyzes whole
                tracks and keys the results by track name.
            missing_timestamp: Policy for points without a timestamp when
                bucketing by day. Default from config if None.

        Returns:
            Mapping of DayKey (or track name) to the summed Result.

        Raises:
            MissingTimestampError: If bucketing meets a point without a timestamp
                under the REJECT policy.
        """
        units = self._build_units(tracks, tz, missing_timestamp)
        logger.debug(f"Analyzing {len(units)} units (max_workers={self.max_workers})")

        if self.max_workers > 1 and len(units) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                unit_results = list(executor.map(lambda unit: self.analyze_points(unit[1]), units))
        else:
            unit_results = [self.analyze_points(points) for _, points in units]

        # Merge in unit order so results do not depend on max_workers
        results: dict[str, Result] = {}
        for (key, _), unit_result in zip(units, unit_results):
            results.setdefault(key, Result()).update(unit_result)

        for key, result in results.items():
            logger.info(f"{key} -> Distance: {result.distance_km:.2f} km, Ascent: {result.ascent_m:.0f} m")

        return results

    def _build_units(
        self,
        tracks: TrackCollection,
        tz: tzinfo | str | None,
        missing_timestamp: MissingTimestampPolicy | str | None,
    ) -> list[WorkUnit]:
        """Splits the collection into independent units of work."""
        units: list[WorkUnit] = []

        if tz is None:
            for name, segments in tracks.items():
                # Track without any segment still gets a (zero) result
                if not segments:
                    units.append((name, []))
                for segment in segments:
                    units.append((name, list(segment)))
            return units

        config = get_config()
        if isinstance(tz, str):
            tz = resolve_timezone(tz, config.timezone.fallback)
        policy = MissingTimestampPolicy(
            missing_timestamp if missing_timestamp is not None else config.timezone.missing_timestamp
        )

        for name, segments in tracks.items():
            logger.debug(f"Track {name}: {len(segments)} segments")
            for segment in segments:
                for day, points in group_by_day(segment, tz, policy).items():
                    units.append((day, points))
        return units


def build_reports(
    results: dict[str, Result], daily_limit: int | None = None, metres_per_point: float | None = None
) -> list[UnitReport]:
    """Converts results into score-carrying reports, sorted by key.

    Args:
        results: Output of :meth:`TrackAnalyzer.analyze`.
        daily_limit: Point ceiling per unit. Default from config if None.
        metres_per_point: Meters of ascent per point. Default from config if None.

    Returns:
        One UnitReport per key.
    """
    config = get_config()
    daily_limit = daily_limit if daily_limit is not None else config.scoring.daily_limit
    metres_per_point = metres_per_point if metres_per_point is not None else config.scoring.metres_per_point

    return [
        UnitReport(key=key, result=results[key], score=score_result(results[key], daily_limit, metres_per_point))
        for key in sorted(results)
    ]
