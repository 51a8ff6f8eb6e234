"""Data models for GOT Tracker."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class TrackPoint:
    """A single GPS/barometric sample.

    Attributes:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        elevation: Elevation in meters (may be negative).
        time: Timestamp of the sample, if the device recorded one.
    """

    latitude: float
    longitude: float
    elevation: float
    time: datetime | None = None

    def with_elevation(self, elevation: float) -> TrackPoint:
        """Return a copy of this point with a different elevation."""
        return replace(self, elevation=elevation)

    def with_position(self, latitude: float, longitude: float) -> TrackPoint:
        """Return a copy of this point with a different position."""
        return replace(self, latitude=latitude, longitude=longitude)


# track name -> segments -> ordered points
TrackCollection = dict[str, list[list[TrackPoint]]]


@dataclass
class Result:
    """Distance and ascent of one unit of work (a track or a day).

    Results are combined by summing both fields, so ``Result()`` is the
    neutral element and the order of merging does not change the totals.

    Attributes:
        distance_km: Horizontal distance in kilometers.
        ascent_m: Net ascent in meters.
    """

    distance_km: float = 0.0
    ascent_m: float = 0.0

    def __add__(self, other: Result) -> Result:
        return Result(
            distance_km=self.distance_km + other.distance_km,
            ascent_m=self.ascent_m + other.ascent_m,
        )

    def update(self, other: Result) -> None:
        """Accumulate another result into this one.

        Args:
            other: Another Result to merge.
        """
        self.distance_km += other.distance_km
        self.ascent_m += other.ascent_m


class ScoreCard(BaseModel):
    """GOT points derived from a Result.

    Attributes:
        distance_points: One point per kilometer (rounded).
        ascent_points: One point per 100 m of ascent (rounded).
        total_points: Sum of distance and ascent points, never clamped.
        capped_at: The daily limit if total_points reached it, otherwise None.
    """

    model_config = ConfigDict(frozen=True)

    distance_points: int = Field(..., ge=0)
    ascent_points: int = Field(..., ge=0)
    total_points: int = Field(..., ge=0)
    capped_at: int | None = Field(None, ge=0)

    @property
    def is_capped(self) -> bool:
        return self.capped_at is not None

    @property
    def creditable_points(self) -> int:
        """Points that actually count, i.e. the total clamped to the limit."""
        if self.capped_at is None:
            return self.total_points
        return min(self.total_points, self.capped_at)


class UnitReport(BaseModel):
    """Everything the reporting layer needs for one unit of work.

    Attributes:
        key: DayKey (``YYYY-MM-DD``) or the track name.
        result: Distance and ascent of the unit.
        score: GOT points derived from ``result``.
    """

    key: str = Field(..., min_length=1)
    result: Result
    score: ScoreCard
