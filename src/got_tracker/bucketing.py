"""Splitting point sequences into calendar days of a fixed timezone."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone, tzinfo
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import MissingTimestampError
from .logger import get_logger
from .models import TrackPoint

logger = get_logger()

DAY_KEY_FORMAT = "%Y-%m-%d"


class MissingTimestampPolicy(str, Enum):
    """What to do with a point that has no timestamp when bucketing by day.

    REJECT aborts the whole run with MissingTimestampError, SKIP leaves the
    point out of every bucket.
    """

    REJECT = "reject"
    SKIP = "skip"


def resolve_timezone(name: str, fallback: str = "UTC") -> tzinfo:
    """Look up an IANA timezone, falling back when the name is unknown.

    Args:
        name: Timezone name like "Europe/Warsaw".
        fallback: Timezone used when ``name`` cannot be resolved.

    Returns:
        tzinfo instance. UTC if neither ``name`` nor ``fallback`` resolve.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        # Directory names like "Europe" raise IsADirectoryError
        logger.warning(f"Error loading timezone {name!r}: {e}. Using {fallback}.")

    if fallback.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(fallback)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.warning(f"Error loading fallback timezone {fallback!r}: {e}. Using UTC.")
        return timezone.utc


def day_key(timestamp: datetime, tz: tzinfo) -> str:
    """Return the ``YYYY-MM-DD`` date of ``timestamp`` in ``tz``.

    Naive timestamps are taken to be UTC, which is what GPX times are.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(tz).strftime(DAY_KEY_FORMAT)


def group_by_day(
    points: Sequence[TrackPoint],
    tz: tzinfo,
    missing_timestamp: MissingTimestampPolicy = MissingTimestampPolicy.REJECT,
) -> dict[str, list[TrackPoint]]:
    """Group points by their local calendar day.

    Args:
        points: Ordered track points, each carrying a timestamp.
        tz: Timezone that defines where a day starts and ends.
        missing_timestamp: Policy for points without a timestamp.

    Returns:
        Mapping of DayKey to the points of that day, in input order. Each
        bucket is a new list, so buckets never share storage with each other
        or with the input.

    Raises:
        MissingTimestampError: If a point has no timestamp and the policy is REJECT.
    """
    policy = MissingTimestampPolicy(missing_timestamp)
    grouped: dict[str, list[TrackPoint]] = {}
    skipped = 0

    for i, p in enumerate(points):
        if p.time is None:
            if policy is MissingTimestampPolicy.REJECT:
                raise MissingTimestampError(i)
            skipped += 1
            continue
        grouped.setdefault(day_key(p.time, tz), []).append(p)

    if skipped:
        logger.warning(f"Skipped {skipped} of {len(points)} track points without timestamp")

    return grouped
