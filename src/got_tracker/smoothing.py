"""Centered moving-average smoothing of elevation and position.

Both smoothers average over a window of ``window`` points centered on each
point. Windows are clipped at the ends of the sequence, so the first and last
points are averaged over fewer neighbours. Only the smoothed field changes,
every other field of a point is carried over as-is.
"""

from collections.abc import Sequence

import numpy as np

from .models import TrackPoint


def normalize_window(window: int) -> int:
    """Force an odd window size by bumping even sizes up by one."""
    if window % 2 == 0:
        return window + 1
    return window


def _centered_mean(values: Sequence[float], window: int) -> np.ndarray:
    """Mean over a centered, boundary-clipped window for every index.

    ``np.convolve`` in ``full`` mode zero-pads the input, which for a sum is the
    same as clipping the window. Dividing by the number of real samples in each
    window gives the clipped mean.
    """
    data = np.asarray(values, dtype=float)
    half = window // 2
    kernel = np.ones(window)

    sums = np.convolve(data, kernel, mode="full")[half : half + len(data)]
    counts = np.convolve(np.ones(len(data)), kernel, mode="full")[half : half + len(data)]
    return sums / counts


def smooth_elevation(points: Sequence[TrackPoint], window: int) -> list[TrackPoint]:
    """Smooth the elevation of a point sequence with a centered moving average.

    Args:
        points: Ordered track points.
        window: Window size in points. Even sizes are incremented to the next
            odd size.

    Returns:
        New list of points with smoothed elevations. Empty input or a window
        below 1 returns the input unchanged.

    Example:
        >>> pts = [TrackPoint(0, 0, e) for e in (100, 103, 100)]
        >>> [p.elevation for p in smooth_elevation(pts, 3)]
        [101.5, 101.0, 101.5]
    """
    if window < 1 or len(points) == 0:
        return points
    window = normalize_window(window)

    elevations = _centered_mean([p.elevation for p in points], window)
    return [p.with_elevation(float(e)) for p, e in zip(points, elevations)]


def smooth_position(points: Sequence[TrackPoint], window: int) -> list[TrackPoint]:
    """Smooth latitude and longitude with a centered moving average.

    Works exactly like :func:`smooth_elevation` but on the position fields.
    Longitudes are averaged arithmetically, so tracks crossing the
    antimeridian are not handled.
    """
    if window < 1 or len(points) == 0:
        return points
    window = normalize_window(window)

    latitudes = _centered_mean([p.latitude for p in points], window)
    longitudes = _centered_mean([p.longitude for p in points], window)
    return [p.with_position(float(lat), float(lon)) for p, lat, lon in zip(points, latitudes, longitudes)]
