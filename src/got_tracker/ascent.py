"""Höhenmeterberechnung mit Schwellwert (Hysterese) auf geglätteten Daten."""

from collections.abc import Sequence

from .models import TrackPoint


def cumulative_ascent(elevations: Sequence[float], threshold: float) -> float:
    """Berechnet die kumulierten Höhenmeter mit Mindest-Anstieg pro Anstiegsphase.

    Aufeinanderfolgende positive Höhendifferenzen werden zu einer Anstiegsphase
    aufsummiert. Endet die Phase (Differenz <= 0), zählt sie nur, wenn sie den
    Schwellwert erreicht; kleinere Phasen werden komplett verworfen und nicht
    anteilig gekürzt. Eine Phase, die bis zum letzten Punkt reicht, wird am Ende
    ebenfalls gewertet.

    Args:
        elevations: Geglättete Höhenwerte in Metern.
        threshold: Minimale Höhe einer Anstiegsphase in Metern. Werte <= 0
            deaktivieren die Rauschunterdrückung.

    Returns:
        Gesamter Anstieg in Metern, 0.0 bei weniger als zwei Werten.

    Example:
        >>> cumulative_ascent([100, 102, 101, 105], threshold=1.5)
        6.0
    """
    if len(elevations) < 2:
        return 0.0

    total_ascent = 0.0
    climb = 0.0
    prev_ele = elevations[0]

    for curr_ele in elevations[1:]:
        diff = curr_ele - prev_ele

        if diff > 0:
            climb += diff
        else:
            # Anstiegsphase beendet
            if climb >= threshold:
                total_ascent += climb
            climb = 0.0
        prev_ele = curr_ele

    if climb >= threshold:
        total_ascent += climb

    return float(total_ascent)


def calculate_cumulative_ascent(points: Sequence[TrackPoint], threshold: float) -> float:
    """Wie :func:`cumulative_ascent`, aber direkt auf einer Folge von Trackpunkten."""
    return cumulative_ascent([p.elevation for p in points], threshold)
