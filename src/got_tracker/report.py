"""Console report for analysis results."""

from collections.abc import Iterable

from .models import UnitReport


def format_unit(report: UnitReport) -> list[str]:
    """Format the three report lines of one unit."""
    key, result, score = report.key, report.result, report.score
    lines = [
        f"{key} -> Distance: {result.distance_km:.2f} km, Ascent: {result.ascent_m:.0f} m",
        f"{key} -> GOT distance points: {score.distance_points} pkt, GOT ascent points: {score.ascent_points} pkt",
    ]
    if score.is_capped:
        lines.append(f"{key} -> GOT points LIMIT achieved {score.capped_at}")
    else:
        lines.append(f"{key} -> GOT points achieved {score.total_points}")
    return lines


def format_report(reports: Iterable[UnitReport]) -> list[str]:
    """Format all units under a ``--- Results ---`` header."""
    lines = ["--- Results ---"]
    for report in reports:
        lines.extend(format_unit(report))
    return lines
