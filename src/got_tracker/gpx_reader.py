"""Einlesen von GPX-Dateien in Trackpunkte.

Die Analyse selbst arbeitet nur auf :class:`~got_tracker.models.TrackPoint`;
dieses Modul übersetzt gpxpy-Objekte in diese Form.
"""

from pathlib import Path

import gpxpy
import gpxpy.gpx

from .exceptions import ParsingError
from .logger import get_logger
from .models import TrackCollection, TrackPoint

logger = get_logger()


def read_gpx_file(gpx_file: Path) -> gpxpy.gpx.GPX:
    """Liest eine GPX-Datei mit robustem Encoding-Handling.

    Probiert verschiedene Encoding-Strategien (UTF-8, Latin-1, CP1252) und
    behandelt BOM (Byte Order Mark) sowie führende Whitespaces.

    Args:
        gpx_file: Pfad zur GPX-Datei.

    Returns:
        Geparste GPX-Datei als gpxpy.gpx.GPX Objekt.

    Raises:
        ParsingError: Wenn die Datei nicht gelesen oder mit keinem Encoding
            geparst werden kann.
    """
    encodings = ["utf-8", "utf-8-sig", "latin-1", "cp1252"]
    last_error: Exception | None = None

    for encoding in encodings:
        try:
            content = gpx_file.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            last_error = e
            continue
        except OSError as e:
            raise ParsingError(gpx_file.name, str(e)) from e

        # Entferne BOM und führende Whitespaces/Newlines
        if content.startswith("\ufeff"):
            content = content[1:]
        content = content.lstrip()

        try:
            return gpxpy.parse(content)
        except gpxpy.gpx.GPXException as e:
            logger.debug(f"{gpx_file.name} mit Encoding {encoding} nicht lesbar: {e}")
            last_error = e

    raise ParsingError(gpx_file.name, str(last_error))


def _unique_name(name: str | None, index: int, taken: set[str]) -> str:
    """Vergibt einen eindeutigen Tracknamen (``Track <n>`` für namenlose Tracks)."""
    base = name.strip() if name and name.strip() else f"Track {index}"
    candidate = base
    n = 2
    while candidate in taken:
        candidate = f"{base} ({n})"
        n += 1
    return candidate


def load_tracks(gpx: gpxpy.gpx.GPX) -> TrackCollection:
    """Übersetzt die Tracks einer GPX-Datei in Trackpunkte.

    Fehlende Höhenwerte werden als 0.0 übernommen, fehlende Zeitstempel als None.
    Die Reihenfolge der Tracks, Segmente und Punkte bleibt erhalten.

    Args:
        gpx: Geparste GPX-Datei.

    Returns:
        Dictionary Trackname -> Liste von Segmenten -> Liste von Trackpunkten.
    """
    tracks: TrackCollection = {}

    for i, track in enumerate(gpx.tracks, start=1):
        name = _unique_name(track.name, i, set(tracks))
        segments = []
        missing_elevation = 0

        for seg in track.segments:
            points = []
            for p in seg.points:
                if p.elevation is None:
                    missing_elevation += 1
                points.append(
                    TrackPoint(
                        latitude=p.latitude,
                        longitude=p.longitude,
                        elevation=p.elevation if p.elevation is not None else 0.0,
                        time=p.time,
                    )
                )
            segments.append(points)

        if missing_elevation:
            logger.warning(f"{name}: {missing_elevation} Punkte ohne Höhenangabe, verwende 0 m")

        tracks[name] = segments

    return tracks


def load_gpx_tracks(gpx_file: Path) -> TrackCollection:
    """Liest eine GPX-Datei und gibt ihre Tracks als Trackpunkte zurück."""
    gpx = read_gpx_file(gpx_file)
    tracks = load_tracks(gpx)
    logger.info(f"{gpx_file.name}: {len(tracks)} Tracks gelesen")
    return tracks
