"""Command-line interface for GOT Tracker.

Run:
    got-tracker activity.gpx --timezone Europe/Warsaw
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

from .analyzer import TrackAnalyzer, build_reports
from .bucketing import MissingTimestampPolicy, resolve_timezone
from .config import get_config, load_config
from .exceptions import MissingTimestampError, ParsingError
from .gpx_reader import load_gpx_tracks
from .logger import setup_logger
from .models import TrackCollection
from .report import format_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="got-tracker", description="Distance, ascent and GOT points from GPX tracks"
    )
    parser.add_argument("gpx_files", nargs="+", type=Path, help="GPX file(s) to analyze")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--timezone", default=None, help="IANA timezone for day boundaries")
    parser.add_argument("--whole-track", action="store_true", help="report per track instead of per day")
    parser.add_argument("--window", type=int, default=None, help="moving-average window in points")
    parser.add_argument("--threshold", type=float, default=None, help="minimum climb run in meters")
    parser.add_argument("--workers", type=int, default=None, help="worker threads for independent days")
    parser.add_argument(
        "--skip-missing-time", action="store_true", help="drop points without timestamp instead of failing"
    )
    return parser


def _merge_collections(target: TrackCollection, tracks: TrackCollection, source: Path) -> None:
    """Adds tracks of one file, prefixing names that are already taken."""
    for name, segments in tracks.items():
        key = name if name not in target else f"{source.stem}: {name}"
        target[key] = segments


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.config is not None and not args.config.is_file():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1

    config = load_config(args.config) if args.config is not None else get_config()
    logger = setup_logger(config)

    tracks: TrackCollection = {}
    for gpx_file in tqdm(args.gpx_files, desc="Reading GPX files", disable=len(args.gpx_files) < 2):
        try:
            _merge_collections(tracks, load_gpx_tracks(gpx_file), gpx_file)
        except ParsingError as e:
            logger.error(str(e))
            print(f"Error reading GPX file: {e}", file=sys.stderr)
            return 1

    print(f"Successfully parsed {len(args.gpx_files)} GPX file(s). Found {len(tracks)} tracks.")

    analyzer = TrackAnalyzer(window_size=args.window, climb_threshold_m=args.threshold, max_workers=args.workers)

    if args.whole_track:
        tz = None
    else:
        tz = resolve_timezone(args.timezone or config.timezone.name, config.timezone.fallback)
    policy = MissingTimestampPolicy.SKIP if args.skip_missing_time else None

    try:
        results = analyzer.analyze(tracks, tz=tz, missing_timestamp=policy)
    except MissingTimestampError as e:
        logger.error(str(e))
        print(f"Error: {e} (use --skip-missing-time or --whole-track)", file=sys.stderr)
        return 1

    print()
    for line in format_report(build_reports(results)):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
