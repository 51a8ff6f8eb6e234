"""Tests für die Kommandozeile (cli.main)."""

import logging
from unittest.mock import patch

import pytest
import yaml

from got_tracker.cli import build_parser, main
from got_tracker.config import reset_config
from got_tracker.exceptions import ParsingError

# Drei Punkte nach Norden, je 0.01° (~1.11 km), 150 m Aufstieg
GPX_CONTENT = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Gorce</name>
    <trkseg>
      <trkpt lat="50.00" lon="20.0"><ele>100</ele><time>2024-06-01T10:00:00Z</time></trkpt>
      <trkpt lat="50.01" lon="20.0"><ele>150</ele><time>2024-06-01T10:20:00Z</time></trkpt>
      <trkpt lat="50.02" lon="20.0"><ele>250</ele><time>2024-06-01T10:40:00Z</time></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

NO_TIME_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk><trkseg>
    <trkpt lat="50.00" lon="20.0"><ele>100</ele></trkpt>
    <trkpt lat="50.01" lon="20.0"><ele>110</ele></trkpt>
  </trkseg></trk>
</gpx>
"""


@pytest.fixture(autouse=True)
def fresh_config(tmp_path, monkeypatch):
    """Eigenes Arbeitsverzeichnis je Test; --config ändert die globale Konfiguration nicht dauerhaft."""
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
    logger = logging.getLogger("got_tracker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def gpx_file(tmp_path):
    path = tmp_path / "gorce.gpx"
    path.write_text(GPX_CONTENT, encoding="utf-8")
    return path


def test_parser_defaults():
    args = build_parser().parse_args(["a.gpx"])
    assert args.window is None
    assert args.threshold is None
    assert not args.whole_track
    assert not args.skip_missing_time


def test_main_per_day(gpx_file, capsys):
    exit_code = main([str(gpx_file), "--timezone", "UTC", "--window", "1", "--threshold", "0"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "Found 1 tracks." in out
    assert "2024-06-01 -> Distance: 2.22 km, Ascent: 150 m" in out
    assert "2024-06-01 -> GOT distance points: 2 pkt, GOT ascent points: 2 pkt" in out
    assert "2024-06-01 -> GOT points achieved 4" in out


def test_main_whole_track(gpx_file, capsys):
    exit_code = main([str(gpx_file), "--whole-track", "--window", "1", "--threshold", "0"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "Gorce -> GOT points achieved 4" in out


def test_main_config_file(gpx_file, tmp_path, capsys):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        yaml.dump(
            {
                "analysis": {"window_size": 1, "climb_threshold_m": 0.0},
                "scoring": {"daily_limit": 3},
                "timezone": {"name": "UTC"},
            }
        ),
        encoding="utf-8",
    )

    exit_code = main([str(gpx_file), "--config", str(config_file)])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "2024-06-01 -> GOT points LIMIT achieved 3" in out


def test_main_two_files_same_track_name(gpx_file, tmp_path, capsys):
    second = tmp_path / "second.gpx"
    second.write_text(GPX_CONTENT, encoding="utf-8")

    exit_code = main([str(gpx_file), str(second), "--whole-track", "--window", "1", "--threshold", "0"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "Found 2 tracks." in out
    assert "second: Gorce -> GOT points achieved 4" in out


def test_main_missing_timestamps_rejected(tmp_path, capsys):
    path = tmp_path / "notime.gpx"
    path.write_text(NO_TIME_GPX, encoding="utf-8")

    assert main([str(path), "--timezone", "UTC"]) == 1
    assert "--skip-missing-time" in capsys.readouterr().err


def test_main_missing_timestamps_skipped(tmp_path, capsys):
    path = tmp_path / "notime.gpx"
    path.write_text(NO_TIME_GPX, encoding="utf-8")

    assert main([str(path), "--timezone", "UTC", "--skip-missing-time"]) == 0
    assert "--- Results ---" in capsys.readouterr().out


def test_main_unreadable_file(tmp_path, capsys):
    with patch("got_tracker.cli.load_gpx_tracks", side_effect=ParsingError("x.gpx", "kaputt")):
        assert main([str(tmp_path / "x.gpx")]) == 1
    assert "Error reading GPX file" in capsys.readouterr().err


def test_main_missing_config_file(gpx_file, tmp_path, capsys):
    assert main([str(gpx_file), "--config", str(tmp_path / "missing.yaml")]) == 1
    assert "config file not found" in capsys.readouterr().err


def test_main_config_logging_file_and_level(gpx_file, tmp_path):
    log_base = tmp_path / "mylog" / "run.log"
    config_file = tmp_path / "logging.yaml"
    config_file.write_text(
        yaml.dump({"logging": {"level": "DEBUG", "file": str(log_base)}, "timezone": {"name": "UTC"}}),
        encoding="utf-8",
    )

    assert main([str(gpx_file), "--config", str(config_file)]) == 0

    log_files = list((tmp_path / "mylog").glob("run_*.log"))
    assert len(log_files) == 1
    content = log_files[0].read_text(encoding="utf-8")
    assert "DEBUG" in content
    assert "Analyzing 1 units" in content
    # Standard-Logverzeichnis wird nicht angelegt
    assert not (tmp_path / "logs").exists()


def test_main_default_log_file_in_working_directory(gpx_file, tmp_path):
    assert main([str(gpx_file), "--timezone", "UTC"]) == 0
    assert list((tmp_path / "logs").glob("app_*.log"))
