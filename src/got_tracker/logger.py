"""Zentrales Logging-Modul für GOT Tracker.

Module holen sich ihren Logger beim Import mit :func:`get_logger`. Dabei wird
nur ein Konsolen-Handler angelegt, damit ein reiner Import keine Log-Dateien
erzeugt. Die Datei-Ausgabe richtet erst :func:`setup_logger` ein, sobald die
Konfiguration feststeht (in der CLI nach dem Laden von ``--config``).
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

LOGGER_NAME = "got_tracker"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(_FORMATTER)
    return handler


def timestamped_log_file(base_path: Path) -> Path:
    """Hängt Datum und Uhrzeit an den Dateinamen an (logs/app.log -> logs/app_20240601_0930.log)."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M")
    return base_path.parent / f"{base_path.stem}_{timestamp}{base_path.suffix or '.log'}"


def setup_logger(
    config: Config | None = None,
    name: str = LOGGER_NAME,
    console_output: bool = True,
) -> logging.Logger:
    """Richtet den Logger anhand der Konfiguration (neu) ein.

    Vorhandene Handler werden geschlossen und ersetzt, ein zweiter Aufruf mit
    einer anderen Konfiguration wirkt also sofort auf Level und Log-Datei.

    Args:
        config: Konfiguration mit ``logging.level`` und ``logging.file``.
                Falls None, wird die globale Konfiguration verwendet.
                Ein leerer ``logging.file``-Eintrag deaktiviert das Datei-Logging.
        name: Name des Loggers (Default: "got_tracker").
        console_output: Wenn True, werden Warnungen und Fehler auf stderr ausgegeben.

    Returns:
        Konfigurierter Logger.

    Example:
        >>> from got_tracker.config import load_config
        >>> logger = setup_logger(load_config(Path("config.yaml")))
        >>> logger.debug("Debug-Information")
    """
    if config is None:
        from .config import get_config

        config = get_config()

    level = getattr(logging, config.logging.level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console_output:
        logger.addHandler(_console_handler())

    if config.logging.file:
        log_file = timestamped_log_file(Path(config.logging.file))
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(_FORMATTER)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Gibt den Logger zurück, bei Bedarf nur mit Konsolen-Handler.

    Args:
        name: Name des Loggers (Default: "got_tracker").

    Returns:
        Logger-Instanz.

    Example:
        >>> from got_tracker.logger import get_logger
        >>> logger = get_logger()
        >>> logger.warning("Nachricht")
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.addHandler(_console_handler())

    return logger
