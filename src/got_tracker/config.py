"""Konfigurations-Management für GOT Tracker.

Lädt Konfiguration aus YAML-Datei mit Fallback auf Default-Werte.
"""

import copy
from pathlib import Path
from typing import Any

import yaml

from .logger import get_logger


class Config:
    """Zentrale Konfigurations-Klasse.

    Lädt Konfiguration aus config.yaml oder verwendet Defaults.

    Example:
        >>> config = Config()
        >>> print(config.get("analysis.climb_threshold_m"))
        1.5
        >>> print(config.timezone.name)
        Europe/Warsaw
    """

    DEFAULT_CONFIG = {
        "analysis": {
            "window_size": 3,
            "climb_threshold_m": 1.5,
            "earth_radius_km": 6371.0,
            "max_workers": 1,
        },
        "timezone": {"name": "Europe/Warsaw", "fallback": "UTC", "missing_timestamp": "reject"},
        "scoring": {"daily_limit": 50, "metres_per_point": 100.0},
        "logging": {"level": "INFO", "file": "logs/app.log"},
    }

    def __init__(self, config_path: Path = Path("config.yaml")):
        """Initialisiert Konfiguration.

        Args:
            config_path: Pfad zur YAML-Konfigurationsdatei (Default: config.yaml).
        """
        self._config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path

        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                user_config = yaml.safe_load(f) or {}
                self._merge_config(user_config)
        else:
            get_logger().debug(f"Keine {config_path} gefunden, verwende Default-Konfiguration")

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merged User-Config mit Defaults (Deep Merge)."""

        def deep_merge(base: dict, override: dict) -> dict:
            result = base.copy()
            for key, value in override.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = deep_merge(result[key], value)
                else:
                    result[key] = value
            return result

        self._config = deep_merge(self._config, user_config)

    def get(self, key: str, default: Any = None) -> Any:
        """Holt Konfigurations-Wert mit Dot-Notation.

        Args:
            key: Konfigurations-Key in Dot-Notation (z.B. "scoring.daily_limit").
            default: Rückgabewert falls Key nicht existiert.

        Returns:
            Konfigurations-Wert oder default.

        Example:
            >>> config = Config()
            >>> config.get("timezone.fallback")
            'UTC'
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def analysis(self) -> "AnalysisConfig":
        """Zugriff auf Analyse-Parameter (Glättung, Schwellwert)."""
        return AnalysisConfig(self._config["analysis"])

    @property
    def timezone(self) -> "TimezoneConfig":
        """Zugriff auf Zeitzonen-Konfiguration."""
        return TimezoneConfig(self._config["timezone"])

    @property
    def scoring(self) -> "ScoringConfig":
        """Zugriff auf GOT-Punkte-Konfiguration."""
        return ScoringConfig(self._config["scoring"])

    @property
    def logging(self) -> "LoggingConfig":
        """Zugriff auf Logging-Konfiguration."""
        return LoggingConfig(self._config["logging"])


class AnalysisConfig:
    """Helper-Klasse für Analyse-Parameter."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def window_size(self) -> int:
        return int(self._config["window_size"])

    @property
    def climb_threshold_m(self) -> float:
        return float(self._config["climb_threshold_m"])

    @property
    def earth_radius_km(self) -> float:
        return float(self._config["earth_radius_km"])

    @property
    def max_workers(self) -> int:
        return int(self._config["max_workers"])


class TimezoneConfig:
    """Helper-Klasse für Zeitzonen und Tagesaufteilung."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def name(self) -> str:
        return str(self._config["name"])

    @property
    def fallback(self) -> str:
        return str(self._config["fallback"])

    @property
    def missing_timestamp(self) -> str:
        return str(self._config["missing_timestamp"]).lower()


class ScoringConfig:
    """Helper-Klasse für GOT-Punkte."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def daily_limit(self) -> int:
        return int(self._config["daily_limit"])

    @property
    def metres_per_point(self) -> float:
        return float(self._config["metres_per_point"])


class LoggingConfig:
    """Helper-Klasse für Logging."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def level(self) -> str:
        return str(self._config["level"])

    @property
    def file(self) -> str:
        return str(self._config["file"] or "")


# Globale Config-Instanz
_global_config: Config | None = None


def get_config() -> Config:
    """Holt globale Konfigurations-Instanz (Singleton).

    Returns:
        Config-Instanz.
    """
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def load_config(config_path: Path) -> Config:
    """Ersetzt die globale Konfiguration durch die Datei unter config_path.

    Args:
        config_path: Pfad zur YAML-Konfigurationsdatei.

    Returns:
        Neue globale Config-Instanz.
    """
    global _global_config
    _global_config = Config(config_path)
    return _global_config


def reset_config() -> None:
    """Verwirft die globale Konfiguration (nächster get_config()-Aufruf lädt neu)."""
    global _global_config
    _global_config = None
