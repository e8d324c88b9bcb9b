"""Settings persistence and logging setup."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class ArenaSettings:
    """Defaults applied when a scenario leaves a value unspecified."""

    default_max_rounds: int = 20
    default_seed: int = 0
    log_level: str = "WARNING"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    return Path.home() / ".config" / "battlesim"


def get_default_config_path() -> Path:
    """Return the config path, honouring BATTLESIM_CONFIG."""
    override = os.environ.get("BATTLESIM_CONFIG")
    if override:
        return Path(override)
    return get_user_data_dir() / "config.json"


def _positive_int(value: object, fallback: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return fallback


def _int(value: object, fallback: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return fallback


def _log_level(value: object, fallback: str) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return fallback


def load_settings(path: Path | None = None) -> ArenaSettings:
    """Load settings from disk or return defaults."""
    config_path = path or get_default_config_path()
    defaults = ArenaSettings()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return defaults
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return defaults
    if not isinstance(raw, dict):
        return defaults
    return ArenaSettings(
        default_max_rounds=_positive_int(raw.get("default_max_rounds"), defaults.default_max_rounds),
        default_seed=_int(raw.get("default_seed"), defaults.default_seed),
        log_level=_log_level(raw.get("log_level"), defaults.log_level),
    )


def save_settings(settings: ArenaSettings, path: Path | None = None) -> None:
    """Persist settings to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(asdict(settings), indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(settings: ArenaSettings) -> None:
    """Apply the configured level to the package logger."""
    logging.getLogger("battlesim").setLevel(settings.log_level)
