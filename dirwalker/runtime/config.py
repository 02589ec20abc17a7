"""Persistent JSON config helpers.

Stores the last scanned root, UI theme name, and audit-log rotation settings.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..audit_log import (
    DEFAULT_MAX_AGE_DAYS,
    DEFAULT_MAX_BACKUPS,
    DEFAULT_MAX_SIZE_MB,
    LogSettings,
    default_log_dir,
)

APP_NAME = "dirwalker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    interrupts a scan.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_last_root() -> str | None:
    """Load the root path submitted most recently, if any."""
    return _load_string("last_root")


def save_last_root(root: str) -> None:
    _save_string("last_root", root)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def save_theme_name(theme_name: str) -> None:
    _save_string("theme", theme_name)


def _coerce_positive_int(value: object, default: int) -> int:
    """Normalize JSON scalars for rotation limits.

    Booleans, non-integers, and values below 1 fall back to ``default``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < 1:
        return default
    return value


def load_log_settings(log_dir_override: Path | None = None) -> LogSettings:
    """Build audit-log settings from config, with an optional directory override.

    ``log_dir`` defaults to ``./dirwalker_logs`` under the working directory.
    """
    config = load_config()
    if log_dir_override is not None:
        log_dir = log_dir_override
    else:
        raw_dir = config.get("log_dir")
        log_dir = Path(raw_dir).expanduser() if isinstance(raw_dir, str) and raw_dir.strip() else default_log_dir()

    return LogSettings(
        log_dir=log_dir,
        max_size_mb=_coerce_positive_int(config.get("log_max_size_mb"), DEFAULT_MAX_SIZE_MB),
        max_backups=_coerce_positive_int(config.get("log_max_backups"), DEFAULT_MAX_BACKUPS),
        max_age_days=_coerce_positive_int(config.get("log_max_age_days"), DEFAULT_MAX_AGE_DAYS),
    )
