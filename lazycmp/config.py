"""Persistent JSON config helpers.

Stores the default ignore list, report style, and comparison cache bound.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazycmp"
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

    Filesystem errors are ignored so an unwritable config dir never aborts a
    comparison run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_ignore_names() -> list[str] | None:
    """Return the configured ignore list, or ``None`` to use the defaults.

    Only a JSON list of non-empty strings is accepted.
    """
    value = load_config().get("ignore")
    if not isinstance(value, list):
        return None
    if not all(isinstance(name, str) and name for name in value):
        return None
    return list(value)


def save_ignore_names(names: list[str]) -> None:
    config = load_config()
    config["ignore"] = [str(name) for name in names if str(name)]
    save_config(config)


def load_style_name() -> str | None:
    """Load persisted Pygments style name, returning ``None`` when unset/invalid."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_style_name(style: str) -> None:
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["style"] = stripped
    save_config(config)


def load_cache_max_size() -> int | None:
    """Return a positive configured cache bound.

    Booleans, non-integers, and values below 1 are treated as unset.
    """
    value = load_config().get("cache_max_size")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value <= 0:
        return None
    return value
