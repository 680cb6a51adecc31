"""Persistent JSON config helpers.

Stores the UI theme, target file extension, hidden-file preference, and the
sheet preview row cap. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..reconfigure import DEFAULT_MAX_PREVIEW_ROWS
from ..sources.fs import DEFAULT_EXTENSION, normalize_extension

APP_NAME = "lazysheets"
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

    Filesystem errors are ignored so an unwritable config never stops the
    browser.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_extension() -> str:
    value = load_config().get("extension")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_EXTENSION
    return normalize_extension(value)


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else False


def load_max_preview_rows() -> int:
    """Return the sheet preview row cap; booleans and non-positive ints are ignored."""
    value = load_config().get("max_preview_rows")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_MAX_PREVIEW_ROWS
    return value
