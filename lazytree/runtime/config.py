"""Persistent JSON config helpers.

Stores the UI theme, hidden-file preference, indent unit, and log destination.
Malformed or missing config falls back to defaults; write failures are ignored.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_INDENT_UNIT = " "
MAX_INDENT_UNIT = 8


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
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


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_indent_unit() -> str:
    """Return the per-depth indent string (1-8 whitespace chars, default one space)."""
    value = load_config().get("indent_unit")
    if isinstance(value, bool):
        return DEFAULT_INDENT_UNIT
    if isinstance(value, int):
        value = " " * value
    if not isinstance(value, str) or not value:
        return DEFAULT_INDENT_UNIT
    if len(value) > MAX_INDENT_UNIT or not value.isspace() or "\t" in value:
        return DEFAULT_INDENT_UNIT
    return value


def load_log_spec() -> str | None:
    """Load the log destination list (see :mod:`.logs`), ``None`` when unset."""
    value = load_config().get("log")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
