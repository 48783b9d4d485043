"""Persistent JSON config helpers.

Stores display preferences (hidden files, theme, syntax style, markdown
rendering, icons), the logging switch and an optional start directory.
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazyfm"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class BrowserSettings:
    """Resolved settings; CLI options are layered over these by ``lazyfm.cli``."""

    show_hidden: bool = False
    theme: str | None = None
    syntax_style: str | None = None
    pretty_markdown: bool = True
    enable_logging: bool = False
    start_dir: Path | None = None
    show_icons: bool = False


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = path or CONFIG_PATH
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], path: Path | None = None) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so a read-only config
    directory never stops the browser.
    """
    config_path = path or CONFIG_PATH
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", config_path, exc)


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    # Only explicit booleans count; "yes" or 1 fall back to the default.
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_name(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_show_hidden(path: Path | None = None) -> bool:
    return _load_bool(load_config(path), "show_hidden", False)


def save_show_hidden(show_hidden: bool, path: Path | None = None) -> None:
    """Persist hidden-file visibility preference as a boolean."""
    config = load_config(path)
    config["show_hidden"] = bool(show_hidden)
    save_config(config, path)


def load_theme_name(path: Path | None = None) -> str | None:
    return _load_name(load_config(path), "theme")


def save_theme_name(theme_name: str, path: Path | None = None) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config(path)
    config["theme"] = stripped
    save_config(config, path)


def load_settings(path: Path | None = None) -> BrowserSettings:
    """Read every known key once and return typed settings."""
    data = load_config(path)
    start_dir = _load_name(data, "start_dir")
    return BrowserSettings(
        show_hidden=_load_bool(data, "show_hidden", False),
        theme=_load_name(data, "theme"),
        syntax_style=_load_name(data, "syntax_style"),
        pretty_markdown=_load_bool(data, "pretty_markdown", True),
        enable_logging=_load_bool(data, "enable_logging", False),
        start_dir=Path(start_dir).expanduser() if start_dir else None,
        show_icons=_load_bool(data, "show_icons", False),
    )


__all__ = [
    "APP_NAME",
    "BrowserSettings",
    "CONFIG_PATH",
    "load_config",
    "load_settings",
    "load_show_hidden",
    "load_theme_name",
    "save_config",
    "save_show_hidden",
    "save_theme_name",
]
