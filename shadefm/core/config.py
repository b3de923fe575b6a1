"""Persistent config loader/saver for ShadeFM."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ..theme import DEFAULT_THEME, THEMES

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Persistent user-facing configuration."""

    theme: str = DEFAULT_THEME
    show_hidden: bool = True
    show_clock: bool = True
    scroll_step: int = 1
    root: str = "."


def default_config_path() -> Path:
    """Return default config path (~/.config/shadefm/config.toml)."""
    return Path.home() / ".config" / "shadefm" / "config.toml"


def _coerce_bool(value, default=False):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in ("1", "true", "yes", "on"):
            return True
        if lower in ("0", "false", "no", "off"):
            return False
    return default


def _coerce_positive_int(value, default=1):
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _section(raw: dict, name: str) -> dict:
    section = raw.get(name, {})
    return section if isinstance(section, dict) else {}


def _normalize_config(raw: dict) -> AppConfig:
    ui = _section(raw, "ui")
    session = _section(raw, "session")

    theme = str(ui.get("theme", DEFAULT_THEME)).strip().lower() or DEFAULT_THEME
    if theme not in THEMES:
        theme = DEFAULT_THEME

    root = str(session.get("root", ".")).strip() or "."
    return AppConfig(
        theme=theme,
        show_hidden=_coerce_bool(ui.get("show_hidden"), default=True),
        show_clock=_coerce_bool(ui.get("show_clock"), default=True),
        scroll_step=_coerce_positive_int(ui.get("scroll_step"), default=1),
        root=root,
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        LOGGER.warning("ignoring invalid config %s: %s", cfg_path, exc)
        return AppConfig()
    return _normalize_config(raw)


def _toml_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def serialize_config(config: AppConfig) -> str:
    """Serialize AppConfig as TOML text."""
    return (
        "# ShadeFM user configuration\n"
        "[ui]\n"
        f"theme = {_toml_string(config.theme)}\n"
        f"show_hidden = {'true' if config.show_hidden else 'false'}\n"
        f"show_clock = {'true' if config.show_clock else 'false'}\n"
        f"scroll_step = {int(config.scroll_step)}\n"
        "\n"
        "[session]\n"
        f"root = {_toml_string(config.root)}\n"
    )


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Persist config and return written path."""
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(serialize_config(config), encoding="utf-8", newline="\n")
    return cfg_path
