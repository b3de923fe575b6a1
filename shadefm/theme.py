"""Theme definitions and lookup helpers for ShadeFM."""

from dataclasses import dataclass
import curses
from typing import Optional

from .constants import (
    C_BODY,
    C_BORDER,
    C_EDITOR,
    C_ERROR,
    C_FM_ACTION,
    C_FM_DIR,
    C_FM_FILE,
    C_FM_SELECTED,
    C_HELP,
    C_SESSION,
    C_VIEW_BINARY,
    C_VIEW_DECRYPTED,
    C_VIEW_TEXT,
)

# Test doubles may expose only a subset of color constants.
for _name, _fallback in {
    "COLOR_BLACK": 0,
    "COLOR_RED": 1,
    "COLOR_GREEN": 2,
    "COLOR_YELLOW": 3,
    "COLOR_BLUE": 4,
    "COLOR_CYAN": 6,
    "COLOR_WHITE": 7,
}.items():
    if not hasattr(curses, _name):
        setattr(curses, _name, _fallback)

DEFAULT_THEME = "classic"

# -1 keeps the terminal's own background (curses.use_default_colors).
DEFAULT_BG = -1

ROLE_TO_PAIR_ID = {
    "session": C_SESSION,
    "border": C_BORDER,
    "body": C_BODY,
    "file": C_FM_FILE,
    "directory": C_FM_DIR,
    "action": C_FM_ACTION,
    "selected": C_FM_SELECTED,
    "view_text": C_VIEW_TEXT,
    "view_decrypted": C_VIEW_DECRYPTED,
    "view_binary": C_VIEW_BINARY,
    "editor": C_EDITOR,
    "help": C_HELP,
    "error": C_ERROR,
}


def _mk_pairs(fg_bg):
    return {
        "session": fg_bg[0],
        "border": fg_bg[1],
        "body": fg_bg[2],
        "file": fg_bg[2],
        "directory": fg_bg[3],
        "action": fg_bg[4],
        "selected": fg_bg[5],
        "view_text": fg_bg[2],
        "view_decrypted": fg_bg[3],
        "view_binary": fg_bg[4],
        "editor": fg_bg[2],
        "help": fg_bg[1],
        "error": fg_bg[4],
    }


@dataclass(frozen=True)
class Theme:
    """ShadeFM semantic theme definition."""

    key: str
    pairs_base: dict[str, tuple[int, int]]


THEMES = {
    "classic": Theme(
        key="classic",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_WHITE, DEFAULT_BG),
                (curses.COLOR_WHITE, DEFAULT_BG),
                (curses.COLOR_BLUE, DEFAULT_BG),
                (curses.COLOR_RED, DEFAULT_BG),
                (curses.COLOR_YELLOW, DEFAULT_BG),
            )
        ),
    ),
    "mono": Theme(
        key="mono",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (curses.COLOR_WHITE, DEFAULT_BG),
                (curses.COLOR_WHITE, DEFAULT_BG),
                (curses.COLOR_WHITE, DEFAULT_BG),
                (curses.COLOR_WHITE, DEFAULT_BG),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
            )
        ),
    ),
    "hacker": Theme(
        key="hacker",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_BLACK, curses.COLOR_GREEN),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_CYAN, curses.COLOR_BLACK),
                (curses.COLOR_RED, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_GREEN),
            )
        ),
    ),
}


def get_theme(theme_key: Optional[str]) -> Theme:
    """Resolve theme by key with fallback to default."""
    if not theme_key:
        return THEMES[DEFAULT_THEME]
    return THEMES.get(theme_key, THEMES[DEFAULT_THEME])
