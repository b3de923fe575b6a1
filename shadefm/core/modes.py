"""Session modes and their help text."""

from enum import Enum

from ..constants import HELP_EDITOR, HELP_MANAGER, HELP_VIEWER


class Mode(str, Enum):
    """Which component receives keyboard input."""

    MANAGER = "manager"
    VIEWER = "viewer"
    EDITOR = "editor"
    EXIT = "exit"


_HELP = {
    Mode.MANAGER: ("Manager mode", HELP_MANAGER),
    Mode.VIEWER: ("Viewer mode", HELP_VIEWER),
    Mode.EDITOR: ("Editor mode", HELP_EDITOR),
    Mode.EXIT: ("End the session", ()),
}


def help_lines(mode):
    """Return the title line and key summary shown for a mode."""
    title, keys = _HELP[Mode(mode)]
    if not keys:
        return [title]
    return [title, "; ".join(keys)]
