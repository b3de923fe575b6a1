"""Terminal bootstrap helpers for ShadeFM startup and cleanup."""

import curses
import logging
import os
import sys
import termios

from ..constants import ESC_DELAY_MS

LOGGER = logging.getLogger(__name__)


def prepare_environment():
    """Set environment knobs curses reads before initscr()."""
    os.environ.setdefault('ESCDELAY', str(ESC_DELAY_MS))


def configure_terminal(stdscr):
    """Apply core curses terminal setup for blocking key reads."""
    try:
        curses.curs_set(0)
    except curses.error:
        LOGGER.debug('terminal cannot hide the cursor')
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(False)
    stdscr.timeout(-1)


def disable_flow_control(stdin_stream=None):
    """Disable XON/XOFF so Ctrl+S reaches the app.

    Returns the previous terminal attributes, or None when stdin is not a tty.
    """
    stream = sys.stdin if stdin_stream is None else stdin_stream
    try:
        fd = stream.fileno()
        attrs = termios.tcgetattr(fd)
    except (AttributeError, ValueError, OSError, termios.error):
        return None

    previous = [list(item) if isinstance(item, list) else item for item in attrs]
    attrs[0] &= ~(termios.IXON | termios.IXOFF)
    try:
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except termios.error:
        return None
    return previous


def restore_flow_control(previous, stdin_stream=None):
    """Restore terminal attributes saved by disable_flow_control()."""
    if previous is None:
        return
    stream = sys.stdin if stdin_stream is None else stdin_stream
    try:
        termios.tcsetattr(stream.fileno(), termios.TCSANOW, previous)
    except (AttributeError, ValueError, OSError, termios.error):
        LOGGER.debug('could not restore terminal attributes', exc_info=True)
