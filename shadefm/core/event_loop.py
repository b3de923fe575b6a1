"""Main loop helpers for ShadeFM."""

import curses

from .rendering import draw_editor, draw_manager, draw_session_bar, draw_status, draw_viewer, layout
from .modes import Mode


def draw_frame(app):
    """Render a full frame before reading input."""
    app.stdscr.erase()
    h, w = app.stdscr.getmaxyx()
    rects = layout(h, w)

    draw_session_bar(app, w)
    draw_manager(app, rects['manager'])
    if app.mode == Mode.EDITOR:
        draw_editor(app, rects['content'])
    else:
        draw_viewer(app, rects['content'])
    draw_status(app, rects['status'])

    app.stdscr.noutrefresh()
    curses.doupdate()


def read_input_key(stdscr):
    """Read one key from curses, returning None when the read fails."""
    try:
        return stdscr.get_wch()
    except curses.error:
        return None


def dispatch_input(app, key):
    """Dispatch one normalized input event."""
    if key is None:
        return

    if isinstance(key, int) and key == curses.KEY_RESIZE:
        curses.update_lines_cols()
        return

    app.handle_key(key)


def run_app_loop(app):
    """Run main draw/input loop with terminal cleanup on exit."""
    try:
        while app.running:
            draw_frame(app)
            key = read_input_key(app.stdscr)
            dispatch_input(app, key)
    finally:
        app.cleanup()
