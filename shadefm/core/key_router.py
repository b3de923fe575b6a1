"""Keyboard routing: the mode transition table for ShadeFM."""

import curses

from ..constants import KEY_CTRL_E, KEY_CTRL_S, KEY_ESC
from .content import Binary, Text
from ..utils import normalize_key_code
from .modes import Mode


def handle_manager_key(app, key_code):
    """Handle a key while the file manager has focus."""
    manager = app.manager

    if key_code == KEY_ESC:
        return Mode.EXIT
    if key_code == curses.KEY_UP:
        manager.previous()
        return Mode.MANAGER
    if key_code == curses.KEY_DOWN:
        manager.next()
        return Mode.MANAGER
    if key_code in (curses.KEY_ENTER, 10, 13):
        content = manager.action()
        if isinstance(content, (Text, Binary)):
            app.viewer.set_entity(content, manager.selected_entity_name())
            return Mode.VIEWER
        return Mode.MANAGER
    if key_code in (ord('e'), ord('E')):
        return Mode.EDITOR
    if key_code in (ord('n'), ord('N')):
        app.editor.init()
        return Mode.EDITOR
    if key_code in (ord('d'), ord('D')):
        manager.delete_selected()
        return Mode.MANAGER
    return Mode.MANAGER


def handle_viewer_key(app, key_code):
    """Scroll on Up/Down; any other key closes the viewer."""
    step = app.config.scroll_step
    if key_code == curses.KEY_UP:
        app.viewer.scroll_up(step)
        return Mode.VIEWER
    if key_code == curses.KEY_DOWN:
        app.viewer.scroll_down(step)
        return Mode.VIEWER
    app.viewer.clear()
    return Mode.MANAGER


def handle_editor_key(app, key, key_code):
    """Save combos finish the buffer; everything else edits it."""
    if key_code == KEY_ESC:
        return Mode.MANAGER
    if key_code == KEY_CTRL_S:
        app.manager.create_file(app.editor.finish())
        return Mode.MANAGER
    if key_code == KEY_CTRL_E:
        app.manager.create_file(app.editor.finish_encrypt())
        return Mode.MANAGER
    app.editor.handle_key(key)
    return Mode.EDITOR


def route_key(app, key):
    """Dispatch one key for the current mode and return the next mode.

    Component errors propagate to the caller unchanged.
    """
    key_code = normalize_key_code(key)
    if app.mode == Mode.MANAGER:
        return handle_manager_key(app, key_code)
    if app.mode == Mode.VIEWER:
        return handle_viewer_key(app, key_code)
    if app.mode == Mode.EDITOR:
        return handle_editor_key(app, key, key_code)
    return Mode.EXIT
