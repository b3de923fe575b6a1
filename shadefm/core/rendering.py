"""Rendering helpers for ShadeFM."""

import curses
from datetime import datetime, timezone

from .. import __version__
from ..apps.filemanager import ActionEntry, Folder, _fit_text_to_cells, entity_label
from ..constants import APP_NAME, MANAGER_WIDTH_PERCENT, SESSION_BAR_HEIGHT, STATUS_HEIGHT
from .content import Binary, DecryptedText
from ..utils import draw_box, safe_addstr, theme_attr
from .modes import help_lines


def layout(h, w):
    """Split the screen into manager, content and status rectangles (x, y, w, h)."""
    body_y = SESSION_BAR_HEIGHT
    status_h = min(STATUS_HEIGHT, max(0, h - body_y))
    body_h = max(0, h - body_y - status_h)
    manager_w = max(12, w * MANAGER_WIDTH_PERCENT // 100)
    manager_w = min(manager_w, w)
    return {
        'manager': (0, body_y, manager_w, body_h),
        'content': (manager_w, body_y, max(0, w - manager_w), body_h),
        'status': (0, body_y + body_h, w, status_h),
    }


def wrap_lines(lines, width):
    """Hard-wrap lines to width, keeping empty lines."""
    if width <= 0:
        return []
    out = []
    for line in lines:
        line = line.replace('\t', '    ')
        if not line:
            out.append('')
            continue
        for start in range(0, len(line), width):
            out.append(line[start:start + width])
    return out


def draw_session_bar(app, width):
    """Draw the top session bar with the root path and an optional clock."""
    attr = theme_attr('session')
    safe_addstr(app.stdscr, 0, 0, ' ' * (width - 1), attr)
    left = f' {APP_NAME} v{__version__} | Root: {app.manager.root}'
    safe_addstr(app.stdscr, 0, 0, left, attr)

    if app.config.show_clock:
        now_str = datetime.now(timezone.utc).strftime('%a, %d %b %Y %H:%M:%S %z')
        clock_len = len(now_str) + 2
        if width > len(left) + clock_len:
            safe_addstr(app.stdscr, 0, width - clock_len, now_str, attr | curses.A_BOLD)


def _entity_attr(entity):
    if isinstance(entity, Folder):
        return theme_attr('directory')
    if isinstance(entity, ActionEntry):
        return theme_attr('action')
    return theme_attr('file')


def draw_manager(app, rect):
    """Draw the directory listing with the cursor highlighted."""
    x, y, w, h = rect
    if w < 4 or h < 3:
        return
    manager = app.manager
    draw_box(app.stdscr, y, x, h, w, theme_attr('border'), title=str(manager.current),
             use_unicode=app.use_unicode)

    inner_w = w - 2
    inner_h = h - 2
    entities = manager.entities
    selected = manager.selected
    offset = 0
    if selected is not None and selected >= inner_h:
        offset = selected - inner_h + 1

    for row in range(inner_h):
        idx = offset + row
        if idx >= len(entities):
            break
        entity = entities[idx]
        attr = _entity_attr(entity)
        if idx == selected:
            attr = theme_attr('selected') | curses.A_BOLD
        label = _fit_text_to_cells(entity_label(entity), inner_w)
        safe_addstr(app.stdscr, y + 1 + row, x + 1, label, attr)


def draw_viewer(app, rect):
    """Draw the viewer pane; border colour marks decrypted and binary content."""
    x, y, w, h = rect
    if w < 4 or h < 3:
        return
    viewer = app.viewer
    content = viewer.content
    if isinstance(content, DecryptedText):
        border = theme_attr('view_decrypted')
    elif isinstance(content, Binary):
        border = theme_attr('view_binary')
    else:
        border = theme_attr('view_text')
    draw_box(app.stdscr, y, x, h, w, border, title=viewer.title(), use_unicode=app.use_unicode)

    inner_w = w - 2
    inner_h = h - 2
    lines = wrap_lines(viewer.lines(), inner_w)
    start = 0
    if not isinstance(content, Binary):
        start = min(viewer.scroll, max(0, len(lines) - 1))
    body_attr = theme_attr('body')
    for row, line in enumerate(lines[start:start + inner_h]):
        safe_addstr(app.stdscr, y + 1 + row, x + 1, line, body_attr)


def draw_editor(app, rect):
    """Draw the editor buffer and its cursor; nothing when no edit is open."""
    x, y, w, h = rect
    if w < 4 or h < 3:
        return
    buffer = app.editor.buffer
    if buffer is None:
        return
    attr = theme_attr('editor')
    draw_box(app.stdscr, y, x, h, w, theme_attr('border'),
             title=f'Editor  Ln {buffer.cursor_line + 1}, Col {buffer.cursor_col + 1}',
             use_unicode=app.use_unicode)

    inner_w = w - 2
    inner_h = h - 2
    buffer.scroll_into_view(inner_h, inner_w)
    for row in range(inner_h):
        line_idx = buffer.view_top + row
        if line_idx >= len(buffer.lines):
            break
        line = buffer.lines[line_idx]
        safe_addstr(app.stdscr, y + 1 + row, x + 1,
                    line[buffer.view_left:buffer.view_left + inner_w], attr)
        if line_idx == buffer.cursor_line:
            cx = buffer.cursor_col - buffer.view_left
            if 0 <= cx < inner_w:
                ch = line[buffer.cursor_col] if buffer.cursor_col < len(line) else ' '
                safe_addstr(app.stdscr, y + 1 + row, x + 1 + cx, ch, attr | curses.A_REVERSE)


def draw_status(app, rect):
    """Draw the error status when one is set, otherwise the mode help."""
    x, y, w, h = rect
    if w < 4 or h < 3:
        return
    if app.status:
        attr = theme_attr('error')
        lines = [app.status]
    else:
        attr = theme_attr('help')
        lines = help_lines(app.mode)
    draw_box(app.stdscr, y, x, h, w, attr, use_unicode=app.use_unicode)
    for row, line in enumerate(wrap_lines(lines, w - 2)[:h - 2]):
        safe_addstr(app.stdscr, y + 1 + row, x + 1, line, attr)
