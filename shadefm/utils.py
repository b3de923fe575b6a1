"""
Utility functions for ShadeFM.
"""
import curses
import locale

from .constants import (
    ASCII_BL, ASCII_BR, ASCII_H, ASCII_TL, ASCII_TR, ASCII_V,
    SB_BL, SB_BR, SB_H, SB_TL, SB_TR, SB_V,
)
from .theme import ROLE_TO_PAIR_ID, get_theme


def init_colors(theme_key_or_obj=None):
    """Initialize curses color pairs from the active semantic theme."""
    curses.start_color()
    curses.use_default_colors()

    if theme_key_or_obj is None or isinstance(theme_key_or_obj, str):
        theme = get_theme(theme_key_or_obj)
    else:
        theme = theme_key_or_obj

    for role, pair_id in ROLE_TO_PAIR_ID.items():
        fg, bg = theme.pairs_base[role]
        curses.init_pair(pair_id, fg, bg)


def theme_attr(role):
    """Return curses color attribute for a semantic role."""
    return curses.color_pair(ROLE_TO_PAIR_ID[role])

def safe_addstr(win, y, x, text, attr=0):
    """Write string safely, clipping to window bounds."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x >= w:
        return
    max_len = w - x - 1
    if max_len <= 0:
        return
    try:
        win.addnstr(y, x, text, max_len, attr)
    except curses.error:
        pass

def normalize_key_code(key):
    """Normalize keys from get_wch()/getch() into comparable integer codes."""
    if isinstance(key, int):
        return key
    if not isinstance(key, str) or not key or len(key) != 1:
        return None
    if key in ('\n', '\r'):
        return 10
    if key == '\x1b':
        return 27
    if key == '\t':
        return 9
    if key == '\x7f':
        return 127
    if key == '\b':
        return 8
    return ord(key)

def draw_box(win, y, x, h, w, attr=0, title=None, use_unicode=True):
    """Draw a single-line box with an optional title on the top edge."""
    if h < 2 or w < 2:
        return
    if use_unicode:
        tl, tr, bl, br, hz, vt = SB_TL, SB_TR, SB_BL, SB_BR, SB_H, SB_V
    else:
        tl, tr, bl, br, hz, vt = ASCII_TL, ASCII_TR, ASCII_BL, ASCII_BR, ASCII_H, ASCII_V

    safe_addstr(win, y, x, tl + hz * (w - 2) + tr, attr)
    for i in range(1, h - 1):
        safe_addstr(win, y + i, x, vt, attr)
        safe_addstr(win, y + i, x + w - 1, vt, attr)
    safe_addstr(win, y + h - 1, x, bl + hz * (w - 2) + br, attr)
    if title and w > 4:
        safe_addstr(win, y, x + 1, f' {title} '[:w - 2], attr | curses.A_BOLD)

def check_unicode_support():
    """Check if terminal supports Unicode."""
    try:
        '─'.encode(locale.getpreferredencoding())
        return True
    except (UnicodeEncodeError, LookupError):
        return False
