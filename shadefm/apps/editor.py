"""
Editor for composing new files, saved as plain or cipher-encoded bytes.
"""
import curses
import logging

from ..core.clipboard import copy_text, paste_text
from ..utils import normalize_key_code

LOGGER = logging.getLogger(__name__)

TAB_WIDTH = 4


class TextBuffer:
    """Multi-line text with a cursor and a scroll viewport."""

    def __init__(self):
        self.lines = ['']  # one string per logical line
        self.cursor_line = 0
        self.cursor_col = 0
        self.view_top = 0
        self.view_left = 0
        self.page_size = 10

    def text(self):
        return '\n'.join(self.lines)

    def _clamp_cursor(self):
        self.cursor_line = max(0, min(self.cursor_line, len(self.lines) - 1))
        self.cursor_col = max(0, min(self.cursor_col, len(self.lines[self.cursor_line])))

    def scroll_into_view(self, height, width):
        """Move the viewport so the cursor is visible in a height x width area."""
        if height <= 0 or width <= 0:
            return
        self.page_size = max(1, height - 1)
        if self.cursor_line < self.view_top:
            self.view_top = self.cursor_line
        elif self.cursor_line >= self.view_top + height:
            self.view_top = self.cursor_line - height + 1
        if self.cursor_col < self.view_left:
            self.view_left = self.cursor_col
        elif self.cursor_col >= self.view_left + width:
            self.view_left = self.cursor_col - width + 1

    def insert_text(self, text):
        """Insert text at the cursor; newlines split lines."""
        if not text:
            return
        chunks = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
        line = self.lines[self.cursor_line]
        before = line[:self.cursor_col]
        after = line[self.cursor_col:]
        if len(chunks) == 1:
            self.lines[self.cursor_line] = before + chunks[0] + after
            self.cursor_col += len(chunks[0])
            return
        new_lines = [before + chunks[0]] + chunks[1:-1] + [chunks[-1] + after]
        self.lines[self.cursor_line:self.cursor_line + 1] = new_lines
        self.cursor_line += len(chunks) - 1
        self.cursor_col = len(chunks[-1])

    def newline(self):
        line = self.lines[self.cursor_line]
        self.lines[self.cursor_line] = line[:self.cursor_col]
        self.lines.insert(self.cursor_line + 1, line[self.cursor_col:])
        self.cursor_line += 1
        self.cursor_col = 0

    def backspace(self):
        if self.cursor_col > 0:
            line = self.lines[self.cursor_line]
            self.lines[self.cursor_line] = line[:self.cursor_col - 1] + line[self.cursor_col:]
            self.cursor_col -= 1
        elif self.cursor_line > 0:
            # Merge with previous line
            prev_line = self.lines[self.cursor_line - 1]
            self.cursor_col = len(prev_line)
            self.lines[self.cursor_line - 1] = prev_line + self.lines[self.cursor_line]
            self.lines.pop(self.cursor_line)
            self.cursor_line -= 1

    def delete(self):
        line = self.lines[self.cursor_line]
        if self.cursor_col < len(line):
            self.lines[self.cursor_line] = line[:self.cursor_col] + line[self.cursor_col + 1:]
        elif self.cursor_line < len(self.lines) - 1:
            # Merge with next line
            self.lines[self.cursor_line] = line + self.lines[self.cursor_line + 1]
            self.lines.pop(self.cursor_line + 1)

    def cut_to_end(self):
        """Cut from the cursor to end of line; at end of line, join the next line."""
        line = self.lines[self.cursor_line]
        if self.cursor_col < len(line):
            copy_text(line[self.cursor_col:])
            self.lines[self.cursor_line] = line[:self.cursor_col]
        elif self.cursor_line < len(self.lines) - 1:
            copy_text('\n')
            self.delete()

    def paste(self):
        self.insert_text(paste_text())

    def handle_key(self, key):
        """Apply one editing key. Returns True when the key was understood."""
        key_code = normalize_key_code(key)

        if key_code == curses.KEY_UP:
            self.cursor_line -= 1
        elif key_code == curses.KEY_DOWN:
            self.cursor_line += 1
        elif key_code == curses.KEY_LEFT:
            if self.cursor_col > 0:
                self.cursor_col -= 1
            elif self.cursor_line > 0:
                self.cursor_line -= 1
                self.cursor_col = len(self.lines[self.cursor_line])
        elif key_code == curses.KEY_RIGHT:
            if self.cursor_col < len(self.lines[self.cursor_line]):
                self.cursor_col += 1
            elif self.cursor_line < len(self.lines) - 1:
                self.cursor_line += 1
                self.cursor_col = 0
        elif key_code == curses.KEY_HOME:
            self.cursor_col = 0
        elif key_code == curses.KEY_END:
            self.cursor_col = len(self.lines[self.cursor_line])
        elif key_code == curses.KEY_PPAGE:
            self.cursor_line -= self.page_size
        elif key_code == curses.KEY_NPAGE:
            self.cursor_line += self.page_size
        elif key_code in (curses.KEY_ENTER, 10, 13):
            self.newline()
        elif key_code in (curses.KEY_BACKSPACE, 127, 8):
            self.backspace()
        elif key_code == curses.KEY_DC:
            self.delete()
        elif key_code == 9:
            self.insert_text(' ' * TAB_WIDTH)
        elif key_code == 11:  # Ctrl+K
            self.cut_to_end()
        elif key_code == 25:  # Ctrl+Y
            self.paste()
        elif isinstance(key, str) and key.isprintable():
            self.insert_text(key)
        elif isinstance(key, int) and 32 <= key <= 126:
            self.insert_text(chr(key))
        else:
            return False
        self._clamp_cursor()
        return True


class Editor:
    """Owns the in-progress buffer; ``buffer is None`` means no edit is open."""

    def __init__(self, cipher):
        self.cipher = cipher
        self.buffer = None

    @property
    def is_editing(self):
        return self.buffer is not None

    def init(self):
        """Start a new, empty buffer."""
        self.buffer = TextBuffer()

    def _take_text(self):
        buffer, self.buffer = self.buffer, None
        if buffer is None:
            return None
        return buffer.text()

    def finish(self):
        """Consume the buffer and return its text as UTF-8 bytes."""
        text = self._take_text()
        if text is None:
            return b''
        return text.encode('utf-8')

    def finish_encrypt(self):
        """Consume the buffer and return its text encoded by the session cipher."""
        text = self._take_text()
        if text is None:
            return b''
        return self.cipher.encode_text(text)

    def handle_key(self, key):
        if self.buffer is None:
            LOGGER.debug('editor idle, dropped key %r', key)
            return False
        return self.buffer.handle_key(key)
