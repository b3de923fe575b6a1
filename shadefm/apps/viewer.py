"""Read-only content viewer with automatic decryption of binary files."""

import logging

from ..core.content import Binary, DecryptedText, Text

LOGGER = logging.getLogger(__name__)


class Viewer:
    """Holds the content opened from the manager and its scroll offset."""

    def __init__(self, cipher):
        self.cipher = cipher
        self.name = None
        self.content = Text('')
        self.scroll = 0

    def set_entity(self, content, name=None):
        """Show content, trying the session cipher on binary data."""
        self.name = name
        self.scroll = 0
        if isinstance(content, (Text, DecryptedText)):
            self.content = content
            return
        text = self.cipher.try_decode_text(content.data)
        if text is None:
            LOGGER.debug('%s: %d bytes left as binary', name, len(content.data))
            self.content = content
        else:
            LOGGER.debug('%s: decrypted %d bytes', name, len(content.data))
            self.content = DecryptedText(text)

    def scroll_up(self, amount=1):
        self.scroll = max(0, self.scroll - amount)

    def scroll_down(self, amount=1):
        self.scroll += amount

    def clear(self):
        self.name = None
        self.content = Text('')
        self.scroll = 0

    def title(self):
        if self.name:
            return self.name
        if isinstance(self.content, DecryptedText):
            return 'Encrypted File'
        if isinstance(self.content, Binary):
            return 'Binary File'
        return 'Text File'

    def lines(self):
        """Return display lines for the current content."""
        if isinstance(self.content, Binary):
            return [f'Binary file ({len(self.content.data)} bytes)']
        return self.content.text.replace('\r\n', '\n').split('\n')
