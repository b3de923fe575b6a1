"""
Main ShadeFM session controller.
"""
import logging

from ..apps.editor import Editor
from ..apps.filemanager import FileManager
from ..apps.viewer import Viewer
from ..utils import check_unicode_support, init_colors
from .bootstrap import configure_terminal, disable_flow_control, restore_flow_control
from .cipher import RollingCipher
from .config import AppConfig
from .errors import ShadeFMError
from .event_loop import run_app_loop
from .key_router import route_key
from .modes import Mode

LOGGER = logging.getLogger(__name__)


class ShadeFM:
    """One interactive session: components, current mode and error status."""

    def __init__(self, manager, viewer, editor, config=None, stdscr=None):
        self.stdscr = stdscr
        self.manager = manager
        self.viewer = viewer
        self.editor = editor
        self.config = config or AppConfig()
        self.mode = Mode.MANAGER
        self.status = None
        self.running = True
        self.use_unicode = check_unicode_support()
        self._saved_tty = None

    @classmethod
    def create(cls, root, key, config=None):
        """Build a session for root and key.

        Raises InvalidKeyError for a short key and OSError when root cannot
        be listed.
        """
        config = config or AppConfig()
        cipher = RollingCipher(key)
        manager = FileManager(root, show_hidden=config.show_hidden)
        return cls(manager, Viewer(cipher), Editor(cipher), config)

    def handle_key(self, key):
        """Route one key; recoverable errors become the status line."""
        try:
            mode = route_key(self, key)
        except (OSError, ShadeFMError) as exc:
            self.status = str(exc) or exc.__class__.__name__
            LOGGER.warning('%s mode: %s', self.mode.value, self.status)
            return
        self.status = None
        if mode != self.mode:
            LOGGER.debug('mode %s -> %s', self.mode.value, mode.value)
        self.mode = mode
        if mode == Mode.EXIT:
            self.running = False

    def setup_terminal(self):
        configure_terminal(self.stdscr)
        self._saved_tty = disable_flow_control()
        init_colors(self.config.theme)

    def cleanup(self):
        restore_flow_control(self._saved_tty)
        self._saved_tty = None

    def run(self, stdscr):
        self.stdscr = stdscr
        self.setup_terminal()
        run_app_loop(self)
