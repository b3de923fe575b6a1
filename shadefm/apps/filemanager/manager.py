"""
File Manager: current location, listing, cursor and session-created files.
"""
import logging
from pathlib import Path

from ...core.errors import DeleteRefusal, NotDeletableError
from .core import ActionEntry, Folder, NavAction, TextFile, build_entities, entity_name
from .operations import list_directory, read_file_content, remove_file, write_new_file

LOGGER = logging.getLogger(__name__)


class FileManager:
    """Tree navigation over a fixed root directory.

    ``root`` never changes after construction; ``current`` is always the root
    or one of its descendants. Only files written through :meth:`create_file`
    during this session may be deleted.
    """

    def __init__(self, root, show_hidden=True):
        self._root = Path(root).expanduser().absolute()
        self.show_hidden = bool(show_hidden)
        self._current = self._root
        self._entities = build_entities(self._list(self._root), is_root=True)
        self._selected = None
        self._created = set()

    # --- State ---

    @property
    def root(self):
        return self._root

    @property
    def current(self):
        return self._current

    @property
    def entities(self):
        return list(self._entities)

    @property
    def selected(self):
        return self._selected

    @property
    def created(self):
        return frozenset(self._created)

    @property
    def is_root(self):
        return self._current == self._root

    def selected_entity(self):
        if self._selected is None:
            return None
        return self._entities[self._selected]

    def selected_entity_name(self):
        entity = self.selected_entity()
        if entity is None:
            return None
        return entity_name(entity)

    # --- Listing ---

    def _list(self, path):
        return list_directory(path, show_hidden=self.show_hidden)

    def _goto_dir(self, path):
        path = Path(path)
        entities = build_entities(self._list(path), is_root=path == self._root)
        self._entities = entities
        self._selected = None
        self._current = path
        LOGGER.debug('entered %s (%d entries)', path, len(entities))

    def refresh(self):
        """Re-list the current directory, keeping the cursor index if still valid."""
        selected = self._selected
        self._goto_dir(self._current)
        if selected is not None:
            self.select(selected)

    # --- Cursor ---

    def next(self):
        if not self._entities:
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected + 1) % len(self._entities)

    def previous(self):
        if not self._entities:
            return
        if self._selected is None or self._selected == 0:
            self._selected = len(self._entities) - 1
        else:
            self._selected -= 1

    def select(self, index):
        if 0 <= index < len(self._entities):
            self._selected = index
            return True
        return False

    # --- Actions ---

    def action(self):
        """Activate the selected entity.

        Files are read and returned as ``Text`` or ``Binary``; folders and
        navigation entries change directory and return None.
        """
        entity = self.selected_entity()
        if entity is None:
            return None
        if isinstance(entity, TextFile):
            return read_file_content(entity.path)
        if isinstance(entity, Folder):
            self._goto_dir(entity.path)
            return None
        if entity.kind == NavAction.BACK:
            parent = self._current.parent
            if parent != self._current:
                self._goto_dir(parent)
            return None
        self._goto_dir(self._root)
        return None

    def create_file(self, data, name=None):
        """Write data to a new file in the current directory and return its path."""
        path = write_new_file(self._current, data, name)
        self._created.add(TextFile(path))
        self.refresh()
        return path

    def delete_selected(self):
        """Delete the selected file if this session created it."""
        entity = self.selected_entity()
        if entity is not None:
            if isinstance(entity, Folder):
                raise NotDeletableError(DeleteRefusal.IS_FOLDER, entity)
            if isinstance(entity, ActionEntry):
                raise NotDeletableError(DeleteRefusal.IS_ACTION, entity)
            if entity not in self._created:
                raise NotDeletableError(DeleteRefusal.NOT_SESSION_CREATED, entity)
            remove_file(entity.path)
            self._created.discard(entity)
        self.refresh()
