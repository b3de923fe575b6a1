from .core import (
    ACTION_ENTRIES, ActionEntry, Entity, Folder, NavAction, TextFile,
    build_entities, entity_label, entity_name, _fit_text_to_cells,
)
from .manager import FileManager

__all__ = [
    'FileManager', 'Entity', 'TextFile', 'Folder', 'ActionEntry', 'NavAction',
    'ACTION_ENTRIES', 'build_entities', 'entity_label', 'entity_name',
    '_fit_text_to_cells',
]
