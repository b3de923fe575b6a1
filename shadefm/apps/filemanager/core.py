"""
Entity model and listing policy for the File Manager.
"""
import unicodedata
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


class NavAction(str, Enum):
    """Virtual navigation entries shown below the root."""

    BACK = "back"
    ROOT = "root"


@dataclass(frozen=True)
class TextFile:
    """A regular file in the current directory."""

    path: Path


@dataclass(frozen=True)
class Folder:
    """A subdirectory of the current directory."""

    path: Path


@dataclass(frozen=True)
class ActionEntry:
    """A non-filesystem entry that navigates when activated."""

    kind: NavAction


Entity = Union[TextFile, Folder, ActionEntry]

ACTION_ENTRIES = (ActionEntry(NavAction.BACK), ActionEntry(NavAction.ROOT))


def _mtime_or_none(path):
    try:
        return path.stat().st_mtime_ns
    except OSError:
        return None


def build_entities(paths, is_root):
    """Order directory paths into the manager listing.

    Folders come first by path, then files newest first (unreadable metadata
    counts as oldest), then Back and Root when below the root.
    """
    folders = []
    files = []
    for path in paths:
        if path.is_dir():
            folders.append(Folder(path))
        elif path.is_file():
            files.append(TextFile(path))

    folders.sort(key=lambda entity: entity.path.parts)

    # Path order first so equal timestamps stay deterministic.
    files.sort(key=lambda entity: entity.path.parts)
    stamped = [(_mtime_or_none(entity.path), entity) for entity in files]
    stamped.sort(key=lambda item: (item[0] is not None, item[0] or 0), reverse=True)

    entities = folders + [entity for _, entity in stamped]
    if not is_root:
        entities.extend(ACTION_ENTRIES)
    return entities


def entity_name(entity):
    """Return the file name of a path entity, or None for action entries."""
    if isinstance(entity, (TextFile, Folder)):
        return entity.path.name or None
    return None


def entity_label(entity):
    """Text shown for an entity in the listing."""
    if isinstance(entity, TextFile):
        return entity.path.name or "Unknown text file"
    if isinstance(entity, Folder):
        return entity.path.name or "Unknown folder"
    if entity.kind == NavAction.BACK:
        return "Back"
    return "Root"


def _cell_width(ch):
    """Return terminal cell width for a single character."""
    if not ch:
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ('W', 'F'):
        return 2
    return 1


def _fit_text_to_cells(text, max_cells):
    """Clip/pad text so rendered width does not exceed max_cells."""
    if max_cells <= 0:
        return ''
    out = []
    used = 0
    for ch in text:
        w = _cell_width(ch)
        if used + w > max_cells:
            break
        out.append(ch)
        used += w
    if used < max_cells:
        out.append(' ' * (max_cells - used))
    return ''.join(out)
