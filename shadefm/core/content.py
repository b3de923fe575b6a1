"""File content variants exchanged between the manager, viewer and editor."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Text:
    """Content known to be plain text."""

    text: str


@dataclass(frozen=True)
class DecryptedText:
    """Binary content the cipher turned into valid text."""

    text: str


@dataclass(frozen=True)
class Binary:
    """Opaque bytes."""

    data: bytes


# What FileManager.action() can hand back for a file.
FileContent = Union[Text, Binary]

# What the viewer can display.
ViewerContent = Union[Text, DecryptedText, Binary]
