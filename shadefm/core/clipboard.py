"""
Shared clipboard helpers for the editor.
"""
from __future__ import annotations

import logging

import pyperclip

LOGGER = logging.getLogger(__name__)

_STATE = {"text": ""}


def clear_clipboard() -> None:
    """Clear internal clipboard text."""
    _STATE["text"] = ""


def _system_copy(text: str) -> bool:
    """Try to copy text to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException:
        LOGGER.debug("system clipboard unavailable for copy", exc_info=True)
        return False
    return True


def _system_paste() -> str | None:
    """Try to read text from the system clipboard."""
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException:
        LOGGER.debug("system clipboard unavailable for paste", exc_info=True)
        return None
    return text or ""


def copy_text(text: str, sync_system: bool = True) -> str:
    """Store text in internal clipboard and optionally mirror to system clipboard."""
    _STATE["text"] = text or ""
    if sync_system:
        _system_copy(_STATE["text"])
    return _STATE["text"]


def paste_text(sync_system: bool = True) -> str:
    """Return clipboard text, optionally refreshing from system clipboard."""
    if sync_system:
        system_text = _system_paste()
        if system_text:
            _STATE["text"] = system_text
    return _STATE["text"]
