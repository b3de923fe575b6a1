"""
File system operations for File Manager.
"""
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from ...core.content import Binary, Text

LOGGER = logging.getLogger(__name__)


def list_directory(path, show_hidden=True):
    """Return child paths of a directory; raises OSError when unreadable."""
    children = []
    with os.scandir(path) as stream:
        for item in stream:
            if not show_hidden and item.name.startswith('.'):
                continue
            children.append(Path(path) / item.name)
    return children


def read_file_content(path):
    """Read a file as Text when it is valid UTF-8, otherwise as Binary."""
    data = Path(path).read_bytes()
    try:
        return Text(data.decode('utf-8'))
    except UnicodeDecodeError:
        LOGGER.debug('%s is not UTF-8 text (%d bytes)', path, len(data))
        return Binary(data)


def default_file_name(now=None):
    """RFC 3339 UTC timestamp used when a new file is saved without a name."""
    moment = now or datetime.now(timezone.utc)
    return moment.isoformat()


def write_new_file(base_path, data, name=None):
    """Create a new file holding data; never overwrites an existing entry."""
    file_name = (name or '').strip() or default_file_name()
    path = Path(base_path) / file_name
    with open(path, 'xb') as stream:
        stream.write(data)
    LOGGER.info('created %s (%d bytes)', path, len(data))
    return path


def remove_file(path):
    """Delete a file from disk."""
    os.remove(path)
    LOGGER.info('deleted %s', path)
