"""Error types raised by ShadeFM components."""

from enum import Enum


class ShadeFMError(Exception):
    """Base class for ShadeFM errors."""


class InvalidKeyError(ShadeFMError):
    """Session key is shorter than the cipher requires."""


class DeleteRefusal(str, Enum):
    """Why an entity cannot be deleted."""

    NOT_SESSION_CREATED = "not_session_created"
    IS_FOLDER = "is_folder"
    IS_ACTION = "is_action"


_REFUSAL_MESSAGES = {
    DeleteRefusal.NOT_SESSION_CREATED: "Cannot delete a file not created in the current session",
    DeleteRefusal.IS_FOLDER: "Cannot delete a folder",
    DeleteRefusal.IS_ACTION: "Cannot delete a navigation entry",
}


class NotDeletableError(ShadeFMError):
    """Raised when the selected entity may not be deleted."""

    def __init__(self, reason, entity=None):
        self.reason = DeleteRefusal(reason)
        self.entity = entity
        super().__init__(_REFUSAL_MESSAGES[self.reason])
