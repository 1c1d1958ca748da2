"""Exceptions raised by the note store and remote note services."""

from typing import Optional


class NoteServiceError(Exception):
    """Base class for Notekeeper errors."""


class RemoteUnavailable(NoteServiceError):
    """The remote note service failed, timed out, or answered unexpectedly."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteNoteNotFound(NoteServiceError):
    """The remote note service has no note with the requested id."""

    def __init__(self, note_id: str):
        super().__init__(f"Note '{note_id}' not found")
        self.note_id = note_id


class ValidationFailure(NoteServiceError, ValueError):
    """A note draft is missing its title or content."""
