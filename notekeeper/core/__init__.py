"""Core types for Notekeeper."""

from .errors import (
    NoteServiceError,
    RemoteNoteNotFound,
    RemoteUnavailable,
    ValidationFailure,
)
from .note import SAMPLE_NOTES, Note, NoteDraft, NoteIdGenerator

__all__ = [
    "Note",
    "NoteDraft",
    "NoteIdGenerator",
    "SAMPLE_NOTES",
    "NoteServiceError",
    "RemoteUnavailable",
    "RemoteNoteNotFound",
    "ValidationFailure",
]
