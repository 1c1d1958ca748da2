"""Notekeeper - note collection store with search and remote sync."""

from .core import Note, NoteDraft, SAMPLE_NOTES
from .store import NoteStore, NoteStoreConfig, RemoteNoteService

__all__ = [
    "Note",
    "NoteDraft",
    "SAMPLE_NOTES",
    "NoteStore",
    "NoteStoreConfig",
    "RemoteNoteService",
]

__version__ = "1.0.0"
