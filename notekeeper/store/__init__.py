"""Note store - canonical note collection, search and remote sync."""

from .config import NoteStoreConfig, setup_file_logging
from .http_client import HttpNoteService
from .remote import InMemoryNoteService, RemoteNoteService
from .search import matches, search_notes
from .store import NoteStore, create_note_store

__all__ = [
    "NoteStore",
    "create_note_store",
    "NoteStoreConfig",
    "RemoteNoteService",
    "InMemoryNoteService",
    "HttpNoteService",
    "search_notes",
    "matches",
    "setup_file_logging",
]
