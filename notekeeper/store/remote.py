"""Remote note service interface and an in-memory implementation."""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..core import Note, RemoteNoteNotFound
from .search import search_notes

logger = logging.getLogger(__name__)


class RemoteNoteService(ABC):
    """Source of truth for notes, consumed by NoteStore."""

    @abstractmethod
    async def search_notes(self, query: Optional[str] = None) -> list[Note]:
        """Fetch notes, optionally filtered by a search query.

        Args:
            query: Optional search text. None or blank returns every note.

        Returns:
            Notes in the service's order, most recent first.
        """
        ...

    @abstractmethod
    async def add_note(self, note: Note) -> Optional[Note]:
        """Persist a new note.

        Args:
            note: The note to create, carrying a client-generated id.

        Returns:
            The note as confirmed by the service (the id may differ), or
            None if the service accepted the call but returned no data.
        """
        ...

    @abstractmethod
    async def update_note(self, note: Note) -> None:
        """Replace a stored note.

        Raises:
            RemoteNoteNotFound: If no note has this id.
        """
        ...

    @abstractmethod
    async def delete_note(self, note_id: str) -> None:
        """Remove a stored note.

        Raises:
            RemoteNoteNotFound: If no note has this id.
        """
        ...

    async def aclose(self) -> None:
        """Release any resources held by the service."""
        return None


class InMemoryNoteService(RemoteNoteService):
    """Note service that keeps notes in process memory.

    Backs the reference API server and the tests. Notes are kept most recent
    first; a client id that is already taken is replaced by a fresh one.
    """

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self._notes: list[Note] = list(notes or [])

    async def search_notes(self, query: Optional[str] = None) -> list[Note]:
        return search_notes(self._notes, query or "")

    async def add_note(self, note: Note) -> Optional[Note]:
        if not note.id or self._find(note.id) is not None:
            note = Note(id=uuid.uuid4().hex, title=note.title, content=note.content)
        self._notes.insert(0, note)
        logger.info(f"Created note: {note.id}")
        return note

    async def update_note(self, note: Note) -> None:
        index = self._find(note.id)
        if index is None:
            raise RemoteNoteNotFound(note.id)
        self._notes[index] = note
        logger.info(f"Updated note {note.id}")

    async def delete_note(self, note_id: str) -> None:
        index = self._find(note_id)
        if index is None:
            raise RemoteNoteNotFound(note_id)
        del self._notes[index]
        logger.info(f"Deleted note {note_id}")

    def get(self, note_id: str) -> Optional[Note]:
        """Get a stored note by id."""
        index = self._find(note_id)
        return None if index is None else self._notes[index]

    def _find(self, note_id: str) -> Optional[int]:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None
