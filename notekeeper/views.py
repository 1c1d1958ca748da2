"""Screen state for the notes UI: home list, note detail and new note.

Views hold only per-screen state. Every mutation goes through the
NoteStore they were given, and lists are re-read from the store.
"""

import logging
from typing import Optional

from .core import Note, NoteDraft, NoteServiceError
from .store import NoteStore

logger = logging.getLogger(__name__)


class HomeView:
    """The note list with its search box."""

    def __init__(self, store: NoteStore):
        self.store = store
        self.query = ""

    @property
    def visible(self) -> list[Note]:
        """Notes matching the current search query."""
        return self.store.search(self.query)

    def set_query(self, query: str) -> list[Note]:
        """Change the search text and return the matching notes."""
        self.query = query
        return self.visible

    async def refresh(self) -> bool:
        """Reload notes from the remote service.

        Returns:
            True if the reload succeeded. On failure the notes already shown
            are kept.
        """
        try:
            await self.store.refresh()
        except NoteServiceError as e:
            logger.warning(f"Could not load notes: {e}")
            return False
        return True

    def open(self, note_id: str) -> Optional["NoteDetailView"]:
        """Open the detail view for a note, or None if it is gone."""
        note = self.store.get(note_id)
        if note is None:
            return None
        return NoteDetailView(self.store, note)

    def new_note(self) -> "NewNoteView":
        return NewNoteView(self.store)


class NoteDetailView:
    """A single note whose content is edited in place."""

    def __init__(self, store: NoteStore, note: Note):
        self.store = store
        self.note = note

    async def change_content(self, text: str) -> Note:
        """Replace the content and push the edit through the store."""
        self.note = self.note.with_content(text)
        await self.store.update(self.note)
        return self.note

    async def delete(self) -> None:
        await self.store.delete(self.note.id)


class NewNoteView:
    """Draft editor for a new note."""

    def __init__(self, store: NoteStore):
        self.store = store
        self.draft = NoteDraft()

    @property
    def title(self) -> str:
        return self.draft.title

    @title.setter
    def title(self, value: str) -> None:
        self.draft.title = value

    @property
    def content(self) -> str:
        return self.draft.content

    @content.setter
    def content(self, value: str) -> None:
        self.draft.content = value

    async def submit(self) -> Optional[Note]:
        """Save the draft when leaving the screen.

        A draft with a blank title or content is discarded without calling
        the store.

        Returns:
            The created note, or None if the draft was discarded or the
            remote service did not confirm it.
        """
        if self.draft.is_blank():
            logger.info("Discarding blank note draft")
            return None
        return await self.store.add(self.draft)
