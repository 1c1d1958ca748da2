"""NoteStore - the canonical note collection and its sync rules.

Reconciliation policy:

- add is remote-first. The note is only shown once the remote service has
  confirmed it; a failed or empty answer leaves the collection unchanged.
- update and delete are local-first. The local collection changes even if
  the remote write fails; the note id is then tracked in ``drifted_ids``
  until the next successful ``refresh``.

All mutations run one at a time behind an asyncio.Lock, so their effects
land in the order they were called. ``search`` never takes the lock.
"""

import asyncio
import logging
from typing import Callable, Iterable, Optional

from ..core import (
    SAMPLE_NOTES,
    Note,
    NoteDraft,
    NoteIdGenerator,
    RemoteNoteNotFound,
    RemoteUnavailable,
)
from .config import NoteStoreConfig, setup_file_logging
from .http_client import HttpNoteService
from .remote import RemoteNoteService
from .search import search_notes

logger = logging.getLogger(__name__)


class NoteStore:
    """Owns the note collection shown to the user."""

    def __init__(
        self,
        remote: RemoteNoteService,
        initial_notes: Optional[Iterable[Note]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize the store.

        Args:
            remote: Source of truth for notes.
            initial_notes: Notes to show before the first refresh.
            id_factory: Produces ids for new notes. Defaults to a
                NoteIdGenerator.
        """
        self._remote = remote
        self._notes: list[Note] = list(initial_notes or [])
        self._next_id = id_factory or NoteIdGenerator()
        self._drifted: set[str] = set()
        self._lock = asyncio.Lock()

    @property
    def notes(self) -> list[Note]:
        """A copy of the current collection."""
        return list(self._notes)

    @property
    def drifted_ids(self) -> frozenset[str]:
        """Ids whose local state may differ from the remote service."""
        return frozenset(self._drifted)

    def __len__(self) -> int:
        return len(self._notes)

    def get(self, note_id: str) -> Optional[Note]:
        """Get a note by id, or None if it is not in the collection."""
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def search(self, query: str) -> list[Note]:
        """Notes whose title or content contains the query, ignoring case.

        A blank query returns the whole collection. The result is always a
        new list.
        """
        return search_notes(self._notes, query)

    async def refresh(self) -> list[Note]:
        """Replace the collection with the remote service's notes.

        Raises:
            RemoteUnavailable: If the remote could not be read. The current
                collection is kept.
        """
        async with self._lock:
            notes = await self._remote.search_notes()
            self._notes = list(notes)
            self._drifted.clear()
            logger.info(f"Loaded {len(self._notes)} notes from remote")
            return list(self._notes)

    async def add(self, draft: NoteDraft) -> Optional[Note]:
        """Create a note and show it first once the remote confirms it.

        Args:
            draft: Title and content of the new note.

        Returns:
            The confirmed note, or None if the remote failed or returned no
            data. In that case the collection is unchanged.
        """
        async with self._lock:
            candidate = draft.to_note(self._next_id())
            try:
                confirmed = await self._remote.add_note(candidate)
            except RemoteUnavailable as e:
                logger.warning(f"Add of note {candidate.id} failed: {e}")
                return None

            if confirmed is None:
                logger.warning(f"Remote returned no data for note {candidate.id}")
                return None

            existing = self._index_of(confirmed.id)
            if existing is not None:
                # Ids stay unique: the remote's copy replaces the stale entry.
                del self._notes[existing]
                self._drifted.add(confirmed.id)
                logger.warning(f"Remote confirmed note {confirmed.id} with an id already shown")

            self._notes.insert(0, confirmed)
            logger.info(f"Added note {confirmed.id}")
            return confirmed

    async def update(self, note: Note) -> None:
        """Replace the note with the same id, then write it to the remote.

        Unknown ids are ignored. If the remote write fails the local change
        stays and the id is marked as drifted.
        """
        async with self._lock:
            index = self._index_of(note.id)
            if index is None:
                logger.debug(f"Update of unknown note {note.id} ignored")
                return

            self._notes[index] = note
            try:
                await self._remote.update_note(note)
            except (RemoteUnavailable, RemoteNoteNotFound) as e:
                self._drifted.add(note.id)
                logger.warning(f"Remote update of note {note.id} failed: {e}")
                return

            self._drifted.discard(note.id)
            logger.info(f"Updated note {note.id}")

    async def delete(self, note_id: str) -> None:
        """Delete a note remotely, then remove it locally.

        The local entry is removed even when the remote call fails; the id
        is then marked as drifted. A remote "not found" counts as deleted.
        """
        async with self._lock:
            try:
                await self._remote.delete_note(note_id)
            except RemoteNoteNotFound:
                logger.debug(f"Note {note_id} was already gone remotely")
                self._drifted.discard(note_id)
            except RemoteUnavailable as e:
                self._drifted.add(note_id)
                logger.warning(f"Remote delete of note {note_id} failed: {e}")
            else:
                self._drifted.discard(note_id)

            index = self._index_of(note_id)
            if index is not None:
                del self._notes[index]
                logger.info(f"Deleted note {note_id}")

    async def close(self) -> None:
        """Release the remote service's resources."""
        await self._remote.aclose()

    def _index_of(self, note_id: str) -> Optional[int]:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None


def create_note_store(config: Optional[NoteStoreConfig] = None) -> NoteStore:
    """Create a NoteStore backed by the HTTP note service.

    Args:
        config: Store configuration. If None, reads NOTEKEEPER_* environment
            variables.

    Returns:
        A NoteStore showing the sample notes until its first refresh, unless
        seeding is disabled in the config.
    """
    config = config or NoteStoreConfig.from_env()
    if config.log_dir is not None:
        setup_file_logging(config.log_dir)

    initial = SAMPLE_NOTES if config.seed_sample_notes else ()
    return NoteStore(HttpNoteService(config), initial_notes=initial)
