"""HTTP client for the Notekeeper REST API."""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from ..core import Note, RemoteNoteNotFound, RemoteUnavailable
from .config import NoteStoreConfig
from .remote import RemoteNoteService

logger = logging.getLogger(__name__)

NOTES_PATH = "/api/v1/notes"


def _note_path(note_id: str) -> str:
    """URL path of one note, with every reserved character in the id escaped."""
    return f"{NOTES_PATH}/{quote(note_id, safe='')}"


class HttpNoteService(RemoteNoteService):
    """RemoteNoteService that talks to the Notekeeper API over HTTP.

    Transport failures, timeouts and unexpected status codes are reported as
    RemoteUnavailable; a 404 is reported as RemoteNoteNotFound.
    """

    def __init__(
        self,
        config: Optional[NoteStoreConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            config: Store configuration. If None, uses default config.
            client: Optional httpx client. If None, creates one for the
                configured API URL and owns it.
        """
        self.config = config or NoteStoreConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.config.api_url,
            timeout=self.config.timeout_seconds,
            headers={"User-Agent": "Notekeeper/1.0"},
        )

    async def search_notes(self, query: Optional[str] = None) -> list[Note]:
        params = {"q": query} if query and query.strip() else None
        data = await self._request("GET", NOTES_PATH, params=params)
        try:
            notes = [Note.from_dict(item) for item in data.get("notes", [])]
        except (KeyError, TypeError, AttributeError) as e:
            raise RemoteUnavailable(f"Invalid note payload from note service: {e!r}") from e
        logger.info(f"Fetched {len(notes)} notes")
        return notes

    async def add_note(self, note: Note) -> Optional[Note]:
        data = await self._request("POST", NOTES_PATH, json=note.to_dict())
        if not data:
            logger.warning("Note service returned no data for created note")
            return None
        try:
            return Note.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise RemoteUnavailable(f"Invalid note payload from note service: {e!r}") from e

    async def update_note(self, note: Note) -> None:
        await self._request(
            "PUT",
            _note_path(note.id),
            json={"title": note.title, "content": note.content},
            note_id=note.id,
        )

    async def delete_note(self, note_id: str) -> None:
        await self._request("DELETE", _note_path(note_id), note_id=note_id)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        note_id: Optional[str] = None,
        **kwargs: Any,
    ) -> dict:
        """Send a request and decode the JSON body.

        Returns:
            The decoded body, or an empty dict for empty responses.
        """
        try:
            response = await self._client.request(method, path, **kwargs)
            if response.status_code == 404 and note_id is not None:
                raise RemoteNoteNotFound(note_id)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout on {method} {path}")
            raise RemoteUnavailable(f"Request timed out: {method} {path}") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error on {method} {path}: {status}")
            raise RemoteUnavailable(
                f"Note service returned status {status}", status_code=status
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error on {method} {path}: {e}")
            raise RemoteUnavailable(f"Unable to reach note service: {e}") from e

        if response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise RemoteUnavailable(f"Invalid JSON from note service: {e}") from e
