"""Note endpoints for Notekeeper API."""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from ...core import (
    SAMPLE_NOTES,
    Note,
    NoteDraft,
    RemoteNoteNotFound,
    ValidationFailure,
)
from ...store import InMemoryNoteService
from ..config import load_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/notes", tags=["notes"])

# Global note service instance (lazy initialization for better startup)
_service: Optional[InMemoryNoteService] = None


def get_note_service() -> InMemoryNoteService:
    """Get or create the global note service.

    Returns:
        InMemoryNoteService: The singleton note service, seeded with the
        sample notes when the API config asks for it.
    """
    global _service
    if _service is None:
        config = load_config()
        seed = SAMPLE_NOTES if config.notes.seed_sample_notes else ()
        _service = InMemoryNoteService(seed)
        logger.info(f"Note service initialized with {len(seed)} notes")
    return _service


def reset_note_service(service: Optional[InMemoryNoteService] = None) -> None:
    """Replace the global note service (useful for testing)."""
    global _service
    _service = service


class NoteModel(BaseModel):
    """A stored note."""

    id: str
    title: str
    content: str


class NoteCreateRequest(BaseModel):
    """Request model for creating a note. The id is optional."""

    id: Optional[str] = None
    title: str
    content: str


class NoteUpdateRequest(BaseModel):
    """Request model for replacing a note's title and content."""

    title: str
    content: str


class NotesListResponse(BaseModel):
    """Response model for listing notes."""

    notes: List[NoteModel]
    count: int


def _to_model(note: Note) -> NoteModel:
    return NoteModel(id=note.id, title=note.title, content=note.content)


@router.get("", response_model=NotesListResponse)
async def list_notes(q: Optional[str] = None) -> NotesListResponse:
    """
    List notes, most recent first.

    Args:
        q: Optional search text matched case-insensitively against title
           and content.

    Returns:
        The matching notes and their count.
    """
    notes = await get_note_service().search_notes(q)
    return NotesListResponse(notes=[_to_model(n) for n in notes], count=len(notes))


@router.post("", response_model=NoteModel, status_code=201)
async def create_note(request: NoteCreateRequest) -> NoteModel:
    """
    Create a note.

    The client id is kept unless it is missing or already taken, in which
    case the server assigns one.
    """
    draft = NoteDraft(title=request.title, content=request.content)
    try:
        draft.validate()
    except ValidationFailure as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    note = draft.to_note(request.id or "")
    created = await get_note_service().add_note(note)
    return _to_model(created)


@router.put("/{note_id:path}", response_model=NoteModel)
async def update_note(note_id: str, request: NoteUpdateRequest) -> NoteModel:
    """Replace a note's title and content."""
    note = Note(id=note_id, title=request.title, content=request.content)
    try:
        await get_note_service().update_note(note)
    except RemoteNoteNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return _to_model(note)


@router.delete("/{note_id:path}", status_code=204)
async def delete_note(note_id: str) -> Response:
    """Delete a note."""
    try:
        await get_note_service().delete_note(note_id)
    except RemoteNoteNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return Response(status_code=204)
