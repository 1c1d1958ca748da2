"""Health check endpoints for Notekeeper API."""

from fastapi import APIRouter

from .notes import get_note_service

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns:
        Health status of the API and the number of stored notes
    """
    notes = await get_note_service().search_notes()
    return {
        "status": "healthy",
        "version": "1.0.0",
        "notes": len(notes),
    }


@router.get("/")
async def root() -> dict:
    """
    Root endpoint.

    Returns:
        Basic API information
    """
    return {
        "name": "Notekeeper API",
        "version": "1.0.0",
        "docs": "/docs"
    }
