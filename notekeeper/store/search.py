"""Search over a note collection."""

from typing import Iterable

from ..core import Note


def matches(note: Note, query: str) -> bool:
    """Check whether a note's title or content contains the query.

    Matching is a case-insensitive substring test, not token based.

    Args:
        note: The note to test
        query: The text to look for

    Returns:
        True if the query occurs in the title or the content
    """
    query_lower = query.lower()
    return query_lower in note.title.lower() or query_lower in note.content.lower()


def search_notes(notes: Iterable[Note], query: str) -> list[Note]:
    """Filter notes by a search query.

    Args:
        notes: The collection to search
        query: Search text. A query that is blank after trimming matches
            every note.

    Returns:
        A new list with the matching notes in collection order
    """
    if not query.strip():
        return list(notes)
    return [note for note in notes if matches(note, query)]
