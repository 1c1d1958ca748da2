"""Note model, drafts and id generation."""

import threading
import time
from dataclasses import asdict, dataclass, replace
from typing import Callable, Optional

from .errors import ValidationFailure


@dataclass(frozen=True)
class Note:
    """A single note.

    Notes are immutable; edits produce a new Note with the same id.
    """

    id: str
    title: str
    content: str

    def with_content(self, content: str) -> "Note":
        """Return a copy of this note with new content."""
        return replace(self, content=content)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Note":
        """Create a Note from dictionary."""
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            content=data.get("content") or "",
        )


@dataclass
class NoteDraft:
    """A note being written that has no id yet."""

    title: str = ""
    content: str = ""

    def is_blank(self) -> bool:
        """True if the title or the content is empty after trimming."""
        return not self.title.strip() or not self.content.strip()

    def validate(self) -> None:
        """Raise ValidationFailure if the draft cannot be saved."""
        if not self.title.strip():
            raise ValidationFailure("Note title cannot be empty")
        if not self.content.strip():
            raise ValidationFailure("Note content cannot be empty")

    def to_note(self, note_id: str) -> Note:
        """Attach an id to this draft."""
        return Note(id=note_id, title=self.title, content=self.content)


class NoteIdGenerator:
    """Hands out time-derived note ids.

    Ids are the current time in milliseconds as a decimal string. Within one
    generator they are strictly increasing, so two ids requested in the same
    millisecond still differ.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)


# Shown until the remote note service has answered.
SAMPLE_NOTES: tuple[Note, ...] = (
    Note(id="1", title="State", content="Component State"),
    Note(
        id="2",
        title="Custom",
        content="Components are a way of packaging and reusing code",
    ),
    Note(id="3", title="Image", content="The React Native Image Component"),
)
