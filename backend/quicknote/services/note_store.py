"""
QuickNote Backend — Note Store
================================

What:  Volatile, process-local storage for notes.
Why:   The application deliberately keeps notes in memory only. There is no
       database, no write-ahead log and no crash recovery; a restart starts
       from an empty list.
How:   An OrderedDict keyed by id plus a monotonic counter field. One store is
       constructed per application instance (create_app) and discarded with it.
Who:   Called by the notes routes through the get_note_store dependency.

Concurrency:
    Route handlers run on the event loop and call the store synchronously.
    create() allocates the id and inserts the note with no await in between,
    so two concurrent create requests can never receive the same id.
"""

import logging
import time
from collections import OrderedDict
from typing import Callable, List, Optional

from quicknote.exceptions import NotFoundError, ValidationError
from quicknote.models.note import Note

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class NoteStore:
    """
    In-memory note collection with create/list/delete.

    There is intentionally no update operation. Loading a note into the editor
    and saving it again creates a new note; the original stays until it is
    deleted on its own.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        Args:
            clock: Returns the current time in epoch milliseconds. Tests pass
                   a fake clock to control timestamps.
        """
        self._notes: "OrderedDict[int, Note]" = OrderedDict()
        self._next_id = 1
        self._clock = clock or _now_ms

    def __len__(self) -> int:
        return len(self._notes)

    def list(self) -> List[Note]:
        """
        All notes, most recent first.

        Ordered by timestamp descending. Notes saved within the same
        millisecond are ordered by id descending, so the later one still
        comes first.
        """
        return sorted(
            self._notes.values(),
            key=lambda note: (note.timestamp, note.id),
            reverse=True,
        )

    def create(self, content: Optional[str]) -> Note:
        """
        Validate, stamp and store a new note.

        Raises:
            ValidationError: content is missing or empty after trimming.
                The store is left unchanged.
        """
        if not isinstance(content, str) or not content.strip():
            raise ValidationError(message="Content is required", field="content")

        note = Note(id=self._next_id, content=content.strip(), timestamp=self._clock())
        self._next_id += 1
        self._notes[note.id] = note

        logger.info("Note %d created (%d chars)", note.id, len(note.content))
        return note

    def get(self, note_id: int) -> Note:
        """Raises NotFoundError for an unknown id."""
        try:
            return self._notes[note_id]
        except KeyError:
            raise NotFoundError(resource="note", resource_id=note_id)

    def delete(self, note_id: int) -> None:
        """
        Remove a note.

        Raises:
            NotFoundError: no note with this id exists. The store is left unchanged.
        """
        if note_id not in self._notes:
            raise NotFoundError(resource="note", resource_id=note_id)
        del self._notes[note_id]
        logger.info("Note %d deleted", note_id)
