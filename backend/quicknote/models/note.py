"""
QuickNote Backend — Note Domain Model
=======================================

What:  The record kept by the Note Store for every saved note.
Why:   Keeps the stored shape separate from the API schema, the same way an
       ORM model is kept separate from its Pydantic response model.
Who:   Created by NoteStore.create(); read by the notes routes.

Lifecycle:
    1. Created on a validated save request (id + timestamp assigned by the store)
    2. Never mutated. "Editing" happens client-side by loading the content
       into the composer; re-saving creates a new note.
    3. Destroyed on explicit delete.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    """
    A saved note.

    Attributes:
        id:         Unique, strictly increasing for the lifetime of the process
        content:    Non-empty, trimmed text
        timestamp:  Creation time in epoch milliseconds
    """

    id: int
    content: str
    timestamp: int
