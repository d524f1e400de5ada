"""
QuickNote Backend — Notes Route Handlers
==========================================

What:  GET /api/notes (list), POST /api/notes (create), DELETE /api/notes/{id}.
Why:   The CRUD surface the browser client drives.
How:   Shape-checks the body, delegates to the NoteStore, returns JSON.
       Store errors (ValidationError, NotFoundError) are turned into 400/404
       by the global handlers in main.py.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from quicknote.dependencies import get_note_store
from quicknote.exceptions import NotFoundError
from quicknote.schemas.note import (
    DeleteResponse,
    ErrorResponse,
    NoteCreateRequest,
    NoteResponse,
)
from quicknote.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes, newest first",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[NoteResponse]:
    return [NoteResponse.model_validate(note) for note in store.list()]


@router.post(
    "/notes",
    response_model=NoteResponse,
    responses={
        200: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Content missing or blank", "model": ErrorResponse},
    },
    summary="Save a new note",
)
async def create_note(
    body: NoteCreateRequest,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    """
    Save a note.

    Answers 200 (not 201) with the created note; the browser client only
    checks for a 2xx status.
    """
    note = store.create(body.content)
    return NoteResponse.model_validate(note)


@router.delete(
    "/notes/{note_id}",
    response_model=DeleteResponse,
    responses={
        200: {"description": "Note deleted", "model": DeleteResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> DeleteResponse:
    # Only plain ASCII digits name a note; "1_0", "+1" or " 1" are unknown ids
    if not (note_id.isascii() and note_id.isdigit()):
        raise NotFoundError(resource="note", resource_id=note_id)

    store.delete(int(note_id))
    return DeleteResponse(message="Note deleted")
