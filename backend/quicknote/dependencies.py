"""
QuickNote Backend — Route Dependencies
========================================

What:  FastAPI dependencies returning the per-application service instances.
Why:   The Note Store and AI service are created by create_app() and live on
       app.state, so every app instance (one per test) gets a fresh store.
How:   Routes declare `store: NoteStore = Depends(get_note_store)`.
"""

from fastapi import Request

from quicknote.services.llm_base import AIService
from quicknote.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_store


def get_ai_service(request: Request) -> AIService:
    return request.app.state.ai_service
