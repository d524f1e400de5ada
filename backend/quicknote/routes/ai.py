"""
QuickNote Backend — AI Route Handlers
=======================================

What:  POST /api/ai/complete and POST /api/ai/correct.
Why:   The browser never talks to the AI provider directly; the API key stays
       on the server.
How:   Delegates to the AIService on app.state. AIUnavailableError becomes a
       500 with a generic message (see main.register_exception_handlers).
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from quicknote.dependencies import get_ai_service
from quicknote.schemas.ai import (
    CompleteRequest,
    CompleteResponse,
    CorrectRequest,
    CorrectResponse,
)
from quicknote.schemas.note import ErrorResponse
from quicknote.services.llm_base import AIService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["AI"])


@router.post(
    "/complete",
    response_model=CompleteResponse,
    responses={
        500: {"description": "AI service failed", "model": ErrorResponse},
    },
    summary="Suggest up to three continuations of the current text",
)
async def complete(
    body: Optional[CompleteRequest] = None,
    ai: AIService = Depends(get_ai_service),
) -> CompleteResponse:
    # No body at all counts as missing text
    suggestions = await ai.suggest(body.text if body else None)
    return CompleteResponse(suggestions=suggestions)


@router.post(
    "/correct",
    response_model=CorrectResponse,
    responses={
        400: {"description": "Text missing or blank", "model": ErrorResponse},
        500: {"description": "AI service failed", "model": ErrorResponse},
    },
    summary="Correct spelling, grammar and punctuation",
)
async def correct(
    body: Optional[CorrectRequest] = None,
    ai: AIService = Depends(get_ai_service),
) -> CorrectResponse:
    corrected = await ai.correct(body.text if body else None)
    return CorrectResponse(corrected_text=corrected)
