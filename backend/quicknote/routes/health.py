"""
QuickNote Backend — Health Check Route
========================================

What:  GET /health for monitoring probes.
How:   Reports the number of notes in memory and whether the AI service is
       reachable. The note store can't fail, so the service is "healthy"
       unless the AI service is unreachable ("degraded").
"""

import logging
import time

from fastapi import APIRouter, Depends

from quicknote import __version__
from quicknote.config import settings
from quicknote.dependencies import get_ai_service, get_note_store
from quicknote.schemas.note import HealthResponse
from quicknote.services.llm_base import AIService
from quicknote.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    store: NoteStore = Depends(get_note_store),
    ai: AIService = Depends(get_ai_service),
) -> HealthResponse:
    overall = "healthy"

    if not settings.ai_configured:
        ai_status = "not_configured"
        overall = "degraded"
    elif await ai.health_check():
        ai_status = "available"
    else:
        ai_status = "unavailable"
        overall = "degraded"
        logger.warning("Health check: AI service unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        notes=len(store),
        ai=ai_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
