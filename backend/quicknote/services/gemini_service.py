"""
QuickNote Backend — Google Gemini Service Implementation
==========================================================

What:  Concrete AI proxy using the Google Gemini API for next-word
       suggestions and text correction.
Why:   Gemini offers free tier access, which is plenty for a single-user
       note-taking app.
How:   Renders one of the two prompt variants, sends it once, reshapes the
       reply. Any failure is logged and surfaced as AIUnavailableError.
Who:   Instantiated by create_app(); called by the AI routes.

Failure model:
    Fire once per request. No retry, no circuit breaker, no timeout beyond
    what the SDK's transport enforces. A hung call blocks only the request
    awaiting it.
"""

import asyncio
import logging
import time
import uuid
from typing import List, Optional

import google.generativeai as genai

from quicknote.config import settings
from quicknote.exceptions import AIUnavailableError, ValidationError
from quicknote.services.llm_base import AIService
from quicknote.services.prompts import (
    MIN_SUGGEST_LENGTH,
    PromptTemplate,
    PromptVariant,
    parse_suggestions,
)

logger = logging.getLogger(__name__)


class GeminiService(AIService):
    """
    Google Gemini implementation of the AI proxy.

    The model object is created once and reused for every request; the API
    key is configured on the SDK at construction time.
    """

    def __init__(self, prompts: Optional[PromptTemplate] = None):
        # The SDK keeps auth in module-level state
        if settings.ai_configured:
            genai.configure(api_key=settings.gemini_api_key)

        self.model = genai.GenerativeModel(settings.ai_model)
        self.prompts = prompts or PromptTemplate.from_settings(settings)

        logger.info(
            "GeminiService initialized with model=%s (api key %s)",
            settings.ai_model,
            "set" if settings.ai_configured else "missing",
        )

    async def suggest(self, text: Optional[str]) -> List[str]:
        # Short-circuit: not worth a network call
        if not text or len(text) < MIN_SUGGEST_LENGTH:
            return []

        request_id = str(uuid.uuid4())[:8]
        try:
            reply = await self._generate(self.prompts.complete, text, request_id)
        except Exception as e:
            logger.error("[%s] AI completion error: %s", request_id, str(e))
            raise AIUnavailableError(
                message="Failed to get AI suggestions",
                operation="complete",
                context={"request_id": request_id, "error_type": type(e).__name__},
            ) from e

        suggestions = parse_suggestions(reply)
        logger.debug("[%s] %d suggestions returned", request_id, len(suggestions))
        return suggestions

    async def correct(self, text: Optional[str]) -> str:
        if not text or not text.strip():
            raise ValidationError(message="Text is required", field="text")

        request_id = str(uuid.uuid4())[:8]
        try:
            reply = await self._generate(self.prompts.correct, text, request_id)
        except Exception as e:
            logger.error("[%s] AI correction error: %s", request_id, str(e))
            raise AIUnavailableError(
                message="Failed to correct text",
                operation="correct",
                context={"request_id": request_id, "error_type": type(e).__name__},
            ) from e

        return reply.strip()

    async def _generate(self, variant: PromptVariant, text: str, request_id: str) -> str:
        """
        Send one rendered prompt to Gemini and return the reply text.

        Raises whatever the SDK raises. Reading `response.text` raises
        ValueError when the reply was blocked or carries no text part, which
        the callers treat like any other failure.
        """
        start_time = time.time()

        response = await self.model.generate_content_async(
            variant.render(text),
            generation_config=variant.generation_config,
        )
        reply = response.text or ""

        logger.info(
            "[%s] Gemini %s completed in %.0fms (%d chars in, %d chars out)",
            request_id,
            variant.name,
            (time.time() - start_time) * 1000,
            len(text),
            len(reply),
        )
        return reply

    async def health_check(self) -> bool:
        """
        Check if the Gemini API is reachable.

        Lists models (no token cost). Returns False without a network call
        when no API key is configured.
        """
        if not settings.ai_configured:
            return False
        try:
            # list_models is a blocking paginated call; keep it off the event loop
            model_names = await asyncio.to_thread(
                lambda: [m.name for m in genai.list_models()]
            )
            target = f"models/{settings.ai_model}"
            if target not in model_names:
                logger.warning("Configured model %s not found in available models", target)
            return True
        except Exception as e:
            logger.warning("Gemini health check failed: %s", str(e))
            return False
