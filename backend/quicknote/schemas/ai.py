"""
QuickNote Backend — AI Endpoint Schemas
=========================================

Request/response bodies for POST /api/ai/complete and POST /api/ai/correct.
The correction response uses the camelCase key `correctedText` on the wire,
which is what the browser client reads.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CompleteRequest(BaseModel):
    text: Optional[str] = Field(default=None, description="Current, unsaved composer text")


class CompleteResponse(BaseModel):
    suggestions: List[str] = Field(
        default_factory=list,
        description="Up to three continuations; empty when the text is too short",
    )


class CorrectRequest(BaseModel):
    text: Optional[str] = Field(default=None, description="Text to correct")


class CorrectResponse(BaseModel):
    corrected_text: str = Field(
        serialization_alias="correctedText",
        description="Corrected text returned verbatim (trimmed) from the AI service",
    )
