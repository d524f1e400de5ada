"""
QuickNote Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between the browser client
       and the backend.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models and serializes
       return values through them.

Design Decision:
    Request fields are Optional on purpose. The HTTP layer only checks the
    shape of the body; whether a note's content is acceptable is decided by
    the Note Store, so a missing field and an empty one produce the same
    400 "Content is required" answer.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreateRequest(BaseModel):
    """Body of POST /api/notes."""
    content: Optional[str] = Field(default=None, description="Note text; trimmed before storing")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Representation of a stored note.
    Who:   Returned by GET /api/notes (as array items) and POST /api/notes.

    Why these fields:
        - id: Client uses this for the delete call
        - content: The note text
        - timestamp: Rendered as relative time ("2 hours ago")
    """
    id: int = Field(description="Unique note identifier, assigned in creation order")
    content: str = Field(description="Trimmed note text")
    timestamp: int = Field(description="Creation time in epoch milliseconds")

    model_config = {"from_attributes": True}


class DeleteResponse(BaseModel):
    message: str = Field(default="Note deleted")


# ══════════════════════════════════════════════════════════════════════════
# Error and Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body returned for every failed request.
    Why:   The client only ever shows a short message; request correlation is
           carried by the X-Request-ID header instead of the body.

    Example:
        {"error": "Note not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring."""
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    ai: str = Field(description="AI service status: available, unavailable, not_configured")
    uptime_seconds: float = Field(description="Seconds since service started")
