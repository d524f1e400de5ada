"""
QuickNote Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (fresh stores, a Gemini service
       with a mocked model, an API client bound to a fresh app).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── fake_clock: Controllable epoch-ms clock
    ├── note_store: Empty NoteStore using fake_clock
    ├── mock_model: Stand-in for genai.GenerativeModel
    ├── gemini_service: GeminiService wired to mock_model (genai patched)
    └── test_client: HTTPX AsyncClient for a fresh app using the two above
"""

import os

# Override settings for testing BEFORE any app imports
# Why: Tests must never use a real API key or a developer's .env values
os.environ["GEMINI_API_KEY"] = "test-key-not-real"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from quicknote.services.gemini_service import GeminiService
from quicknote.services.note_store import NoteStore


class FakeClock:
    """Epoch-ms clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def gemini_reply(text: str) -> MagicMock:
    """A minimal object shaped like a Gemini GenerateContentResponse."""
    response = MagicMock()
    response.text = text
    return response


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def note_store(fake_clock):
    return NoteStore(clock=fake_clock)


@pytest.fixture
def mock_model():
    """
    Stand-in for genai.GenerativeModel.

    Usage:
        mock_model.generate_content_async.return_value = gemini_reply("hello")
        mock_model.generate_content_async.side_effect = RuntimeError("down")
    """
    model = MagicMock()
    model.generate_content_async = AsyncMock(return_value=gemini_reply(""))
    return model


@pytest.fixture
def mock_genai(mock_model):
    with patch("quicknote.services.gemini_service.genai") as patched:
        patched.GenerativeModel.return_value = mock_model
        yield patched


@pytest.fixture
def gemini_service(mock_genai):
    return GeminiService()


@pytest_asyncio.fixture
async def test_client(gemini_service, note_store):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to a fresh app, so every
    test starts with an empty note store.
    """
    from quicknote.main import create_app

    app = create_app(ai_service=gemini_service, note_store=note_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
