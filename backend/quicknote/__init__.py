"""
QuickNote Backend — Application Package Initializer
===================================================

What: Marks the `quicknote` directory as a Python package.
Why:  Enables module imports like `from quicknote.config import settings`.
Who:  Used by uvicorn, pytest, and the `quicknote` console script.

Architecture Note:
    The backend is a thin layered service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Note Store, AI)       │  ← Validation, prompts, storage
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic request/response models
    └─────────────────────────────────────┘

    Notes live in memory for the lifetime of the process. There is no
    persistence layer; restarting the server starts with an empty list.
"""

__version__ = "1.0.0"
