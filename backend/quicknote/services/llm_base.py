"""
QuickNote Backend — Abstract AI Service Interface
===================================================

What:  Abstract base class defining the contract for the AI proxy.
Why:   Routes depend on this interface, not on Gemini. Tests swap in a stub
       that records calls, which is how "no external call for short text"
       is verified.
How:   Concrete implementations inherit from AIService and implement
       suggest(), correct() and health_check().

Contract:
    - Each call reaches the external service at most once (no retries)
    - Provider errors are wrapped in AIUnavailableError
    - Nothing is cached between calls
"""

from abc import ABC, abstractmethod
from typing import List


class AIService(ABC):
    """
    Interface for AI-assisted suggestions and corrections.

    Implementations:
        - GeminiService: Google Gemini API (default)
    """

    @abstractmethod
    async def suggest(self, text: str) -> List[str]:
        """
        Propose up to three short continuations of in-progress text.

        Returns:
            Up to three suggestion strings. An empty list, without any external
            call, when the text is shorter than MIN_SUGGEST_LENGTH.

        Raises:
            AIUnavailableError: the external service failed. Callers treat this
                as "suggestions unavailable", never as fatal.
        """
        ...

    @abstractmethod
    async def correct(self, text: str) -> str:
        """
        Fix spelling, grammar and punctuation while keeping meaning and style.

        Returns:
            The service's reply, trimmed, verbatim.

        Raises:
            ValidationError: text is empty after trimming (no external call).
            AIUnavailableError: the external service failed.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """True if the service is reachable. Never raises."""
        ...
