"""
QuickNote Backend — Prompt Templates
======================================

What:  The two prompts sent to the external text-completion service, and the
       parsing of the suggestion reply.
Why:   Prompt text, token limit and temperature are part of the contract with
       the external service. Keeping them here (with numbers coming from
       settings) keeps them out of the service logic.
How:   A PromptTemplate holds two named PromptVariants, `complete` and
       `correct`, each rendered with the sanitized user text.
"""

from dataclasses import dataclass
from typing import Dict, List

# Text shorter than this never reaches the AI service
MIN_SUGGEST_LENGTH = 5
MAX_SUGGESTIONS = 3

COMPLETE_PROMPT = """Given this text: "{text}"

Provide 3 short word completions or next words that would naturally follow.
Respond with only the suggestions, one per line, no numbering or extra text."""

CORRECT_PROMPT = """Please correct any spelling, grammar, and punctuation errors in this text while maintaining its original meaning and style:

"{text}"

Respond with only the corrected text, no explanations."""


def sanitize(text: str) -> str:
    """Escape double quotes so the quoted block in the prompt stays well-formed."""
    return text.replace('"', '\\"')


@dataclass(frozen=True)
class PromptVariant:
    """One prompt plus the generation parameters it is sent with."""

    name: str
    template: str
    max_tokens: int
    temperature: float

    def render(self, text: str) -> str:
        return self.template.format(text=sanitize(text))

    @property
    def generation_config(self) -> Dict[str, float]:
        """Keyword form accepted by GenerativeModel.generate_content_async."""
        return {
            "max_output_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


class PromptTemplate:
    """
    Named prompt variants for the AI proxy.

    Usage:
        prompts = PromptTemplate.from_settings(settings)
        prompt = prompts.complete.render("The quick brown")
    """

    def __init__(self, complete: PromptVariant, correct: PromptVariant):
        self.complete = complete
        self.correct = correct

    @classmethod
    def from_settings(cls, settings) -> "PromptTemplate":
        return cls(
            complete=PromptVariant(
                name="complete",
                template=COMPLETE_PROMPT,
                max_tokens=settings.complete_max_tokens,
                temperature=settings.complete_temperature,
            ),
            correct=PromptVariant(
                name="correct",
                template=CORRECT_PROMPT,
                max_tokens=settings.correct_max_tokens,
                temperature=settings.correct_temperature,
            ),
        )


def parse_suggestions(reply: str) -> List[str]:
    """
    Split a completion reply into at most three suggestions.

    One suggestion per line; blank lines are dropped and surrounding
    whitespace is trimmed. Nothing else is validated.
    """
    lines = [line.strip() for line in (reply or "").splitlines()]
    return [line for line in lines if line][:MAX_SUGGESTIONS]
