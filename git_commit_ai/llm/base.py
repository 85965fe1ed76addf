"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients: system + user prompt in, text out."""

    @abstractmethod
    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
