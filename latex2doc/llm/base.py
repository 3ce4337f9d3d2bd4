"""Abstract LLM interface for latex2doc."""

from __future__ import annotations

from abc import ABC, abstractmethod

from latex2doc.llm.models import LLMConfig, LLMResponse


class LLMProvider(ABC):
    """Provider-agnostic interface for a single text-generation call.

    The conversion gateway talks only to this interface, which is also the
    seam tests mock instead of the network.
    """

    def __init__(self, config: LLMConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(self, prompt: str) -> LLMResponse:
        """Generate a complete response for ``prompt`` (one-shot).

        Implementations raise ``LLMError`` for provider failures and return
        an empty ``content`` when the model produced no text.
        """
        ...
