"""Pydantic models for the LLM subsystem."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class LLMError(Exception):
    """Wraps provider-specific exceptions with context."""

    def __init__(
        self,
        provider: str,
        operation: str,
        cause: Exception,
        retryable: bool = False,
        auth_failure: bool = False,
    ) -> None:
        self.provider = provider
        self.operation = operation
        self.retryable = retryable
        self.auth_failure = auth_failure
        super().__init__(f"{provider} {operation} failed: {cause}")
        self.__cause__ = cause


class MissingCredentialsError(ValueError):
    """The environment variable holding the API key is unset or empty."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"Missing API key: set environment variable {env_var!r}")


class LLMConfig(BaseModel):
    """Configuration for an LLM provider."""

    provider: Literal["google"]
    model: str
    max_tokens: int = 32768
    temperature: float = 0.2
    api_key: str | None = None


class TokenUsage(BaseModel):
    """Token usage stats from a single LLM call."""

    input_tokens: int
    output_tokens: int


class LLMResponse(BaseModel):
    """Structured response from an LLM provider."""

    content: str
    usage: TokenUsage | None = None
    model: str
