"""LLM provider abstraction layer."""

import os

from latex2doc.config.models import LLMSettings
from latex2doc.llm.base import LLMProvider
from latex2doc.llm.gemini import GeminiProvider
from latex2doc.llm.models import (
    LLMConfig,
    LLMError,
    LLMResponse,
    MissingCredentialsError,
    TokenUsage,
)

_PROVIDER_MAP: dict[str, type[LLMProvider]] = {
    "google": GeminiProvider,
}


def create_llm_provider(config: LLMSettings) -> LLMProvider:
    """Create an LLM provider from app-level settings.

    Resolves the API key from the env var in config.api_key_env, then
    bridges the app-level LLMSettings to the provider-level LLMConfig.
    A missing key raises MissingCredentialsError; callers treat it as fatal.
    """
    cls = _PROVIDER_MAP.get(config.provider)
    if cls is None:
        raise ValueError(
            f"Unsupported LLM provider: {config.provider!r}. "
            f"Supported: {', '.join(_PROVIDER_MAP)}"
        )
    api_key = os.environ.get(config.api_key_env)
    if not api_key:
        raise MissingCredentialsError(config.api_key_env)
    llm_config = LLMConfig(
        provider=config.provider,
        model=config.model,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        api_key=api_key,
    )
    return cls(llm_config)


__all__ = [
    "GeminiProvider",
    "LLMConfig",
    "LLMError",
    "LLMProvider",
    "LLMResponse",
    "MissingCredentialsError",
    "TokenUsage",
    "create_llm_provider",
]
