"""Google Gemini adapter for latex2doc."""

from __future__ import annotations

import logging

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from latex2doc.llm.base import LLMProvider
from latex2doc.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage

logger = logging.getLogger(__name__)

_AUTH_ERRORS = (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)


def _is_auth_failure(error: google_exceptions.GoogleAPIError) -> bool:
    # Gemini reports a bad key as 400 INVALID_ARGUMENT "API key not valid"
    return isinstance(error, _AUTH_ERRORS) or "api key" in str(error).lower()


class GeminiProvider(LLMProvider):
    """Gemini adapter using the google-generativeai async SDK."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        genai.configure(api_key=config.api_key)
        self._model = genai.GenerativeModel(config.model)

    async def generate(self, prompt: str) -> LLMResponse:
        try:
            response = await self._model.generate_content_async(
                prompt,
                generation_config=genai.types.GenerationConfig(
                    max_output_tokens=self.config.max_tokens,
                    temperature=self.config.temperature,
                ),
            )
        except google_exceptions.GoogleAPIError as e:
            raise LLMError(
                "gemini",
                "generate",
                e,
                retryable=isinstance(e, google_exceptions.ResourceExhausted),
                auth_failure=_is_auth_failure(e),
            ) from e

        try:
            text = response.text
        except ValueError:
            # blocked prompt or a candidate without text parts
            logger.debug("Gemini response carried no text parts", exc_info=True)
            text = ""

        usage = getattr(response, "usage_metadata", None)
        return LLMResponse(
            content=text or "",
            usage=TokenUsage(
                input_tokens=usage.prompt_token_count,
                output_tokens=usage.candidates_token_count,
            )
            if usage is not None
            else None,
            model=self.config.model,
        )
