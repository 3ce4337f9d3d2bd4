"""Conversion gateway: one model call per LaTeX-to-HTML conversion."""

from __future__ import annotations

import asyncio
import logging

from latex2doc.converter.models import (
    ConversionOptions,
    GatewayError,
    GatewayErrorKind,
)
from latex2doc.converter.prompts import build_conversion_prompt
from latex2doc.llm.base import LLMProvider
from latex2doc.llm.models import LLMError

logger = logging.getLogger(__name__)

FENCE_OPEN = "```html"
FENCE_CLOSE = "```"


def strip_code_fences(text: str) -> str:
    """Remove a leading ```html and a trailing ``` marker, then trim."""
    html = text.strip()
    if html.startswith(FENCE_OPEN):
        html = html[len(FENCE_OPEN):]
    if html.endswith(FENCE_CLOSE):
        html = html[: -len(FENCE_CLOSE)]
    return html.strip()


class ConversionGateway:
    """Sends the conversion prompt to the model and normalizes the reply.

    No caching and no retry: every ``convert`` call makes exactly one
    request. ``timeout`` (seconds) bounds that request when set.
    """

    def __init__(self, llm: LLMProvider, timeout: float | None = None) -> None:
        self.llm = llm
        self.timeout = timeout

    async def convert(self, source: str, options: ConversionOptions) -> str:
        """Convert LaTeX ``source`` to an HTML string.

        The caller guarantees ``source`` is not blank. Raises GatewayError.
        """
        prompt = build_conversion_prompt(source, options)
        logger.info(
            "converting %d chars of LaTeX with %s", len(source), self.llm.config.model
        )

        try:
            response = await asyncio.wait_for(
                self.llm.generate(prompt), timeout=self.timeout
            )
        except LLMError as e:
            logger.warning("model call failed: %s", e)
            if e.auth_failure:
                raise GatewayError(
                    GatewayErrorKind.AUTH_FAILURE,
                    "Invalid API Key. Please check your configuration.",
                ) from e
            raise GatewayError(
                GatewayErrorKind.TRANSPORT,
                f"Failed to communicate with the model API: {e}",
            ) from e
        except asyncio.TimeoutError as e:
            logger.warning("model call exceeded %ss", self.timeout)
            raise GatewayError(
                GatewayErrorKind.TRANSPORT,
                f"The model API did not answer within {self.timeout}s.",
            ) from e
        except Exception as e:
            logger.warning("transport error: %s: %s", type(e).__name__, e)
            raise GatewayError(
                GatewayErrorKind.TRANSPORT,
                f"Failed to communicate with the model API: {e}",
            ) from e

        html = strip_code_fences(response.content or "")
        if not html:
            logger.warning("model returned no usable text")
            raise GatewayError(
                GatewayErrorKind.EMPTY_RESPONSE,
                "The model could not convert the provided LaTeX.",
            )

        if response.usage is not None:
            logger.debug(
                "model usage: %d input / %d output tokens",
                response.usage.input_tokens,
                response.usage.output_tokens,
            )
        logger.info("conversion produced %d chars of HTML", len(html))
        return html
