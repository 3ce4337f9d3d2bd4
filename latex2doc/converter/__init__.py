"""LaTeX conversion subsystem: prompt building and the model gateway.

The gateway lives in ``latex2doc.converter.gateway``; it is not re-exported
here because config models import this package.
"""

from latex2doc.converter.models import (
    ConversionOptions,
    GatewayError,
    GatewayErrorKind,
    SourceDocument,
)
from latex2doc.converter.prompts import build_conversion_prompt

__all__ = [
    "ConversionOptions",
    "GatewayError",
    "GatewayErrorKind",
    "SourceDocument",
    "build_conversion_prompt",
]
