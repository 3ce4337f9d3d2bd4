"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

DEFAULT_FILE_NAME = "converted-document"


class ConversionOptions(BaseModel):
    """User toggles that shape the conversion prompt."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_formatting: bool = True
    math_priority: bool = False
    no_image_placeholders: bool = False

    def with_option(self, key: str, value: bool) -> ConversionOptions:
        """Return a copy with one toggle changed. Unknown keys raise KeyError."""
        if key not in type(self).model_fields:
            raise KeyError(f"Unknown conversion option: {key!r}")
        return self.model_validate({**self.model_dump(), key: value})


class SourceDocument(BaseModel):
    """LaTeX source as typed or uploaded by the user."""

    model_config = ConfigDict(frozen=True)

    content: str = ""
    file_name: str = DEFAULT_FILE_NAME

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


class GatewayErrorKind(str, Enum):
    AUTH_FAILURE = "auth_failure"
    EMPTY_RESPONSE = "empty_response"
    TRANSPORT = "transport"


class GatewayError(Exception):
    """A conversion call failed; ``kind`` says how."""

    def __init__(self, kind: GatewayErrorKind, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(detail)
