"""Workflow state and the pure transitions between its phases."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from latex2doc.converter.models import (
    ConversionOptions,
    GatewayErrorKind,
    SourceDocument,
)


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ErrorCategory(str, Enum):
    INPUT_REQUIRED = "input_required"
    INVALID_FILE_TYPE = "invalid_file_type"
    FILE_TOO_LARGE = "file_too_large"
    FILE_READ_ERROR = "file_read_error"
    API_ERROR = "api_error"
    CONVERSION_FAILED = "conversion_failed"
    NETWORK_ERROR = "network_error"
    UNKNOWN = "unknown"


class AppError(BaseModel):
    """User-facing error: a title and a message."""

    model_config = ConfigDict(frozen=True)

    category: ErrorCategory
    title: str
    message: str


_ERROR_TEXT: dict[ErrorCategory, tuple[str, str]] = {
    ErrorCategory.INPUT_REQUIRED: (
        "Input Required",
        "Please enter LaTeX content or upload a file.",
    ),
    ErrorCategory.INVALID_FILE_TYPE: (
        "Invalid File Type",
        "Please upload a valid {extensions} file.",
    ),
    ErrorCategory.FILE_TOO_LARGE: (
        "File Too Large",
        "Please upload a file smaller than {max_mb}MB.",
    ),
    ErrorCategory.FILE_READ_ERROR: (
        "File Read Error",
        "An error occurred while trying to read the selected file.",
    ),
    ErrorCategory.API_ERROR: (
        "API Error",
        "There is an issue with the API configuration. Please contact support.",
    ),
    ErrorCategory.CONVERSION_FAILED: (
        "Conversion Failed",
        "The model could not process your LaTeX code. "
        "Please check it for significant syntax errors.",
    ),
    ErrorCategory.NETWORK_ERROR: (
        "Network Error",
        "Could not connect to the conversion service. "
        "Please check your internet connection.",
    ),
    ErrorCategory.UNKNOWN: (
        "An Unknown Error Occurred",
        "Something went wrong. Please try again or check the logs for details.",
    ),
}

_GATEWAY_CATEGORIES: dict[GatewayErrorKind, ErrorCategory] = {
    GatewayErrorKind.AUTH_FAILURE: ErrorCategory.API_ERROR,
    GatewayErrorKind.EMPTY_RESPONSE: ErrorCategory.CONVERSION_FAILED,
    GatewayErrorKind.TRANSPORT: ErrorCategory.NETWORK_ERROR,
}


def make_error(category: ErrorCategory, **details: object) -> AppError:
    """Build the AppError for ``category``; ``details`` fill message placeholders."""
    title, message = _ERROR_TEXT[category]
    if details:
        message = message.format(**details)
    return AppError(category=category, title=title, message=message)


def category_for_gateway_error(kind: GatewayErrorKind) -> ErrorCategory:
    return _GATEWAY_CATEGORIES[kind]


class WorkflowState(BaseModel):
    """Immutable snapshot of one conversion session."""

    model_config = ConfigDict(frozen=True)

    source: SourceDocument = Field(default_factory=SourceDocument)
    options: ConversionOptions = Field(default_factory=ConversionOptions)
    is_loading: bool = False
    result: str | None = None
    error: AppError | None = None
    # bumped whenever the source is replaced
    revision: int = 0
    pending_revision: int | None = None

    @model_validator(mode="after")
    def _phases_are_exclusive(self) -> WorkflowState:
        if self.is_loading and (self.result is not None or self.error is not None):
            raise ValueError("a loading state cannot carry a result or an error")
        if self.result is not None and self.error is not None:
            raise ValueError("a state cannot carry both a result and an error")
        if self.result is not None and not self.result.strip():
            raise ValueError("result must not be empty")
        return self

    @property
    def phase(self) -> Phase:
        if self.is_loading:
            return Phase.LOADING
        if self.result is not None:
            return Phase.SUCCESS
        if self.error is not None:
            return Phase.ERROR
        return Phase.IDLE


def _evolve(state: WorkflowState, **changes: object) -> WorkflowState:
    # model_copy skips validation; rebuild so the phase invariants are checked
    return WorkflowState.model_validate({**dict(state), **changes})


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def source_replaced(state: WorkflowState, source: SourceDocument) -> WorkflowState:
    """New text or a new file: drop any result or error, keep loading as is."""
    return _evolve(
        state,
        source=source,
        result=None,
        error=None,
        revision=state.revision + 1,
    )


def options_changed(state: WorkflowState, key: str, value: bool) -> WorkflowState:
    return _evolve(state, options=state.options.with_option(key, value))


def error_raised(state: WorkflowState, error: AppError) -> WorkflowState:
    """Enter the error phase outside of a conversion (input or upload errors)."""
    if state.is_loading:
        raise ValueError("cannot raise an input error while a conversion is loading")
    return _evolve(state, result=None, error=error)


def conversion_started(state: WorkflowState) -> WorkflowState:
    if state.is_loading:
        raise ValueError("a conversion is already in flight")
    return _evolve(
        state,
        is_loading=True,
        result=None,
        error=None,
        pending_revision=state.revision,
    )


def _is_stale(state: WorkflowState) -> bool:
    return state.pending_revision != state.revision


def conversion_succeeded(state: WorkflowState, html: str) -> WorkflowState:
    """Finish loading with ``html``, unless the source changed meanwhile."""
    if _is_stale(state):
        return _evolve(state, is_loading=False, pending_revision=None)
    return _evolve(state, is_loading=False, pending_revision=None, result=html)


def conversion_failed(state: WorkflowState, error: AppError) -> WorkflowState:
    """Finish loading with ``error``, unless the source changed meanwhile."""
    if _is_stale(state):
        return _evolve(state, is_loading=False, pending_revision=None)
    return _evolve(state, is_loading=False, pending_revision=None, error=error)
