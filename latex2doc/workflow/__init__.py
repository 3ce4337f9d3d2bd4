"""Conversion workflow: session state, upload validation, and the controller."""

from latex2doc.workflow.controller import ConversionWorkflow
from latex2doc.workflow.state import (
    AppError,
    ErrorCategory,
    Phase,
    WorkflowState,
    make_error,
)
from latex2doc.workflow.uploads import UploadError, load_source_file, validate_upload

__all__ = [
    "AppError",
    "ConversionWorkflow",
    "ErrorCategory",
    "Phase",
    "UploadError",
    "WorkflowState",
    "load_source_file",
    "make_error",
    "validate_upload",
]
