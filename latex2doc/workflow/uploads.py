"""Validation and reading of uploaded LaTeX source files."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from latex2doc.config.models import UploadConfig
from latex2doc.converter.models import SourceDocument
from latex2doc.workflow.state import AppError, ErrorCategory, make_error

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """An uploaded file was rejected or could not be read."""

    def __init__(self, error: AppError) -> None:
        self.error = error
        super().__init__(f"{error.title}: {error.message}")

    @property
    def category(self) -> ErrorCategory:
        return self.error.category


def validate_upload(name: str, size: int, config: UploadConfig) -> None:
    """Reject a file by name and size before anything is read.

    Raises UploadError with INVALID_FILE_TYPE or FILE_TOO_LARGE.
    """
    if Path(name).suffix.lower() not in config.extensions:
        raise UploadError(
            make_error(
                ErrorCategory.INVALID_FILE_TYPE,
                extensions=" / ".join(config.extensions),
            )
        )
    if size > config.max_file_size_bytes:
        raise UploadError(
            make_error(ErrorCategory.FILE_TOO_LARGE, max_mb=config.max_file_size_mb)
        )


async def load_source_file(path: str | Path, config: UploadConfig) -> SourceDocument:
    """Validate and read a LaTeX file into a SourceDocument.

    The read runs in a worker thread; any OS or decoding failure becomes
    an UploadError with FILE_READ_ERROR.
    """
    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError as e:
        logger.warning("cannot stat %s: %s", path, e)
        raise UploadError(make_error(ErrorCategory.FILE_READ_ERROR)) from e

    validate_upload(path.name, size, config)

    try:
        content = await asyncio.to_thread(path.read_text, encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("failed to read %s: %s", path, e)
        raise UploadError(make_error(ErrorCategory.FILE_READ_ERROR)) from e

    logger.debug("read %s (%d bytes)", path, size)
    return SourceDocument(content=content, file_name=path.name)
