"""WordExporter: wraps converted HTML in a Word-openable document shell."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from latex2doc.config.models import ExportConfig

logger = logging.getLogger(__name__)

WORD_MIME_TYPE = "application/msword"
DEFAULT_TITLE = "Export HTML To Doc"

_WORD_SHELL = """\
<!DOCTYPE html>
<html xmlns:o='urn:schemas-microsoft-com:office:office' \
xmlns:w='urn:schemas-microsoft-com:office:word' \
xmlns='http://www.w3.org/TR/REC-html40'>
<head><meta charset='utf-8'><title>{title}</title></head>
<body>{body}</body>
</html>
"""


class ExportedDocument(BaseModel):
    """A ready-to-save Word document."""

    file_name: str
    mime_type: str = WORD_MIME_TYPE
    content: bytes


def wrap_word_document(fragment: str, title: str = DEFAULT_TITLE) -> str:
    """Embed an HTML fragment in a document shell Word recognizes."""
    return _WORD_SHELL.format(title=title, body=fragment)


def _sanitize_file_name(name: str) -> str:
    """Make a user-supplied file name safe to write.

    Drops directory components and ``..`` segments, and removes characters
    that are problematic on common filesystems.
    """
    name = name.replace("\\", "/").rsplit("/", 1)[-1]
    name = name.replace("..", "")
    name = re.sub(r"[^\w\-\. ]", "", name).strip()
    if not name or name.strip(".") == "":
        return ""
    return name


def export_file_name(
    source_name: str,
    extension: str = ".doc",
    fallback: str = "converted-document",
    source_extensions: Sequence[str] = (".tex",),
) -> str:
    """Name the download after the source: ``paper.tex`` -> ``paper.doc``.

    Any of ``source_extensions`` is replaced, ignoring case; other names
    get ``extension`` appended.
    """
    name = _sanitize_file_name(source_name) or fallback
    lowered = name.lower()
    for suffix in source_extensions:
        if lowered.endswith(suffix.lower()) and len(name) > len(suffix):
            return name[: -len(suffix)] + extension
    return name + extension


class WordExporter:
    """Builds and writes .doc files from converted HTML fragments."""

    def __init__(
        self, config: ExportConfig, source_extensions: Sequence[str] = (".tex",)
    ) -> None:
        self.config = config
        self.source_extensions = tuple(source_extensions)
        self.output_dir = Path(config.output_dir)

    def build(self, html: str, source_name: str) -> ExportedDocument:
        file_name = export_file_name(
            source_name,
            self.config.extension,
            self.config.fallback_name,
            self.source_extensions,
        )
        return ExportedDocument(
            file_name=file_name,
            content=wrap_word_document(html).encode("utf-8"),
        )

    def write(self, html: str, source_name: str, *, dry_run: bool = False) -> Path:
        """Write the document under ``output_dir``.

        Returns the Path of the written (or would-be) file.
        """
        document = self.build(html, source_name)
        dest = self.output_dir / document.file_name

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(document.content)
        logger.info("wrote %s (%d bytes)", dest, len(document.content))
        return dest
