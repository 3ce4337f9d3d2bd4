"""Tests for upload validation and source file reading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from latex2doc.config.models import UploadConfig
from latex2doc.workflow.state import ErrorCategory
from latex2doc.workflow.uploads import UploadError, load_source_file, validate_upload

MIB = 1024 * 1024


# ---------------------------------------------------------------------------
# validate_upload
# ---------------------------------------------------------------------------


class TestValidateUpload:
    def test_accepts_tex_file(self):
        validate_upload("paper.tex", 1000, UploadConfig())

    def test_accepts_uppercase_extension(self):
        validate_upload("PAPER.TEX", 1000, UploadConfig())

    def test_rejects_wrong_extension(self):
        with pytest.raises(UploadError) as exc_info:
            validate_upload("doc.txt", 10, UploadConfig())
        assert exc_info.value.category is ErrorCategory.INVALID_FILE_TYPE
        assert ".tex" in exc_info.value.error.message

    def test_rejects_missing_extension(self):
        with pytest.raises(UploadError) as exc_info:
            validate_upload("Makefile", 10, UploadConfig())
        assert exc_info.value.category is ErrorCategory.INVALID_FILE_TYPE

    def test_rejects_oversized_file(self):
        with pytest.raises(UploadError) as exc_info:
            validate_upload("doc.tex", 6 * MIB, UploadConfig())
        assert exc_info.value.category is ErrorCategory.FILE_TOO_LARGE
        assert "5MB" in exc_info.value.error.message

    def test_exactly_at_limit_accepted(self):
        validate_upload("doc.tex", 5 * MIB, UploadConfig())

    def test_type_checked_before_size(self):
        with pytest.raises(UploadError) as exc_info:
            validate_upload("doc.txt", 6 * MIB, UploadConfig())
        assert exc_info.value.category is ErrorCategory.INVALID_FILE_TYPE

    def test_custom_extensions(self):
        config = UploadConfig(extensions=["latex", ".TEX"])
        assert config.extensions == [".latex", ".tex"]
        validate_upload("notes.latex", 10, config)


# ---------------------------------------------------------------------------
# load_source_file
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_load_reads_content_and_name(tex_file, sample_latex):
    document = await load_source_file(tex_file, UploadConfig())
    assert document.content == sample_latex
    assert document.file_name == "paper.tex"


@pytest.mark.asyncio
async def test_wrong_type_rejected_before_read(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("hello")

    with patch.object(Path, "read_text") as read_text:
        with pytest.raises(UploadError) as exc_info:
            await load_source_file(path, UploadConfig())

    assert exc_info.value.category is ErrorCategory.INVALID_FILE_TYPE
    read_text.assert_not_called()


@pytest.mark.asyncio
async def test_oversized_rejected_before_read(tmp_path):
    path = tmp_path / "doc.tex"
    with open(path, "wb") as f:
        f.truncate(6 * MIB)

    with patch.object(Path, "read_text") as read_text:
        with pytest.raises(UploadError) as exc_info:
            await load_source_file(path, UploadConfig())

    assert exc_info.value.category is ErrorCategory.FILE_TOO_LARGE
    read_text.assert_not_called()


@pytest.mark.asyncio
async def test_missing_file_is_read_error(tmp_path):
    with pytest.raises(UploadError) as exc_info:
        await load_source_file(tmp_path / "gone.tex", UploadConfig())
    assert exc_info.value.category is ErrorCategory.FILE_READ_ERROR


@pytest.mark.asyncio
async def test_undecodable_file_is_read_error(tmp_path):
    path = tmp_path / "latin.tex"
    path.write_bytes(b"\\section{Caf\xe9}")

    with pytest.raises(UploadError) as exc_info:
        await load_source_file(path, UploadConfig())

    assert exc_info.value.category is ErrorCategory.FILE_READ_ERROR
    assert exc_info.value.error.title == "File Read Error"


@pytest.mark.asyncio
async def test_configured_encoding_used(tmp_path):
    path = tmp_path / "latin.tex"
    path.write_bytes(b"\\section{Caf\xe9}")

    document = await load_source_file(path, UploadConfig(encoding="latin-1"))

    assert document.content == "\\section{Café}"
