"""Tests for the Word export writer."""

import pytest

from latex2doc.config.models import ExportConfig
from latex2doc.export.writer import (
    WORD_MIME_TYPE,
    WordExporter,
    _sanitize_file_name,
    export_file_name,
    wrap_word_document,
)


# ---------------------------------------------------------------------------
# wrap_word_document
# ---------------------------------------------------------------------------


class TestWrapWordDocument:
    def test_declares_office_namespaces(self):
        doc = wrap_word_document("<p>x</p>")
        assert "xmlns:o='urn:schemas-microsoft-com:office:office'" in doc
        assert "xmlns:w='urn:schemas-microsoft-com:office:word'" in doc
        assert "xmlns='http://www.w3.org/TR/REC-html40'" in doc

    def test_fragment_in_body(self):
        doc = wrap_word_document("<h1>A</h1>")
        assert "<body><h1>A</h1></body>" in doc

    def test_utf8_meta_and_title(self):
        doc = wrap_word_document("x", title="Paper")
        assert "<meta charset='utf-8'>" in doc
        assert "<title>Paper</title>" in doc
        assert doc.startswith("<!DOCTYPE html>")


# ---------------------------------------------------------------------------
# export_file_name
# ---------------------------------------------------------------------------


class TestExportFileName:
    def test_replaces_tex_extension(self):
        assert export_file_name("paper.tex") == "paper.doc"

    def test_appends_when_not_tex(self):
        assert export_file_name("converted-document") == "converted-document.doc"

    def test_empty_uses_fallback(self):
        assert export_file_name("") == "converted-document.doc"

    def test_strips_directories(self):
        assert export_file_name("../../etc/paper.tex") == "paper.doc"

    def test_custom_extension(self):
        assert export_file_name("a.tex", extension=".htm") == "a.htm"

    def test_source_suffix_case_insensitive(self):
        assert export_file_name("Paper.TEX") == "Paper.doc"

    def test_configured_source_extensions(self):
        exts = [".tex", ".ltx"]
        assert export_file_name("paper.ltx", source_extensions=exts) == "paper.doc"
        assert export_file_name("paper.txt", source_extensions=exts) == "paper.txt.doc"


class TestSanitizeFileName:
    def test_removes_unsafe_chars(self):
        result = _sanitize_file_name("my<paper>.tex")
        assert "<" not in result
        assert ">" not in result

    def test_dots_only_becomes_empty(self):
        assert _sanitize_file_name("...") == ""

    def test_windows_separators(self):
        assert _sanitize_file_name("C:\\docs\\thesis.tex") == "thesis.tex"


# ---------------------------------------------------------------------------
# WordExporter
# ---------------------------------------------------------------------------


class TestWordExporter:
    def test_build_document(self):
        document = WordExporter(ExportConfig()).build("<p>é</p>", "paper.tex")
        assert document.file_name == "paper.doc"
        assert document.mime_type == WORD_MIME_TYPE
        assert "<p>é</p>".encode("utf-8") in document.content

    def test_build_uses_source_extensions(self):
        exporter = WordExporter(ExportConfig(), source_extensions=[".ltx"])
        assert exporter.build("<p>x</p>", "Notes.LTX").file_name == "Notes.doc"

    def test_write_creates_file(self, tmp_path):
        exporter = WordExporter(ExportConfig(output_dir=str(tmp_path / "out")))
        dest = exporter.write("<p>x</p>", "paper.tex")

        assert dest == tmp_path / "out" / "paper.doc"
        assert dest.exists()
        assert "<body><p>x</p></body>" in dest.read_text(encoding="utf-8")

    def test_dry_run_writes_nothing(self, tmp_path):
        exporter = WordExporter(ExportConfig(output_dir=str(tmp_path)))
        dest = exporter.write("<p>x</p>", "paper.tex", dry_run=True)

        assert dest == tmp_path / "paper.doc"
        assert not dest.exists()

    @pytest.mark.parametrize("name", ["a.tex", "b", ""])
    def test_write_stays_in_output_dir(self, tmp_path, name):
        exporter = WordExporter(ExportConfig(output_dir=str(tmp_path)))
        dest = exporter.write("<p>x</p>", name)
        assert dest.parent == tmp_path
