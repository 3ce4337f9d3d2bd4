from latex2doc.export.writer import (
    WORD_MIME_TYPE,
    ExportedDocument,
    WordExporter,
    export_file_name,
    wrap_word_document,
)

__all__ = [
    "ExportedDocument",
    "WORD_MIME_TYPE",
    "WordExporter",
    "export_file_name",
    "wrap_word_document",
]
