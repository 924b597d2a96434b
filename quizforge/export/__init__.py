"""Export functionality for quiz documents."""

from .docx_generator import render_docx
from .exporter import (
    ExportedDocument,
    ExportFormat,
    export_quiz,
    render_quiz,
    write_document,
)
from .pdf_generator import render_pdf

__all__ = [
    "render_docx",
    "render_pdf",
    "render_quiz",
    "export_quiz",
    "write_document",
    "ExportFormat",
    "ExportedDocument",
]
