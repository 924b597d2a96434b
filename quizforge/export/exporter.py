"""Export entry point - Renders a stored quiz in a chosen format."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from quizforge.export.docx_generator import render_docx
from quizforge.export.pdf_generator import render_pdf
from quizforge.models.quiz import Quiz
from quizforge.service import get_quiz
from quizforge.storage.quiz_store import QuizStore


class ExportFormat(str, Enum):
    """Supported export formats."""

    PDF = "pdf"
    DOCX = "docx"


@dataclass(frozen=True)
class ExportedDocument:
    """A rendered quiz ready to be sent or written to disk."""

    filename: str
    content_type: str
    content: bytes


@dataclass(frozen=True)
class Renderer:
    render: Callable[[Quiz], bytes]
    content_type: str
    extension: str


RENDERERS = {
    ExportFormat.PDF: Renderer(render_pdf, "application/pdf", "pdf"),
    ExportFormat.DOCX: Renderer(
        render_docx,
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "docx",
    ),
}


def render_quiz(quiz: Quiz, fmt: ExportFormat) -> ExportedDocument:
    """
    Render a quiz already in memory.

    Args:
        quiz: Quiz to render
        fmt: Target format

    Returns:
        Document named after the quiz title
    """
    renderer = RENDERERS[ExportFormat(fmt)]
    return ExportedDocument(
        filename=f"{quiz.title}.{renderer.extension}",
        content_type=renderer.content_type,
        content=renderer.render(quiz),
    )


def export_quiz(
    store: QuizStore,
    quiz_id: str,
    fmt: ExportFormat,
    owner: str | None = None,
) -> ExportedDocument:
    """
    Render a stored quiz.

    Raises:
        QuizNotFoundError: If there is no matching quiz
    """
    return render_quiz(get_quiz(store, quiz_id, owner), fmt)


def write_document(document: ExportedDocument, output_dir: str | Path) -> Path:
    """
    Write an exported document into a directory.

    Path separators in the title are replaced so the file always lands
    directly inside output_dir.

    Returns:
        Path of the written file
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    safe_name = document.filename.replace("/", "_").replace("\\", "_")
    target = output_path / safe_name
    target.write_bytes(document.content)
    return target
