"""DOCX document generator for quiz export."""

import io
import zipfile
from datetime import datetime

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from quizforge.models.quiz import Question, QuestionType, Quiz

# Fixed package timestamps keep repeated renders byte-identical
FIXED_PROPERTY_TIME = datetime(2000, 1, 1, 0, 0, 0)
FIXED_ZIP_TIME = (1980, 1, 1, 0, 0, 0)


def render_docx(quiz: Quiz) -> bytes:
    """
    Render a quiz as a DOCX document.

    Layout: centered title, numbered questions with mcq options as indented
    bullets, a page break, then a centered "Answer Key" listing each
    question number with its correct answer.

    Args:
        quiz: Quiz to render

    Returns:
        DOCX package bytes; identical input always yields identical bytes
    """
    doc = Document()

    setup_document_styles(doc)
    set_fixed_properties(doc, quiz)

    title = doc.add_heading(quiz.title, level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    for number, question in enumerate(quiz.questions, 1):
        add_question_to_document(doc, number, question)

    doc.add_page_break()
    add_answer_key(doc, quiz)

    buffer = io.BytesIO()
    doc.save(buffer)
    return normalize_package(buffer.getvalue())


def setup_document_styles(doc: Document) -> None:
    """
    Set up document-wide styles.

    Args:
        doc: Document to configure
    """
    # Set default font
    style = doc.styles["Normal"]
    font = style.font
    font.name = "Calibri"
    font.size = Pt(11)

    # Set margins
    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)


def set_fixed_properties(doc: Document, quiz: Quiz) -> None:
    """Pin core properties that python-docx would otherwise stamp with now()."""
    properties = doc.core_properties
    properties.title = quiz.title
    properties.author = "quizforge"
    properties.last_modified_by = "quizforge"
    properties.revision = 1
    properties.created = FIXED_PROPERTY_TIME
    properties.modified = FIXED_PROPERTY_TIME
    properties.last_printed = FIXED_PROPERTY_TIME


def add_question_to_document(doc: Document, number: int, question: Question) -> None:
    """
    Add one numbered question, and its options for mcq, to the document.

    Args:
        doc: Document to add to
        number: 1-based question number
        question: Question to add
    """
    q_para = doc.add_paragraph()
    q_run = q_para.add_run(f"{number}. ")
    q_run.bold = True
    q_para.add_run(question.question_text)

    if question.question_type == QuestionType.MCQ:
        for option in question.options or []:
            opt_para = doc.add_paragraph(option, style="List Bullet")
            opt_para.paragraph_format.left_indent = Inches(0.5)

    # Spacing between questions
    doc.add_paragraph()


def add_answer_key(doc: Document, quiz: Quiz) -> None:
    """
    Add the answer key section.

    Args:
        doc: Document to add to
        quiz: Quiz whose answers are listed, in question order
    """
    header = doc.add_heading("Answer Key", level=1)
    header.alignment = WD_ALIGN_PARAGRAPH.CENTER

    for number, question in enumerate(quiz.questions, 1):
        answer_para = doc.add_paragraph()
        answer_para.add_run(f"{number}. ").bold = True
        answer_para.add_run(question.correct_answer)


def normalize_package(blob: bytes) -> bytes:
    """
    Rewrite a DOCX zip container with fixed entry timestamps.

    python-docx stamps every zip entry with the current time; entry order
    and contents are kept as written.
    """
    output = io.BytesIO()
    with (
        zipfile.ZipFile(io.BytesIO(blob)) as source,
        zipfile.ZipFile(output, "w", zipfile.ZIP_DEFLATED) as target,
    ):
        for item in source.infolist():
            info = zipfile.ZipInfo(item.filename, date_time=FIXED_ZIP_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            target.writestr(info, source.read(item.filename))
    return output.getvalue()
