"""PDF document generator for quiz export."""

from functools import lru_cache

import fitz  # PyMuPDF

from quizforge.models.quiz import QuestionType, Quiz

PAGE_WIDTH, PAGE_HEIGHT = fitz.paper_size("a4")
MARGIN = 72
TEXT_WIDTH = PAGE_WIDTH - 2 * MARGIN

# Noto Sans ships with pymupdf-fonts; "cjk" is MuPDF's built-in fallback font
BODY_FONT = "notos"
BOLD_FONT = "notosbo"
FALLBACK_FONT = "cjk"
TITLE_SIZE = 20
BODY_SIZE = 12
LINE_SPACING = 1.4
OPTION_INDENT = 24

# PDF date strings; a fixed value keeps repeated renders byte-identical
FIXED_PDF_DATE = "D:20000101000000Z"

FontChain = tuple[fitz.Font, ...]


@lru_cache
def load_fonts(bold: bool = False) -> FontChain:
    """Fonts tried in order for each character."""
    return (fitz.Font(BOLD_FONT if bold else BODY_FONT), fitz.Font(FALLBACK_FONT))


def split_runs(text: str, fonts: FontChain) -> list[tuple[fitz.Font, str]]:
    """
    Split text into runs that can each be drawn with a single font.

    Every character goes to the first font that has a glyph for it; characters
    no font covers stay with the first font.
    """
    runs: list[tuple[fitz.Font, str]] = []
    for char in text:
        font = next((f for f in fonts if f.has_glyph(ord(char))), fonts[0])
        if runs and runs[-1][0] is font:
            runs[-1] = (font, runs[-1][1] + char)
        else:
            runs.append((font, char))
    return runs


def text_width(text: str, fonts: FontChain, fontsize: float) -> float:
    return sum(
        font.text_length(run, fontsize=fontsize) for font, run in split_runs(text, fonts)
    )


def wrap_text(text: str, fonts: FontChain, fontsize: float, max_width: float) -> list[str]:
    """
    Break text into lines no wider than max_width.

    Existing line breaks are kept; words wider than a whole line are split
    by character.
    """
    lines: list[str] = []
    for paragraph in text.splitlines() or [""]:
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if text_width(candidate, fonts, fontsize) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            current = ""
            for char in word:
                if text_width(current + char, fonts, fontsize) > max_width and current:
                    lines.append(current)
                    current = ""
                current += char
        lines.append(current)
    return lines


class PdfLayout:
    """Top-to-bottom text cursor that starts a new page when one fills up."""

    def __init__(self, doc: fitz.Document):
        self.doc = doc
        self.page: fitz.Page | None = None
        self.writer: fitz.TextWriter | None = None
        self.y = 0.0
        self.new_page()

    def flush(self) -> None:
        """Draw the text collected for the current page."""
        if self.writer is not None:
            self.writer.write_text(self.page)
            self.writer = None

    def new_page(self) -> None:
        self.flush()
        self.page = self.doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        self.writer = fitz.TextWriter(self.page.rect)
        self.y = MARGIN

    def write(
        self,
        text: str,
        fontsize: float = BODY_SIZE,
        bold: bool = False,
        indent: float = 0,
        centered: bool = False,
    ) -> None:
        """Write wrapped text at the cursor and advance past it."""
        fonts = load_fonts(bold)
        line_height = fontsize * LINE_SPACING
        for line in wrap_text(text, fonts, fontsize, TEXT_WIDTH - indent):
            if self.y + line_height > PAGE_HEIGHT - MARGIN:
                self.new_page()
            x = MARGIN + indent
            if centered:
                x = (PAGE_WIDTH - text_width(line, fonts, fontsize)) / 2
            baseline = self.y + fontsize
            for font, run in split_runs(line, fonts):
                self.writer.append((x, baseline), run, font=font, fontsize=fontsize)
                x += font.text_length(run, fontsize=fontsize)
            self.y += line_height

    def skip(self, fontsize: float = BODY_SIZE) -> None:
        """Leave one blank line."""
        self.y += fontsize * LINE_SPACING


def render_pdf(quiz: Quiz) -> bytes:
    """
    Render a quiz as a printable PDF.

    Layout: centered title, numbered questions with mcq options as indented
    bullets, then a new page with a centered "Answer Key" listing each
    question number with its correct answer. Fonts are embedded, so text in
    any script the font chain covers survives the export.

    Args:
        quiz: Quiz to render

    Returns:
        PDF bytes; identical input always yields identical bytes
    """
    doc = fitz.open()
    layout = PdfLayout(doc)

    layout.write(quiz.title, fontsize=TITLE_SIZE, bold=True, centered=True)
    layout.skip(TITLE_SIZE)

    for number, question in enumerate(quiz.questions, 1):
        layout.write(f"{number}. {question.question_text}")
        if question.question_type == QuestionType.MCQ:
            for option in question.options or []:
                layout.write(f"- {option}", indent=OPTION_INDENT)
        layout.skip()

    layout.new_page()
    layout.write("Answer Key", fontsize=TITLE_SIZE, bold=True, centered=True)
    layout.skip(TITLE_SIZE)

    for number, question in enumerate(quiz.questions, 1):
        layout.write(f"{number}. {question.correct_answer}")
    layout.flush()

    doc.set_metadata(
        {
            "title": quiz.title,
            "author": "quizforge",
            "creator": "quizforge",
            "producer": "quizforge",
            "creationDate": FIXED_PDF_DATE,
            "modDate": FIXED_PDF_DATE,
        }
    )
    try:
        return doc.tobytes(garbage=3, deflate=True, no_new_id=True)
    finally:
        doc.close()
