"""Generate quizzes from source material and export them as PDF or DOCX."""

__version__ = "0.1.0"
