"""Data models for quiz generation."""

from .quiz import (
    GeneratedQuiz,
    GenerationRequest,
    Question,
    QuestionDifficulty,
    QuestionType,
    Quiz,
    QuizMetadata,
)

__all__ = [
    "Question",
    "QuestionType",
    "QuestionDifficulty",
    "Quiz",
    "QuizMetadata",
    "GenerationRequest",
    "GeneratedQuiz",
]
