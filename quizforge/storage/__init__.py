"""Persistence for saved quizzes."""

from .quiz_store import InMemoryQuizStore, JsonQuizStore, QuizStore

__all__ = ["QuizStore", "InMemoryQuizStore", "JsonQuizStore"]
