"""Shared test fixtures and configuration for pytest."""

import json
from datetime import datetime
from typing import Any, Callable

import pytest

from quizforge.errors import ProviderError, ProviderErrorKind
from quizforge.models.quiz import (
    Question,
    QuestionDifficulty,
    QuestionType,
    Quiz,
    QuizMetadata,
)


class StubProvider:
    """Provider double that returns canned text or raises a ProviderError."""

    def __init__(
        self,
        name: str,
        response: str | None = None,
        error: ProviderErrorKind | None = None,
    ):
        self.name = name
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise ProviderError(self.error, self.name, "stubbed failure")
        return self.response or ""


@pytest.fixture
def make_provider() -> Callable[..., StubProvider]:
    """Factory for stub providers."""
    return StubProvider


@pytest.fixture
def mcq_item() -> dict[str, Any]:
    """A well-formed mcq question as a provider would send it."""
    return {
        "question_type": "mcq",
        "question_text": "Which pigment absorbs light during photosynthesis?",
        "options": ["Chlorophyll", "Keratin", "Melanin", "Hemoglobin"],
        "correct_answer": "Chlorophyll",
        "difficulty": "easy",
        "explanation": "Chlorophyll absorbs red and blue light.",
    }


@pytest.fixture
def tf_item() -> dict[str, Any]:
    """A well-formed true/false question."""
    return {
        "question_type": "tf",
        "question_text": "Photosynthesis releases oxygen.",
        "correct_answer": "True",
        "difficulty": "easy",
        "explanation": "Oxygen is released when water is split.",
    }


@pytest.fixture
def fill_item() -> dict[str, Any]:
    """A well-formed fill-in-the-blank question."""
    return {
        "question_type": "fill",
        "question_text": "Photosynthesis takes place in the ____.",
        "correct_answer": "chloroplast",
        "difficulty": "medium",
        "explanation": "Chloroplasts contain the photosynthetic machinery.",
    }


@pytest.fixture
def photosynthesis_items() -> list[dict[str, Any]]:
    """Five mixed questions: 2 fill, 2 mcq, 1 tf, interleaved."""
    return [
        {
            "question_type": "fill",
            "question_text": "The gas absorbed by plants is ____.",
            "correct_answer": "carbon dioxide",
            "difficulty": "easy",
            "explanation": "CO2 is fixed in the Calvin cycle.",
        },
        {
            "question_type": "mcq",
            "question_text": "Where do the light reactions occur?",
            "options": ["Thylakoid membrane", "Stroma", "Nucleus", "Cell wall"],
            "correct_answer": "Thylakoid membrane",
            "difficulty": "medium",
            "explanation": "Photosystems sit in the thylakoid membrane.",
        },
        {
            "question_type": "tf",
            "question_text": "Glucose is a product of photosynthesis.",
            "correct_answer": "true",
            "difficulty": "easy",
            "explanation": "Glucose is built from fixed carbon.",
        },
        {
            "question_type": "fill",
            "question_text": "The green pigment in leaves is ____.",
            "correct_answer": "chlorophyll",
            "difficulty": "easy",
            "explanation": "Chlorophyll reflects green light.",
        },
        {
            "question_type": "mcq",
            "question_text": "Which molecule carries energy from the light reactions?",
            "options": ["ATP", "DNA", "Cellulose", "Starch"],
            "correct_answer": "ATP",
            "difficulty": "hard",
            "explanation": "ATP and NADPH power the Calvin cycle.",
        },
    ]


@pytest.fixture
def photosynthesis_response(photosynthesis_items: list[dict[str, Any]]) -> str:
    """Raw provider text for the photosynthesis batch."""
    return json.dumps({"questions": photosynthesis_items})


@pytest.fixture
def sample_questions(
    mcq_item: dict[str, Any], tf_item: dict[str, Any], fill_item: dict[str, Any]
) -> list[Question]:
    """One question of each type, validated."""
    return [Question.model_validate(item) for item in (mcq_item, tf_item, fill_item)]


@pytest.fixture
def sample_question(mcq_item: dict[str, Any]) -> Question:
    """Create a sample mcq Question for testing."""
    return Question.model_validate(mcq_item)


@pytest.fixture
def sample_quiz(sample_questions: list[Question]) -> Quiz:
    """Create a sample Quiz for testing."""
    metadata = QuizMetadata(
        created_at=datetime(2024, 1, 1, 12, 0, 0),
        updated_at=datetime(2024, 1, 1, 12, 0, 0),
        provider_used="bedrock",
    )

    return Quiz(
        id="quiz-1",
        title="Photosynthesis",
        topic="Photosynthesis",
        questions=sample_questions,
        owner="alice",
        metadata=metadata,
    )


@pytest.fixture
def long_quiz() -> Quiz:
    """A quiz long enough to need more than one page of questions."""
    questions = [
        Question(
            question_type=QuestionType.MCQ,
            question_text=f"Question number {i} about the light-dependent reactions?",
            options=[f"Option {i}A", f"Option {i}B", f"Option {i}C", f"Option {i}D"],
            correct_answer=f"Option {i}C",
            difficulty=QuestionDifficulty.MEDIUM,
        )
        for i in range(1, 41)
    ]
    return Quiz(title="Long Quiz", questions=questions, owner="alice")
