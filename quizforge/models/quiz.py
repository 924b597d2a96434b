"""Pydantic models for quiz data structures."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

TRUE_FALSE_ANSWERS = {"true", "false"}
MCQ_OPTION_COUNT = 4
MAX_REQUESTED_COUNT = 100


class QuestionType(str, Enum):
    """Supported question types."""

    MCQ = "mcq"
    TRUE_FALSE = "tf"
    FILL = "fill"


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Question(BaseModel):
    """A single quiz question as produced by a provider or edited by a user."""

    question_type: QuestionType = Field(..., description="mcq, tf or fill")
    question_text: str = Field(..., min_length=1, description="The question text")
    options: list[str] | None = Field(
        None,
        description="Exactly four answer options, only for mcq questions",
    )
    correct_answer: str = Field(
        ...,
        min_length=1,
        description="The correct answer; one of the options for mcq",
    )
    difficulty: QuestionDifficulty = Field(..., description="Question difficulty level")
    explanation: str = Field(
        default="",
        description="Brief explanation of the correct answer",
    )

    @field_validator("question_type", "difficulty", mode="before")
    @classmethod
    def normalize_enum_value(cls, v: Any) -> Any:
        """Accept enum values regardless of case and surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("correct_answer", mode="before")
    @classmethod
    def coerce_boolean_answer(cls, v: Any) -> Any:
        """Keep true/false answers in the string domain."""
        if isinstance(v, bool):
            return "true" if v else "false"
        return v

    @field_validator("options", mode="before")
    @classmethod
    def empty_options_are_absent(cls, v: Any) -> Any:
        """Treat an empty options list the same as a missing one."""
        if v is None or (isinstance(v, list) and len(v) == 0):
            return None
        return v

    @field_validator("explanation", mode="before")
    @classmethod
    def missing_explanation_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @model_validator(mode="after")
    def check_type_invariants(self) -> "Question":
        """Enforce the per-type shape of options and correct_answer."""
        if self.question_type == QuestionType.MCQ:
            if self.options is None or len(self.options) != MCQ_OPTION_COUNT:
                raise ValueError("mcq questions must have exactly 4 options")
            for index, option in enumerate(self.options):
                if not option:
                    raise ValueError(f"Option {index + 1} cannot be empty")
            if self.correct_answer not in self.options:
                raise ValueError("mcq correct_answer must match one of the options")
        else:
            if self.options is not None:
                raise ValueError(
                    f"{self.question_type.value} questions cannot have options"
                )
            if (
                self.question_type == QuestionType.TRUE_FALSE
                and self.correct_answer.lower() not in TRUE_FALSE_ANSWERS
            ):
                raise ValueError("tf correct_answer must be 'true' or 'false'")
        return self

    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "example": {
                "question_type": "mcq",
                "question_text": "Which pigment absorbs light during photosynthesis?",
                "options": ["Chlorophyll", "Keratin", "Melanin", "Hemoglobin"],
                "correct_answer": "Chlorophyll",
                "difficulty": "easy",
                "explanation": "Chlorophyll absorbs red and blue light.",
            }
        },
    }


class QuizMetadata(BaseModel):
    """Bookkeeping about a stored quiz."""

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    provider_used: str | None = Field(
        None,
        description="Name of the provider that generated the questions",
    )


class Quiz(BaseModel):
    """A quiz owned by a user, as held by the persistence layer."""

    id: str | None = Field(None, description="Identifier assigned by the store")
    title: str = Field(..., min_length=1, description="Quiz title")
    topic: str | None = Field(None, description="Topic the quiz was generated from")
    questions: list[Question] = Field(
        default_factory=list,
        description="Questions in display order",
    )
    owner: str = Field(..., min_length=1, description="Owning user reference")
    metadata: QuizMetadata = Field(default_factory=QuizMetadata)

    @property
    def total_questions(self) -> int:
        """Get the number of questions in the quiz."""
        return len(self.questions)

    def get_questions_by_type(self, question_type: QuestionType) -> list[Question]:
        """Get all questions of a specific type, in order."""
        return [q for q in self.questions if q.question_type == question_type]

    def get_questions_by_difficulty(
        self, difficulty: QuestionDifficulty
    ) -> list[Question]:
        """Get all questions of a specific difficulty level, in order."""
        return [q for q in self.questions if q.difficulty == difficulty]

    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "example": {
                "title": "Photosynthesis",
                "topic": "Photosynthesis",
                "owner": "local",
                "questions": [],
            }
        },
    }


class GenerationRequest(BaseModel):
    """Input for a single quiz generation run."""

    source_content: str = Field(
        ...,
        min_length=1,
        description="Topic phrase, pasted text or extracted document text",
    )
    requested_count: int = Field(
        ...,
        ge=1,
        le=MAX_REQUESTED_COUNT,
        description="Number of questions to return at most",
    )
    allowed_types: set[QuestionType] = Field(
        default_factory=lambda: set(QuestionType),
        min_length=1,
        description="Question types the caller wants to keep",
    )
    title: str | None = Field(None, description="Custom quiz title")
    topic: str | None = Field(None, description="Topic the source came from")

    @property
    def quiz_title(self) -> str:
        """Title for the generated quiz: custom title, then topic, then a default."""
        return self.title or self.topic or "Generated Quiz"

    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "example": {
                "source_content": "Photosynthesis",
                "requested_count": 10,
                "allowed_types": ["mcq", "tf"],
                "topic": "Photosynthesis",
            }
        },
    }


class GeneratedQuiz(BaseModel):
    """Result of the generation entry point, before the user saves it."""

    title: str = Field(..., min_length=1)
    topic: str | None = None
    questions: list[Question] = Field(default_factory=list)
    requested_count: int = Field(..., ge=1, le=MAX_REQUESTED_COUNT)
    provider_used: str | None = None

    @property
    def shortfall(self) -> int:
        """How many fewer questions were delivered than requested."""
        return max(self.requested_count - len(self.questions), 0)
