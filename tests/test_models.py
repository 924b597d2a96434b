"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from quizforge.models.quiz import (
    GeneratedQuiz,
    GenerationRequest,
    Question,
    QuestionDifficulty,
    QuestionType,
    Quiz,
)


class TestQuestion:
    """Test Question model."""

    def test_create_valid_mcq(self, sample_question: Question):
        """Test creating a valid mcq question."""
        assert sample_question.question_type == QuestionType.MCQ
        assert sample_question.options == ["Chlorophyll", "Keratin", "Melanin", "Hemoglobin"]
        assert sample_question.correct_answer == "Chlorophyll"
        assert sample_question.difficulty == QuestionDifficulty.EASY

    def test_mcq_requires_four_options(self, mcq_item):
        """Test that mcq questions need exactly four options."""
        mcq_item["options"] = mcq_item["options"][:3]
        with pytest.raises(ValidationError):
            Question.model_validate(mcq_item)

        mcq_item["options"] = ["a", "b", "c", "d", "Chlorophyll"]
        with pytest.raises(ValidationError):
            Question.model_validate(mcq_item)

    def test_mcq_requires_options(self, mcq_item):
        """Test that mcq questions without options are rejected."""
        del mcq_item["options"]
        with pytest.raises(ValidationError):
            Question.model_validate(mcq_item)

    def test_mcq_answer_must_be_an_option(self, mcq_item):
        """Test that the mcq answer must match one of the options."""
        mcq_item["correct_answer"] = "Carotene"
        with pytest.raises(ValidationError):
            Question.model_validate(mcq_item)

    def test_mcq_options_cannot_be_blank(self, mcq_item):
        """Test that blank options are rejected."""
        mcq_item["options"] = ["Chlorophyll", "  ", "Melanin", "Hemoglobin"]
        with pytest.raises(ValidationError):
            Question.model_validate(mcq_item)

    def test_tf_answer_is_case_insensitive(self, tf_item):
        """Test that tf answers match true/false in any case."""
        for answer in ("true", "False", "TRUE"):
            tf_item["correct_answer"] = answer
            assert Question.model_validate(tf_item).correct_answer == answer

    def test_tf_answer_must_be_true_or_false(self, tf_item):
        """Test that other tf answers are rejected."""
        tf_item["correct_answer"] = "yes"
        with pytest.raises(ValidationError):
            Question.model_validate(tf_item)

    def test_tf_boolean_answer_stays_a_string(self, tf_item):
        """Test that a JSON boolean answer becomes a string."""
        tf_item["correct_answer"] = False
        question = Question.model_validate(tf_item)
        assert question.correct_answer == "false"

    def test_fill_cannot_have_options(self, fill_item):
        """Test that fill questions with options are rejected."""
        fill_item["options"] = ["a", "b", "c", "d"]
        with pytest.raises(ValidationError):
            Question.model_validate(fill_item)

    def test_empty_options_count_as_absent(self, fill_item, tf_item):
        """Test that an empty or null options list is allowed on non-mcq."""
        fill_item["options"] = []
        tf_item["options"] = None
        assert Question.model_validate(fill_item).options is None
        assert Question.model_validate(tf_item).options is None

    def test_text_and_answer_cannot_be_blank(self, fill_item):
        """Test that blank text or answer is rejected."""
        with pytest.raises(ValidationError):
            Question.model_validate({**fill_item, "question_text": "   "})
        with pytest.raises(ValidationError):
            Question.model_validate({**fill_item, "correct_answer": ""})

    def test_enum_values_are_normalized(self, fill_item):
        """Test that type and difficulty accept other casings."""
        question = Question.model_validate(
            {**fill_item, "question_type": " FILL ", "difficulty": "Hard"}
        )
        assert question.question_type == QuestionType.FILL
        assert question.difficulty == QuestionDifficulty.HARD

    def test_unknown_type_or_difficulty_rejected(self, fill_item):
        """Test that values outside the enums are rejected."""
        with pytest.raises(ValidationError):
            Question.model_validate({**fill_item, "question_type": "essay"})
        with pytest.raises(ValidationError):
            Question.model_validate({**fill_item, "difficulty": "extreme"})

    def test_explanation_defaults_to_empty(self, fill_item):
        """Test that a missing or null explanation becomes empty."""
        del fill_item["explanation"]
        assert Question.model_validate(fill_item).explanation == ""
        fill_item["explanation"] = None
        assert Question.model_validate(fill_item).explanation == ""


class TestQuiz:
    """Test Quiz model."""

    def test_create_valid_quiz(self, sample_quiz: Quiz):
        """Test creating a valid quiz."""
        assert sample_quiz.title == "Photosynthesis"
        assert sample_quiz.owner == "alice"
        assert sample_quiz.total_questions == 3

    def test_quiz_requires_title_and_owner(self):
        """Test that title and owner cannot be blank."""
        with pytest.raises(ValidationError):
            Quiz(title="", owner="alice")
        with pytest.raises(ValidationError):
            Quiz(title="Quiz", owner="")

    def test_get_questions_by_type(self, sample_quiz: Quiz):
        """Test filtering questions by type."""
        tf_questions = sample_quiz.get_questions_by_type(QuestionType.TRUE_FALSE)
        assert len(tf_questions) == 1
        assert tf_questions[0].question_text == "Photosynthesis releases oxygen."

    def test_get_questions_by_difficulty(self, sample_quiz: Quiz):
        """Test filtering questions by difficulty."""
        easy = sample_quiz.get_questions_by_difficulty(QuestionDifficulty.EASY)
        assert [q.question_type for q in easy] == [QuestionType.MCQ, QuestionType.TRUE_FALSE]

    def test_quiz_json_round_trip_keeps_order(self, sample_quiz: Quiz):
        """Test that serialization preserves question and option order."""
        restored = Quiz.model_validate_json(sample_quiz.model_dump_json())
        assert restored == sample_quiz


class TestGenerationRequest:
    """Test GenerationRequest model."""

    def test_defaults_allow_all_types(self):
        """Test that all question types are allowed by default."""
        request = GenerationRequest(source_content="Photosynthesis", requested_count=5)
        assert request.allowed_types == {QuestionType.MCQ, QuestionType.TRUE_FALSE, QuestionType.FILL}

    def test_requested_count_bounds(self):
        """Test that requested_count must be within 1..100."""
        GenerationRequest(source_content="x", requested_count=1)
        GenerationRequest(source_content="x", requested_count=100)
        with pytest.raises(ValidationError):
            GenerationRequest(source_content="x", requested_count=0)
        with pytest.raises(ValidationError):
            GenerationRequest(source_content="x", requested_count=101)

    def test_requires_content_and_types(self):
        """Test that blank content and an empty type set are rejected."""
        with pytest.raises(ValidationError):
            GenerationRequest(source_content="  ", requested_count=5)
        with pytest.raises(ValidationError):
            GenerationRequest(source_content="x", requested_count=5, allowed_types=set())

    def test_allowed_types_from_strings(self):
        """Test that allowed types accept plain strings."""
        request = GenerationRequest(
            source_content="x", requested_count=5, allowed_types=["mcq", "tf"]
        )
        assert request.allowed_types == {QuestionType.MCQ, QuestionType.TRUE_FALSE}

    def test_quiz_title_precedence(self):
        """Test that title beats topic, which beats the default."""
        base = {"source_content": "x", "requested_count": 1}
        assert GenerationRequest(**base).quiz_title == "Generated Quiz"
        assert GenerationRequest(**base, topic="Cells").quiz_title == "Cells"
        assert GenerationRequest(**base, topic="Cells", title="Biology").quiz_title == "Biology"


class TestGeneratedQuiz:
    """Test GeneratedQuiz model."""

    def test_shortfall(self, sample_questions):
        """Test the shortfall property."""
        generated = GeneratedQuiz(title="Q", questions=sample_questions, requested_count=5)
        assert generated.shortfall == 2

        generated = GeneratedQuiz(title="Q", questions=sample_questions, requested_count=3)
        assert generated.shortfall == 0
