"""Tests for the Post-Filter."""

import pytest

from quizforge.models.quiz import QuestionType
from quizforge.pipeline.parser import parse_questions
from quizforge.pipeline.post_filter import filter_questions

ALL_TYPES = {QuestionType.MCQ, QuestionType.TRUE_FALSE, QuestionType.FILL}


@pytest.fixture
def parsed(photosynthesis_response):
    """The five photosynthesis questions as models."""
    return parse_questions(photosynthesis_response)


class TestFilterQuestions:
    """Test type filtering and truncation."""

    def test_keeps_allowed_types_in_order(self, parsed):
        """Test that only allowed types remain, in original order."""
        result = filter_questions(parsed, {QuestionType.MCQ, QuestionType.TRUE_FALSE}, 10)

        assert [q.question_type for q in result] == [
            QuestionType.MCQ,
            QuestionType.TRUE_FALSE,
            QuestionType.MCQ,
        ]

    def test_truncates_to_requested_count(self, parsed):
        """Test that the first requested_count questions are kept."""
        result = filter_questions(parsed, ALL_TYPES, 2)
        assert result == parsed[:2]

    @pytest.mark.parametrize("requested_count", [1, 2, 3, 5, 50, 100])
    def test_length_never_exceeds_requested(self, parsed, requested_count):
        """Test that output length is at most requested_count."""
        assert len(filter_questions(parsed, ALL_TYPES, requested_count)) <= requested_count

    @pytest.mark.parametrize(
        "allowed",
        [
            {QuestionType.MCQ},
            {QuestionType.TRUE_FALSE},
            {QuestionType.FILL},
            {QuestionType.MCQ, QuestionType.FILL},
            ALL_TYPES,
        ],
    )
    def test_every_result_has_an_allowed_type(self, parsed, allowed):
        """Test that every kept question has an allowed type."""
        result = filter_questions(parsed, allowed, 100)
        assert all(q.question_type in allowed for q in result)

    def test_no_matching_types_gives_empty_list(self, sample_question):
        """Test that an empty result is returned, not an error."""
        assert filter_questions([sample_question], {QuestionType.FILL}, 5) == []

    def test_accepts_plain_string_types(self, parsed):
        """Test that allowed types may be given as strings."""
        result = filter_questions(parsed, ["fill"], 10)
        assert len(result) == 2

    def test_does_not_mutate_input(self, parsed):
        """Test that the input list is left alone."""
        before = list(parsed)
        filter_questions(parsed, {QuestionType.TRUE_FALSE}, 1)
        assert parsed == before
