"""Post-Filter - Restricts questions to the requested types and count."""

from collections.abc import Collection, Sequence

from quizforge.models.quiz import Question, QuestionType


def filter_questions(
    questions: Sequence[Question],
    allowed_types: Collection[QuestionType],
    requested_count: int,
) -> list[Question]:
    """
    Keep questions of the allowed types, in order, up to the requested count.

    An empty result is valid: the provider may have ignored the type
    constraint, and the caller decides what to do with a short quiz.
    """
    allowed = {QuestionType(t) for t in allowed_types}
    kept = [q for q in questions if q.question_type in allowed]
    return kept[: max(requested_count, 0)]
