"""State carried through one generation run."""

from typing import TypedDict

from quizforge.models.quiz import GeneratedQuiz, GenerationRequest, Question


class GenerationState(TypedDict):
    """Everything a single generation run produces, owned by that run alone."""

    request: GenerationRequest
    raw_text: str | None
    provider_used: str | None
    parsed_questions: list[Question]
    final_questions: list[Question]
    generated_quiz: GeneratedQuiz | None


def create_initial_state(request: GenerationRequest) -> GenerationState:
    """
    Create the starting state for a generation run.

    Args:
        request: Validated generation request

    Returns:
        Fresh state with nothing generated yet
    """
    return GenerationState(
        request=request,
        raw_text=None,
        provider_used=None,
        parsed_questions=[],
        final_questions=[],
        generated_quiz=None,
    )
