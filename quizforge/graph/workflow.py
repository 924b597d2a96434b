"""LangGraph workflow definition for quiz generation."""

import logging
from typing import Any, Literal

from langgraph.graph import END, StateGraph

from quizforge.graph.state import GenerationState, create_initial_state
from quizforge.models.quiz import GeneratedQuiz, GenerationRequest
from quizforge.pipeline.orchestrator import FallbackOrchestrator
from quizforge.pipeline.parser import parse_questions
from quizforge.pipeline.post_filter import filter_questions
from quizforge.providers.factory import build_orchestrator

logger = logging.getLogger(__name__)


def request_questions(
    state: GenerationState, orchestrator: FallbackOrchestrator
) -> dict[str, Any]:
    """Ask the provider chain for raw quiz text."""
    request = state["request"]
    outcome = orchestrator.run(request.source_content, request.requested_count)
    return {"raw_text": outcome.raw_text, "provider_used": outcome.provider}


def parse_response(state: GenerationState) -> dict[str, Any]:
    """Turn the raw text into validated questions."""
    return {"parsed_questions": parse_questions(state["raw_text"] or "")}


def apply_filters(state: GenerationState) -> dict[str, Any]:
    """Keep the requested question types, up to the requested count."""
    request = state["request"]
    final_questions = filter_questions(
        state["parsed_questions"], request.allowed_types, request.requested_count
    )
    return {"final_questions": final_questions}


def assemble_quiz(state: GenerationState) -> dict[str, Any]:
    """Package the final questions as the generation result."""
    request = state["request"]
    quiz = GeneratedQuiz(
        title=request.quiz_title,
        topic=request.topic,
        questions=state["final_questions"],
        requested_count=request.requested_count,
        provider_used=state["provider_used"],
    )
    if quiz.shortfall:
        logger.warning(
            "Provider delivered %d of %d requested questions",
            len(quiz.questions),
            request.requested_count,
        )
    return {"generated_quiz": quiz}


def route_after_parse(state: GenerationState) -> Literal["filter", "assemble"]:
    """
    Skip filtering when nothing survived parsing.

    Args:
        state: Current generation state

    Returns:
        Next node to execute
    """
    if not state["parsed_questions"]:
        return "assemble"
    return "filter"


def create_generation_workflow(orchestrator: FallbackOrchestrator) -> StateGraph:
    """
    Create the LangGraph workflow for quiz generation.

    The workflow is strictly sequential:
    1. Generate - Prompt the provider chain (primary, then fallback)
    2. Parse - Extract and validate questions
    3. [Conditional] Filter - Restrict to requested types and count
    4. Assemble - Build the GeneratedQuiz

    Args:
        orchestrator: Provider chain used by the generate node

    Returns:
        StateGraph ready to compile
    """
    workflow = StateGraph(GenerationState)

    def generate_node(state: GenerationState) -> dict[str, Any]:
        return request_questions(state, orchestrator)

    workflow.add_node("generate", generate_node)
    workflow.add_node("parse", parse_response)
    workflow.add_node("filter", apply_filters)
    workflow.add_node("assemble", assemble_quiz)

    workflow.set_entry_point("generate")
    workflow.add_edge("generate", "parse")
    workflow.add_conditional_edges(
        "parse",
        route_after_parse,
        {
            "filter": "filter",
            "assemble": "assemble",
        },
    )
    workflow.add_edge("filter", "assemble")
    workflow.add_edge("assemble", END)

    return workflow


def compile_workflow(orchestrator: FallbackOrchestrator):
    """Compile the generation workflow for the given provider chain."""
    return create_generation_workflow(orchestrator).compile()


def generate_quiz(
    request: GenerationRequest, orchestrator: FallbackOrchestrator | None = None
) -> GeneratedQuiz:
    """
    Generate a quiz for a request.

    Args:
        request: What to generate
        orchestrator: Provider chain; built from settings when omitted

    Returns:
        The generated quiz, possibly with fewer questions than requested

    Raises:
        GenerationFailure: If every provider failed
        ResponseParseError: If the provider answer held no usable questions array
    """
    if orchestrator is None:
        orchestrator = build_orchestrator()

    final_state = compile_workflow(orchestrator).invoke(create_initial_state(request))
    return final_state["generated_quiz"]
