"""LangGraph workflow and state management."""

from .state import GenerationState, create_initial_state
from .workflow import compile_workflow, create_generation_workflow, generate_quiz

__all__ = [
    "GenerationState",
    "create_initial_state",
    "compile_workflow",
    "create_generation_workflow",
    "generate_quiz",
]
