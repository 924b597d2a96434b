"""Generation pipeline stages."""

from .orchestrator import FallbackOrchestrator
from .parser import parse_questions, strip_fencing
from .post_filter import filter_questions
from .prompt import build_prompt

__all__ = [
    "build_prompt",
    "FallbackOrchestrator",
    "parse_questions",
    "strip_fencing",
    "filter_questions",
]
