"""Response Parser - Turns raw provider text into validated questions."""

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from quizforge.errors import ParseErrorKind, ResponseParseError
from quizforge.models.quiz import Question

logger = logging.getLogger(__name__)

# A fence opens and closes at the start of a line
FENCED_BLOCK = re.compile(r"^[ \t]*```[\w-]*[ \t]*\r?\n([\s\S]*?)\r?\n[ \t]*```", re.MULTILINE)


def strip_fencing(raw_text: str) -> str:
    """
    Reduce provider output to a single JSON candidate.

    If the text contains a fenced code block, only its interior is kept;
    otherwise the text is returned without surrounding whitespace.
    """
    match = FENCED_BLOCK.search(raw_text)
    if match:
        return match.group(1)
    return raw_text.strip()


def decode_payload(raw_text: str) -> list[Any]:
    """
    Decode provider output and return its ``questions`` array.

    Raises:
        ResponseParseError: NOT_EXTRACTABLE_JSON if decoding fails,
            MISSING_QUESTIONS_ARRAY if there is no ``questions`` array
    """
    candidate = strip_fencing(raw_text)
    try:
        payload = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise ResponseParseError(ParseErrorKind.NOT_EXTRACTABLE_JSON, str(exc)) from exc

    if not isinstance(payload, dict):
        raise ResponseParseError(
            ParseErrorKind.MISSING_QUESTIONS_ARRAY, "top-level value is not an object"
        )
    questions = payload.get("questions")
    if not isinstance(questions, list):
        raise ResponseParseError(
            ParseErrorKind.MISSING_QUESTIONS_ARRAY, "'questions' is missing or not an array"
        )
    return questions


def validate_question(item: Any) -> Question | None:
    """Validate one array element, returning None if it breaks an invariant."""
    if not isinstance(item, dict):
        logger.debug("Dropping %s: question is not an object", type(item).__name__)
        return None
    try:
        return Question.model_validate(item)
    except ValidationError as exc:
        logger.debug(
            "Dropping question (%s): %s",
            ParseErrorKind.SCHEMA_VIOLATION.value,
            exc.errors(include_url=False),
        )
        return None


def parse_questions(raw_text: str) -> list[Question]:
    """
    Parse raw provider text into questions.

    Elements that violate the question invariants are dropped one by one;
    the rest of the batch is kept in order.

    Args:
        raw_text: Text returned by a provider

    Returns:
        Valid questions in provider order

    Raises:
        ResponseParseError: If the text has no decodable questions array
    """
    items = decode_payload(raw_text)
    questions = [q for q in (validate_question(item) for item in items) if q is not None]

    dropped = len(items) - len(questions)
    if dropped:
        logger.warning("Dropped %d of %d malformed questions", dropped, len(items))
    return questions
