"""Quiz service - Save, list, fetch, edit and delete quizzes in a store."""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from quizforge.errors import QuizNotFoundError
from quizforge.models.quiz import GeneratedQuiz, Question, Quiz, QuizMetadata
from quizforge.storage.quiz_store import QuizStore

logger = logging.getLogger(__name__)


def save_quiz(
    store: QuizStore,
    *,
    title: str,
    questions: Sequence[Question | dict[str, Any]],
    owner: str,
    topic: str | None = None,
    provider_used: str | None = None,
) -> Quiz:
    """
    Validate and persist a reviewed quiz.

    Args:
        store: Persistence collaborator
        title: Quiz title
        questions: Reviewed questions, as models or plain dicts
        owner: Owning user reference
        topic: Topic the quiz came from
        provider_used: Provider that generated the questions

    Returns:
        The stored quiz, including its new id

    Raises:
        pydantic.ValidationError: If the title or any question is invalid
    """
    quiz = Quiz(
        title=title,
        topic=topic,
        questions=list(questions),
        owner=owner,
        metadata=QuizMetadata(provider_used=provider_used),
    )
    quiz_id = store.save(quiz)
    logger.info("Saved quiz %s (%d questions)", quiz_id, quiz.total_questions)
    return quiz.model_copy(update={"id": quiz_id})


def save_generated_quiz(store: QuizStore, generated: GeneratedQuiz, owner: str) -> Quiz:
    """Persist a generation result as-is."""
    return save_quiz(
        store,
        title=generated.title,
        questions=generated.questions,
        owner=owner,
        topic=generated.topic,
        provider_used=generated.provider_used,
    )


def list_quizzes(store: QuizStore, owner: str) -> list[Quiz]:
    """List an owner's quizzes, newest first."""
    return store.list_for_owner(owner)


def get_quiz(store: QuizStore, quiz_id: str, owner: str | None = None) -> Quiz:
    """
    Fetch one quiz.

    Args:
        store: Persistence collaborator
        quiz_id: Stored quiz id
        owner: When given, quizzes of other owners are treated as missing

    Raises:
        QuizNotFoundError: If there is no matching quiz
    """
    quiz = store.get(quiz_id)
    if quiz is None or (owner is not None and quiz.owner != owner):
        raise QuizNotFoundError(quiz_id)
    return quiz


def update_quiz(
    store: QuizStore,
    quiz_id: str,
    *,
    title: str | None = None,
    questions: Sequence[Question | dict[str, Any]] | None = None,
    owner: str | None = None,
) -> Quiz:
    """
    Replace a quiz's title and/or question list.

    A blank title or a missing question list keeps the current value.
    Replacement questions are validated like generated ones.

    Raises:
        QuizNotFoundError: If there is no matching quiz
        pydantic.ValidationError: If a replacement question is invalid
    """
    quiz = get_quiz(store, quiz_id, owner)

    data = quiz.model_dump()
    if title and title.strip():
        data["title"] = title
    if questions is not None:
        data["questions"] = [
            q.model_dump() if isinstance(q, Question) else q for q in questions
        ]
    data["metadata"]["updated_at"] = datetime.now()

    updated = Quiz.model_validate(data)
    store.replace(updated)
    logger.info("Updated quiz %s", quiz_id)
    return updated


def delete_quiz(store: QuizStore, quiz_id: str, owner: str | None = None) -> None:
    """
    Remove a quiz.

    Raises:
        QuizNotFoundError: If there is no matching quiz
    """
    get_quiz(store, quiz_id, owner)
    store.delete(quiz_id)
    logger.info("Deleted quiz %s", quiz_id)
