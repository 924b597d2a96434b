"""Quiz stores - persistence collaborators for saved quizzes."""

import logging
import uuid
from pathlib import Path
from typing import Protocol, runtime_checkable

from quizforge.models.quiz import Quiz

logger = logging.getLogger(__name__)


@runtime_checkable
class QuizStore(Protocol):
    """Store/retrieve contract for quizzes.

    Stores do not enforce quiz invariants; they receive already validated
    Quiz models.
    """

    def save(self, quiz: Quiz) -> str: ...

    def get(self, quiz_id: str) -> Quiz | None: ...

    def list_for_owner(self, owner: str) -> list[Quiz]: ...

    def replace(self, quiz: Quiz) -> None: ...

    def delete(self, quiz_id: str) -> bool: ...


def new_quiz_id() -> str:
    return uuid.uuid4().hex


def newest_first(quizzes: list[Quiz]) -> list[Quiz]:
    return sorted(quizzes, key=lambda q: q.metadata.created_at, reverse=True)


class InMemoryQuizStore:
    """Keeps quizzes in a dict; used by tests and short-lived callers."""

    def __init__(self):
        self._quizzes: dict[str, Quiz] = {}

    def save(self, quiz: Quiz) -> str:
        quiz_id = new_quiz_id()
        self._quizzes[quiz_id] = quiz.model_copy(update={"id": quiz_id}, deep=True)
        return quiz_id

    def get(self, quiz_id: str) -> Quiz | None:
        quiz = self._quizzes.get(quiz_id)
        return quiz.model_copy(deep=True) if quiz else None

    def list_for_owner(self, owner: str) -> list[Quiz]:
        return newest_first(
            [q.model_copy(deep=True) for q in self._quizzes.values() if q.owner == owner]
        )

    def replace(self, quiz: Quiz) -> None:
        if quiz.id is None or quiz.id not in self._quizzes:
            raise KeyError(quiz.id)
        self._quizzes[quiz.id] = quiz.model_copy(deep=True)

    def delete(self, quiz_id: str) -> bool:
        return self._quizzes.pop(quiz_id, None) is not None


class JsonQuizStore:
    """
    Stores each quiz as ``<id>.json`` inside a directory.

    Example:
        >>> store = JsonQuizStore(".quizforge/quizzes")
        >>> quiz_id = store.save(quiz)
        >>> loaded = store.get(quiz_id)
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, quiz_id: str) -> Path:
        # Ids are generated hex strings; anything else cannot be a stored quiz
        return self.directory / f"{Path(quiz_id).name}.json"

    def _write(self, quiz: Quiz) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(quiz.id).write_text(quiz.model_dump_json(indent=2), encoding="utf-8")

    def save(self, quiz: Quiz) -> str:
        quiz_id = new_quiz_id()
        self._write(quiz.model_copy(update={"id": quiz_id}))
        logger.debug("Quiz saved: %s", quiz_id)
        return quiz_id

    def get(self, quiz_id: str) -> Quiz | None:
        path = self._path(quiz_id)
        if not path.is_file():
            logger.debug("Quiz not found: %s", quiz_id)
            return None
        return Quiz.model_validate_json(path.read_text(encoding="utf-8"))

    def list_for_owner(self, owner: str) -> list[Quiz]:
        if not self.directory.is_dir():
            return []
        quizzes = [
            Quiz.model_validate_json(path.read_text(encoding="utf-8"))
            for path in sorted(self.directory.glob("*.json"))
        ]
        return newest_first([q for q in quizzes if q.owner == owner])

    def replace(self, quiz: Quiz) -> None:
        if quiz.id is None or not self._path(quiz.id).is_file():
            raise KeyError(quiz.id)
        self._write(quiz)
        logger.debug("Quiz replaced: %s", quiz.id)

    def delete(self, quiz_id: str) -> bool:
        path = self._path(quiz_id)
        if not path.is_file():
            return False
        path.unlink()
        logger.debug("Quiz deleted: %s", quiz_id)
        return True
