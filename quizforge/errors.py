"""Exception types raised by the generation pipeline and quiz service."""

from enum import Enum


class QuizForgeError(Exception):
    """Base class for all quizforge errors."""


class ProviderErrorKind(str, Enum):
    """Normalized failure kinds a provider client may report."""

    UNREACHABLE = "unreachable"
    QUOTA_EXCEEDED = "quota_exceeded"
    MALFORMED = "malformed"
    TIMEOUT = "timeout"


class ProviderError(QuizForgeError):
    """A single provider call failed.

    Provider clients translate every lower-level exception into this type so the
    orchestrator never sees SDK-specific errors.
    """

    def __init__(self, kind: ProviderErrorKind, provider: str, message: str = ""):
        self.kind = kind
        self.provider = provider
        self.message = message
        detail = f": {message}" if message else ""
        super().__init__(f"{provider} failed ({kind.value}){detail}")


class GenerationFailure(QuizForgeError):
    """Every provider in the fallback chain failed."""

    reason = "both_providers_failed"

    def __init__(self, causes: list[ProviderError]):
        self.causes = list(causes)
        summary = "; ".join(str(cause) for cause in self.causes)
        super().__init__(f"Failed to generate quiz from all providers: {summary}")

    @property
    def primary_cause(self) -> ProviderError | None:
        return self.causes[0] if self.causes else None

    @property
    def secondary_cause(self) -> ProviderError | None:
        return self.causes[1] if len(self.causes) > 1 else None


class ParseErrorKind(str, Enum):
    """Reasons a provider response could not be turned into questions."""

    NOT_EXTRACTABLE_JSON = "not_extractable_json"
    MISSING_QUESTIONS_ARRAY = "missing_questions_array"
    # Per-item only; logged and dropped, never raised for a whole batch.
    SCHEMA_VIOLATION = "schema_violation"


class ResponseParseError(QuizForgeError):
    """The provider answered, but the answer was unusable."""

    def __init__(self, kind: ParseErrorKind, message: str = ""):
        self.kind = kind
        self.message = message
        detail = f": {message}" if message else ""
        super().__init__(f"Invalid provider response ({kind.value}){detail}")


class QuizNotFoundError(QuizForgeError):
    """No stored quiz matches the given identifier (and owner)."""

    def __init__(self, quiz_id: str):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz not found: {quiz_id}")


class NoSourceContentError(QuizForgeError):
    """Neither a topic, text nor a text file was supplied."""

    def __init__(self):
        super().__init__("No content provided for quiz generation.")
