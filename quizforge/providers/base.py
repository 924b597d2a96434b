"""Provider client contract shared by every generation backend."""

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from quizforge.errors import ProviderError, ProviderErrorKind


@runtime_checkable
class ProviderClient(Protocol):
    """Anything that can turn a prompt into raw model text.

    Implementations raise ProviderError, and only ProviderError, on failure.
    """

    name: str

    def generate(self, prompt: str) -> str: ...


def extract_text(message: Any, provider: str) -> str:
    """
    Unwrap the text of a chat model response.

    LangChain chat models return either a plain string or a list of content
    blocks; only text blocks are kept.

    Args:
        message: AIMessage (or anything with a ``content`` attribute)
        provider: Provider name used in the error

    Returns:
        The response text

    Raises:
        ProviderError: MALFORMED if no usable text is present
    """
    content = getattr(message, "content", None)

    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        content = "".join(parts)

    if not isinstance(content, str) or not content.strip():
        raise ProviderError(
            ProviderErrorKind.MALFORMED, provider, "response contained no text"
        )
    return content


def iter_causes(exc: BaseException) -> Iterator[BaseException]:
    """Walk an exception and its explicit/implicit causes, outermost first."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__
