"""Source resolution - Picks the content a quiz is generated from."""

from pathlib import Path

from quizforge.errors import NoSourceContentError


def resolve_source(
    topic: str | None = None,
    text: str | None = None,
    text_file: str | Path | None = None,
) -> tuple[str, str | None]:
    """
    Choose the source content for generation.

    Precedence is text file, then topic, then pasted text. Binary documents
    must be converted to plain text before they reach this function.

    Args:
        topic: Short topic phrase
        text: Pasted free text
        text_file: Path to a UTF-8 text file

    Returns:
        Tuple of (source_content, topic); topic is the stripped topic phrase
        whenever one was given, so it can title the quiz

    Raises:
        NoSourceContentError: If every input is missing or blank
    """
    clean_topic = topic.strip() if topic and topic.strip() else None

    if text_file is not None:
        content = Path(text_file).read_text(encoding="utf-8")
        if content.strip():
            return content, clean_topic

    if clean_topic:
        return clean_topic, clean_topic

    if text and text.strip():
        return text, None

    raise NoSourceContentError()
