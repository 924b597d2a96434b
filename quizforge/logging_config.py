"""Logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """
    Route all log records through a Rich handler on stderr.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
        console: Console to render to; defaults to a stderr console
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # Keep SDK chatter out of CLI output unless explicitly debugging
    for noisy in ("httpx", "botocore", "anthropic", "urllib3"):
        logging.getLogger(noisy).setLevel(max(logging.WARNING, logging.getLogger().level))
