"""Typer CLI application for quiz generation."""

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from quizforge import __version__
from quizforge.config.settings import get_settings
from quizforge.errors import (
    GenerationFailure,
    NoSourceContentError,
    QuizNotFoundError,
    ResponseParseError,
)
from quizforge.export.exporter import ExportFormat, render_quiz, write_document
from quizforge.graph.workflow import generate_quiz
from quizforge.logging_config import configure_logging
from quizforge.models.quiz import (
    MAX_REQUESTED_COUNT,
    GeneratedQuiz,
    GenerationRequest,
    QuestionType,
    Quiz,
)
from quizforge.providers.factory import build_orchestrator
from quizforge.service import (
    delete_quiz,
    get_quiz,
    list_quizzes,
    save_generated_quiz,
    update_quiz,
)
from quizforge.sources import resolve_source
from quizforge.storage.quiz_store import JsonQuizStore, QuizStore

app = typer.Typer(
    name="quizforge",
    help="Generate quizzes from a topic or text and export them as PDF or DOCX",
    add_completion=False,
)

console = Console()


def get_store() -> QuizStore:
    """Store used by every command."""
    return JsonQuizStore(get_settings().store_path)


def fail(message: str) -> None:
    """Print an error and exit with code 1."""
    console.print(f"[red]Error:[/red] {message}", style="bold")
    raise typer.Exit(code=1)


@app.command()
def generate(
    topic: Optional[str] = typer.Option(
        None,
        "--topic",
        "-t",
        help="Topic to generate questions about",
    ),
    text: Optional[str] = typer.Option(
        None,
        "--text",
        help="Source text to generate questions from",
    ),
    text_file: Optional[Path] = typer.Option(
        None,
        "--text-file",
        help="UTF-8 text file to generate questions from",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    questions: int = typer.Option(
        10,
        "--questions",
        "-q",
        help="Number of questions",
        min=1,
        max=MAX_REQUESTED_COUNT,
    ),
    question_types: List[QuestionType] = typer.Option(
        [QuestionType.MCQ, QuestionType.TRUE_FALSE, QuestionType.FILL],
        "--type",
        help="Question types to keep (repeatable: --type mcq --type tf)",
        case_sensitive=False,
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        help="Custom quiz title",
    ),
    save: bool = typer.Option(
        True,
        "--save/--no-save",
        help="Save the generated quiz to the local store",
    ),
    owner: Optional[str] = typer.Option(
        None,
        "--owner",
        help="Owner recorded on the saved quiz",
    ),
    export_format: Optional[ExportFormat] = typer.Option(
        None,
        "--export",
        "-e",
        help="Also export the quiz in this format",
        case_sensitive=False,
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for exported files",
    ),
) -> None:
    """
    Generate a quiz from a topic, text or text file.

    Example:
        quizforge generate -t "Photosynthesis" -q 10 --type mcq --type tf
    """
    settings = get_settings()

    try:
        source_content, source_topic = resolve_source(topic, text, text_file)
        request = GenerationRequest(
            source_content=source_content,
            requested_count=questions,
            allowed_types=set(question_types),
            title=title,
            topic=source_topic,
        )
    except NoSourceContentError as e:
        fail(f"{e} Use --topic, --text or --text-file.")
    except ValidationError as e:
        fail(f"Invalid request: {e}")

    display_request(request)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("[cyan]Generating quiz...", total=None)
            generated = generate_quiz(request, build_orchestrator(settings))
            progress.update(task, description="[green]Quiz generation complete!")
    except GenerationFailure as e:
        fail(f"Quiz generation failed: {e}")
    except ResponseParseError as e:
        fail(f"The provider answered, but the answer was unusable: {e}")

    display_generated_quiz(generated)

    quiz = Quiz(
        title=generated.title,
        topic=generated.topic,
        questions=generated.questions,
        owner=owner or settings.default_owner,
    )
    if save:
        quiz = save_generated_quiz(get_store(), generated, quiz.owner)
        console.print(f"\n[green]✓[/green] Saved quiz [bold]{quiz.id}[/bold]")

    if export_format is not None:
        document = render_quiz(quiz, export_format)
        path = write_document(document, output_dir or settings.default_output_dir)
        console.print(f"[green]✓[/green] Quiz exported to: {path}")


@app.command("list")
def list_command(
    owner: Optional[str] = typer.Option(None, "--owner", help="Owner to list"),
) -> None:
    """List saved quizzes, newest first."""
    quizzes = list_quizzes(get_store(), owner or get_settings().default_owner)
    if not quizzes:
        console.print("No saved quizzes.")
        return

    table = Table(title="Saved Quizzes", border_style="cyan")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("Questions", style="white")
    table.add_column("Created", style="white")

    for quiz in quizzes:
        table.add_row(
            quiz.id or "",
            quiz.title,
            str(quiz.total_questions),
            quiz.metadata.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@app.command()
def show(quiz_id: str = typer.Argument(..., help="Saved quiz id")) -> None:
    """Show a saved quiz with its answers."""
    try:
        quiz = get_quiz(get_store(), quiz_id)
    except QuizNotFoundError as e:
        fail(str(e))
    display_questions(quiz.title, quiz.questions)


@app.command()
def rename(
    quiz_id: str = typer.Argument(..., help="Saved quiz id"),
    title: str = typer.Option(..., "--title", help="New quiz title"),
) -> None:
    """Change the title of a saved quiz."""
    try:
        quiz = update_quiz(get_store(), quiz_id, title=title)
    except QuizNotFoundError as e:
        fail(str(e))
    console.print(f"[green]✓[/green] Renamed quiz {quiz_id} to '{quiz.title}'")


@app.command()
def delete(quiz_id: str = typer.Argument(..., help="Saved quiz id")) -> None:
    """Delete a saved quiz."""
    try:
        delete_quiz(get_store(), quiz_id)
    except QuizNotFoundError as e:
        fail(str(e))
    console.print(f"[green]✓[/green] Quiz {quiz_id} removed")


@app.command()
def export(
    quiz_id: str = typer.Argument(..., help="Saved quiz id"),
    export_format: ExportFormat = typer.Option(
        ExportFormat.PDF,
        "--format",
        "-f",
        help="Export format",
        case_sensitive=False,
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the exported file",
    ),
) -> None:
    """Export a saved quiz as PDF or DOCX."""
    try:
        quiz = get_quiz(get_store(), quiz_id)
    except QuizNotFoundError as e:
        fail(str(e))

    document = render_quiz(quiz, export_format)
    path = write_document(document, output_dir or get_settings().default_output_dir)
    console.print(f"[green]✓[/green] Quiz exported to: {path}")


@app.command()
def info() -> None:
    """Display information about the quiz generator."""
    settings = get_settings()
    info_text = f"""
[bold cyan]quizforge[/bold cyan]
Version: {__version__}

[bold]Pipeline:[/bold]
  • Prompt builder - One instruction template per request
  • Fallback orchestrator - {settings.primary_provider}, then {settings.secondary_provider}
  • Response parser - Drops malformed questions, keeps the rest
  • Post-filter - Requested question types and count

[bold]Question types:[/bold] mcq, tf, fill
[bold]Export formats:[/bold] PDF, DOCX
[bold]Store:[/bold] {settings.store_path}
    """
    console.print(Panel(info_text, title="quizforge Info", border_style="cyan"))


def display_request(request: GenerationRequest) -> None:
    """Display the request before generation."""
    table = Table(title="Quiz Request", show_header=False, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    source = request.source_content
    table.add_row("Source", source if len(source) <= 60 else f"{source[:57]}...")
    table.add_row("Questions", str(request.requested_count))
    table.add_row("Types", ", ".join(sorted(t.value for t in request.allowed_types)))
    table.add_row("Title", request.quiz_title)

    console.print()
    console.print(table)


def display_generated_quiz(generated: GeneratedQuiz) -> None:
    """Display the generated questions and any shortfall."""
    display_questions(generated.title, generated.questions)
    if generated.provider_used:
        console.print(f"Generated by: {generated.provider_used}")
    if generated.shortfall:
        console.print(
            f"[yellow]Only {len(generated.questions)} of "
            f"{generated.requested_count} requested questions were usable.[/yellow]"
        )


def display_questions(title: str, questions: list) -> None:
    """Display questions with their answers."""
    table = Table(title=title, border_style="green", show_lines=True)
    table.add_column("#", style="cyan")
    table.add_column("Type", style="cyan")
    table.add_column("Question", style="white")
    table.add_column("Answer", style="green")
    table.add_column("Difficulty", style="white")

    for number, question in enumerate(questions, 1):
        text = question.question_text
        if question.options:
            text += "\n" + "\n".join(f"  - {option}" for option in question.options)
        table.add_row(
            str(number),
            question.question_type.value,
            text,
            question.correct_answer,
            question.difficulty.value.capitalize(),
        )

    console.print()
    console.print(table)


@app.callback()
def callback() -> None:
    """
    quizforge - Create quizzes with an LLM provider chain.
    """
    configure_logging(get_settings().log_level)


if __name__ == "__main__":
    app()
