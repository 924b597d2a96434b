"""Main entry point for quizforge CLI."""

from quizforge.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
