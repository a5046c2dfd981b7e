"""Main entry point for the nuvia CLI."""

from nuvia.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
