"""Entry point for the nestodo CLI.

Usage:
    python -m nestodo.interfaces.cli.main

Or via installed entry point:
    nestodo <command>
"""

from nestodo.interfaces.cli import app


def main() -> None:
    """Run the nestodo CLI application."""
    app()


if __name__ == "__main__":
    main()
