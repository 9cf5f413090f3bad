"""`python -m openai_scientist` runs the same typer app as the console script."""

from __future__ import annotations

from .cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
