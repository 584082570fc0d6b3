"""Output helpers for CLI commands with clear intent.

user_output() is for human-readable messages and goes to stderr.
machine_output() is for data meant to be piped and goes to stdout.
"""

from pathlib import Path

import click
from rich.console import Console


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a human-readable message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Print data to stdout."""
    click.echo(message, nl=nl)


def stderr_console() -> Console:
    """Console for rich tables, sharing stderr with user_output()."""
    return Console(stderr=True, width=120)


def success(message: str) -> str:
    return click.style("✓ ", fg="green") + message


def warning(message: str) -> str:
    return click.style("⚠ ", fg="yellow") + message


def failure(message: str) -> str:
    return click.style("✗ ", fg="red") + message


def display_path(path: Path, root: Path) -> str:
    """Render path relative to root when it lives under it."""
    if path.is_relative_to(root):
        return str(path.relative_to(root))
    return str(path)
