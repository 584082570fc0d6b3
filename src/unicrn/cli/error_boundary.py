"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at the CLI entry
point and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from unicrn.core.errors import UnicrnError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - UnicrnError: Unknown names, unavailable sources, failed writes
        - FileNotFoundError: Missing files/directories
        - PermissionError: Permission denied errors
        - ValueError: Invalid input or configuration

    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (UnicrnError, FileNotFoundError, PermissionError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
