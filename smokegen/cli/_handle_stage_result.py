"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context) -> str:
    """Get the display format stored by the root callback.

    Walks from the command's context up to the root, since sub-apps such as
    ``config`` hold their own context.

    Raises:
        RuntimeError: If the flag was never set in the context chain.
        ValueError: If an invalid display format value is encountered.
    """
    current: typer.Context | None = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout as JSON or YAML)

    The wrapped function exits with 0 on success, 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display_format = _extract_display_format(ctx)
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
