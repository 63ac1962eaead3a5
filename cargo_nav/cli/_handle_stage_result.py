"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TypeVar

import typer

from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)

logger = logging.getLogger(__name__)


def _handle_stage_result(func: F, print_only: bool = False) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (debug log)
    3. Result (print to stderr, after the link summary when one exists)
    4. Output (the link on stdout when ``print_only``)

    Args:
        func: Function that returns StageResult
        print_only: Echo the resolved link to stdout instead of a success line

    Returns:
        Wrapped function that displays the result and exits 0 or 1
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()

        result = func(*args, **kwargs)
        display.status(result.announce)

        for progress_percent, message in result.progress_callback(result):
            logger.debug("Progress: %s (%.0f%%)", message, progress_percent * 100)

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")

        summary = result.output.get("summary")
        if result.success:
            if summary:
                display.info(summary)
            if print_only:
                typer.echo(result.result)
            else:
                display.success(f"Opened {result.result}")
            raise typer.Exit(0)

        display.error(result.result)
        if summary:
            display.info(summary)
        raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
