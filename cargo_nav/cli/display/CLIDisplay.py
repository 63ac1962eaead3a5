"""CLI display implementation using Rich library."""

import sys

from rich.console import Console
from rich.markup import escape

from .Display import Display


class CLIDisplay(Display):
    """Terminal display writing to stderr, leaving stdout for ``--print``."""

    def __init__(self) -> None:
        self.stderr_console = Console(file=sys.stderr, highlight=False)

    def _print(self, message: str) -> None:
        # URLs are printed whole so they stay clickable and greppable
        self.stderr_console.print(message, soft_wrap=True)

    def status(self, message: str) -> None:
        self._print(f"[blue]i[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        self._print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self._print(f"[red]✗[/red] {escape(message)}")

    def info(self, message: str) -> None:
        self._print(escape(message))
