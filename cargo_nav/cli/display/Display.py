"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod


class Display(ABC):
    """Abstract base for user-facing output."""

    @abstractmethod
    def status(self, message: str) -> None:
        """Display a status message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Display an error message."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Display an informational message."""
