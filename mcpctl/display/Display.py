"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Abstract base for display implementations."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message.

        Args:
            message: Status text to display
            kwargs: Implementation-specific options
        """

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""

    @abstractmethod
    def spinner_start(self, description: str = "", **kwargs) -> Any:
        """Start an indeterminate progress indicator and return its handle."""

    @abstractmethod
    def spinner_finish(self, handle: Any, message: str = "", **kwargs) -> None:
        """Stop a spinner, optionally printing a closing message."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print structured output (format="json" or "yaml")."""
