"""Step-by-step detail, shown on stderr only with --verbose."""

from .get_logger import get_logger


def verbose(message: str) -> None:
    """Log a detail message at DEBUG level."""
    get_logger("verbose").debug(message)
