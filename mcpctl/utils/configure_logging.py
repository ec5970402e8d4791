import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_mcpctl_home import get_mcpctl_home

# Prevent multiple configurations
_CONFIGURED = False
_STDERR_HANDLER: logging.Handler | None = None


def configure_logging(mcpctl_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified mcpctl logging.

    Args:
        mcpctl_home: Path to mcpctl home directory. If None, derived from environment.
        level: Level for the log file handler.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if mcpctl_home is None:
        mcpctl_home = get_mcpctl_home()

    root_logger = logging.getLogger("mcpctl")
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        mcpctl_home.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            mcpctl_home / "mcpctl.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except OSError:
        # Read-only home: keep running without a log file
        file_handler = None
    if file_handler is not None:
        file_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True


def enable_verbose_logging() -> None:
    """Mirror DEBUG records to stderr through rich."""
    global _STDERR_HANDLER
    if _STDERR_HANDLER is not None:
        return

    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(logging.DEBUG)
    logger = logging.getLogger("mcpctl")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    _STDERR_HANDLER = handler


def is_configured() -> bool:
    """Whether configure_logging has run."""
    return _CONFIGURED
