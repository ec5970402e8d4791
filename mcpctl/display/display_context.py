"""Display factory."""

from typing import Literal

from .CLIDisplay import CLIDisplay
from .Display import Display

DisplayMode = Literal["cli"]


def get_display(mode: DisplayMode = "cli") -> Display:
    """Get a display implementation for the given mode.

    A fresh instance is built per call so rich consoles bind to the
    current sys.stdout/sys.stderr (matters under test runners).
    """
    if mode == "cli":
        return CLIDisplay()
    raise ValueError(f"Invalid display mode: {mode}. Must be 'cli'")
