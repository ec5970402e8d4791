"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

from rich.console import Console

from .Display import Display


class CLIDisplay(Display):
    """CLI display using Rich library.

    Messages go to stderr so stdout carries only structured output.
    """

    def __init__(self):
        self.console = Console(file=sys.stdout, soft_wrap=True)
        self.stderr_console = Console(file=sys.stderr, soft_wrap=True)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, **kwargs) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {message}")
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] [yellow]{message}[/yellow]")

    def info(self, message: str, **kwargs) -> None:
        style = kwargs.get("style")
        if style:
            self.stderr_console.print(message, style=style)
        else:
            self.stderr_console.print(message)

    def spinner_start(self, description: str = "", **kwargs) -> Any:  # noqa: ARG002
        status = self.stderr_console.status(description, spinner="dots")
        status.start()
        return status

    def spinner_finish(self, handle: Any, message: str = "", **kwargs) -> None:
        if handle:
            handle.stop()
        if not message:
            return
        if kwargs.get("failed"):
            self.error(message)
        else:
            self.success(message)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            import yaml

            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer_name = "yaml"
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer_name = "json"

        if sys.stdout.isatty():
            from pygments import highlight
            from pygments.formatters import Terminal256Formatter
            from pygments.lexers import get_lexer_by_name

            text = highlight(text, get_lexer_by_name(lexer_name), Terminal256Formatter(style="monokai"))
        sys.stdout.write(text)
        sys.stdout.flush()
