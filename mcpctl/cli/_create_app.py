"""Create the main Typer CLI app."""

import typer

from mcpctl.cli.lists import list_app
from mcpctl.cli.server import register_server_commands


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Install and manage MCP servers for AI clients",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    register_server_commands(app)
    app.add_typer(list_app(), name="list")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Show detailed progress on stderr"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        from mcpctl.api.config.McpctlConfig import McpctlConfig
        from mcpctl.utils.configure_logging import configure_logging, enable_verbose_logging

        try:
            level = McpctlConfig.load().log.level
        except ValueError as e:
            typer.echo(f"Warning: {e}", err=True)
            level = "INFO"
        configure_logging(level=level)
        if verbose:
            enable_verbose_logging()

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["verbose"] = verbose

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
