"""List Typer app factory."""

import typer

from mcpctl.api.client.cmd_list import cmd_list
from mcpctl.api.client.cmd_servers import cmd_servers
from mcpctl.cli._handle_stage_result import _handle_stage_result
from mcpctl.cli._prompt_for_client import _prompt_for_client


def list_app() -> typer.Typer:
    """Create and configure the list Typer app."""
    app = typer.Typer(
        name="list",
        help="List supported clients or installed servers",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """List operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="clients")
    def clients_cmd() -> None:
        """List supported clients."""
        _handle_stage_result(cmd_list)()

    @app.command(name="servers")
    def servers_cmd(
        client: str | None = typer.Option(None, "--client", "-c", help="Client to list servers for"),
    ) -> None:
        """List servers installed for a client."""
        _handle_stage_result(cmd_servers)(_prompt_for_client(client))

    return app
