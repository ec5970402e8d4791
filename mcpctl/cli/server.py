"""Server commands registered on the top-level app."""

import typer

from mcpctl.api.registry.RegistryError import RegistryError
from mcpctl.api.server.cmd_inspect import cmd_inspect
from mcpctl.api.server.cmd_install import cmd_install
from mcpctl.api.server.cmd_uninstall import cmd_uninstall
from mcpctl.api.server.run_server import run_server
from mcpctl.cli._handle_stage_result import _handle_stage_result
from mcpctl.cli._prompt_for_client import _prompt_for_client


def register_server_commands(app: typer.Typer) -> None:
    """Attach install, uninstall, inspect and run to ``app``."""

    @app.command(name="install")
    def install_cmd(
        package: str = typer.Argument(..., help="Qualified server name, e.g. @owner/server"),
        client: str | None = typer.Option(None, "--client", "-c", help="Client to install for"),
        config: str | None = typer.Option(None, "--config", help="Server configuration as a JSON object"),
        key: str | None = typer.Option(None, "--key", help="Registry API key (not saved)"),
    ) -> None:
        """Install a server for a client."""
        _handle_stage_result(cmd_install)(package, _prompt_for_client(client), config, key)

    @app.command(name="uninstall")
    def uninstall_cmd(
        package: str = typer.Argument(..., help="Qualified server name or installed server key"),
        client: str | None = typer.Option(None, "--client", "-c", help="Client to uninstall from"),
    ) -> None:
        """Uninstall a server from a client."""
        _handle_stage_result(cmd_uninstall)(package, _prompt_for_client(client))

    @app.command(name="inspect")
    def inspect_cmd(
        server_id: str = typer.Argument(..., help="Qualified server name"),
        key: str | None = typer.Option(None, "--key", help="Registry API key (not saved)"),
    ) -> None:
        """Show registry details for a server."""
        _handle_stage_result(cmd_inspect)(server_id, key)

    @app.command(name="run")
    def run_cmd(
        server_id: str = typer.Argument(..., help="Qualified server name"),
        config: str | None = typer.Option(None, "--config", help="Server configuration as a JSON object"),
        key: str | None = typer.Option(None, "--key", help="Registry API key (not saved)"),
    ) -> None:
        """Run a server over stdio."""
        try:
            exit_code = run_server(server_id, config, key)
        except (ValueError, RegistryError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        raise typer.Exit(exit_code)
