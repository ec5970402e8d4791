import click
import typer

from mcpctl.api.client.get_client_targets import VALID_CLIENTS


def _prompt_for_client(client: str | None) -> str:
    """Return ``client`` or ask the user to pick one."""
    if client:
        return client
    return typer.prompt(
        "Which client do you want to use?",
        type=click.Choice(list(VALID_CLIENTS), case_sensitive=False),
        default=VALID_CLIENTS[0],
    )
