import typer

API_KEYS_URL = "https://smithery.ai/account/api-keys"


def prompt_for_api_key() -> str:
    """Ask for the registry API key until a non-empty one is entered."""
    while True:
        api_key = typer.prompt(
            f"Please enter your registry API key (get one for free from {API_KEYS_URL})",
            hide_input=True,
        )
        if api_key.strip():
            return api_key.strip()
        typer.echo("API key is required", err=True)
