"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from mcpctl.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from mcpctl.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"mcpctl {result.output.get('full_version', result.output.get('version', 'unknown'))}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        # Non-standalone click returns the exit code of typer.Exit instead of raising
        exit_code = app(argv, prog_name="mcpctl", standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except (KeyboardInterrupt, click.exceptions.Abort):
        typer.echo("Aborted.", err=True)
        return 130
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
