"""Create the main Typer CLI app."""

import typer

from obmd.api.config.get_package_version import get_package_version
from obmd.cli.link import link
from obmd.cli.render import preprocess_cmd, render_cmd


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"obmd {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Render Obsidian-flavoured markdown",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="render")(render_cmd)
    app.command(name="preprocess")(preprocess_cmd)
    app.add_typer(link(), name="link")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        config: str | None = typer.Option(None, "--config", "-c", help="Config file (default: $OBMD_HOME/config.json)"),
        version: bool = typer.Option(
            False, "--version", "-v", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format and config path for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["config_path"] = config

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
