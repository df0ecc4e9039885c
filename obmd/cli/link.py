"""Link Typer app factory."""

import typer

from obmd.api.audit.cmd_audit import cmd_audit
from obmd.api.link_index.cmd_index import cmd_index
from obmd.api.link_index.cmd_resolve import cmd_resolve
from obmd.cli._handle_stage_result import _context_value, _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Resolve, audit and index wikilinks",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(
        path: str = typer.Argument(..., help="Link path as written inside [[...]]"),
        index: str | None = typer.Option(None, "--index", "-i", help="Wire-form JSON link index"),
    ) -> None:
        """Resolve a link path against the link index."""
        _handle_stage_result(cmd_resolve)(path=path, index=index, config_path=_context_value("config_path"))

    @app.command(name="audit")
    def audit_cmd(
        file: str = typer.Argument(..., help="Markdown file to audit"),
        index: str | None = typer.Option(None, "--index", "-i", help="Wire-form JSON link index"),
    ) -> None:
        """Report unresolved and ambiguous references in a file."""
        _handle_stage_result(cmd_audit)(path=file, index=index, config_path=_context_value("config_path"))

    @app.command(name="index")
    def index_cmd(
        directory: str = typer.Argument(..., help="Corpus root to scan"),
        url_prefix: str = typer.Option("/", "--url-prefix", help="Prefix for every target url"),
        output: str | None = typer.Option(None, "--output", "-o", help="Write the index JSON to this file"),
    ) -> None:
        """Build a link index from the files under a directory."""
        _handle_stage_result(cmd_index)(path=directory, url_prefix=url_prefix, output=output)

    return app
