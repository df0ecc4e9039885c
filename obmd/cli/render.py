"""Render commands (registered at the top level of the app)."""

import typer

from obmd.api.render.cmd_preprocess import cmd_preprocess
from obmd.api.render.cmd_render import cmd_render
from obmd.cli._handle_stage_result import _context_value, _handle_stage_result


def render_cmd(
    file: str = typer.Argument(..., help="Markdown file to render"),
    index: str | None = typer.Option(None, "--index", "-i", help="Wire-form JSON link index"),
    base_path: str | None = typer.Option(None, "--base-path", "-b", help="Attachment root for unresolved embeds"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write the HTML to this file"),
) -> None:
    """Render a markdown file to HTML."""
    _handle_stage_result(cmd_render)(
        path=file,
        index=index,
        base_path=base_path,
        output=output,
        config_path=_context_value("config_path"),
    )


def preprocess_cmd(
    file: str = typer.Argument(..., help="Markdown file to preprocess"),
    index: str | None = typer.Option(None, "--index", "-i", help="Wire-form JSON link index"),
    base_path: str | None = typer.Option(None, "--base-path", "-b", help="Attachment root for unresolved embeds"),
) -> None:
    """Show a markdown file with its embeds rewritten to standard markdown."""
    _handle_stage_result(cmd_preprocess)(
        path=file,
        index=index,
        base_path=base_path,
        config_path=_context_value("config_path"),
    )
