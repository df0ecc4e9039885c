"""Render API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.render import RenderRenderOutput
from ..audit.audit_links import audit_links
from ..StageResult import StageResult
from ._load_options import _load_options
from .create_markdown import create_markdown


def cmd_render(
    path: str,
    index: str | None = None,
    base_path: str | None = None,
    output: str | None = None,
    config_path: str | None = None,
) -> StageResult:
    """Render a markdown file to HTML.

    Args:
        path: Markdown file
        index: Optional wire-form JSON link index, replaces the configured one
        base_path: Optional attachment root, replaces the configured one
        output: Optional HTML file to write
        config_path: Optional config file instead of the default location
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser()
        output_path = Path(output).expanduser() if output else None
        try:
            yield (0.1, "Loading configuration...")
            options = _load_options(config_path, index, base_path)

            yield (0.3, "Reading file...")
            if not file_path.is_file():
                raise ValueError(f"File not found: {file_path}")
            text = file_path.read_text(encoding="utf-8")

            yield (0.5, "Checking links...")
            warnings = [issue.message for issue in audit_links(text, options.link_index)]

            yield (0.7, "Rendering...")
            html = create_markdown(options).render(text)

            if output_path is not None:
                yield (0.9, "Writing output...")
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(html, encoding="utf-8")
        except Exception as e:
            result_obj.output = RenderRenderOutput(
                errors=[str(e)],
                warnings=[],
                path=str(file_path),
                output_path="",
                html="",
            ).model_dump(mode="python")
            result_obj.result = f"Render failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RenderRenderOutput(
            errors=[],
            warnings=warnings,
            path=str(file_path),
            output_path=str(output_path) if output_path else "",
            html=html,
        ).model_dump(mode="python")
        target = f" to {output_path}" if output_path else ""
        result_obj.result = f"Rendered {file_path.name}{target} ({len(warnings)} link warnings)"
        result_obj.success = True

    return StageResult(announce=f"Rendering {path}...", progress_callback=do_work)
