"""Preprocess API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.render import RenderPreprocessOutput
from ..preprocess.preprocess import preprocess
from ..StageResult import StageResult
from ._load_options import _load_options


def cmd_preprocess(
    path: str,
    index: str | None = None,
    base_path: str | None = None,
    config_path: str | None = None,
) -> StageResult:
    """Show a markdown file with its embeds rewritten to standard markdown."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser()
        try:
            yield (0.2, "Loading configuration...")
            options = _load_options(config_path, index, base_path)

            yield (0.5, "Reading file...")
            if not file_path.is_file():
                raise ValueError(f"File not found: {file_path}")
            text = file_path.read_text(encoding="utf-8")

            yield (0.8, "Rewriting embeds...")
            markdown = preprocess(
                text,
                link_index=options.link_index,
                base_path=options.base_path,
                current_path=options.current_path,
            )
        except Exception as e:
            result_obj.output = RenderPreprocessOutput(
                errors=[str(e)],
                warnings=[],
                path=str(file_path),
                markdown="",
            ).model_dump(mode="python")
            result_obj.result = f"Preprocess failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RenderPreprocessOutput(
            errors=[],
            warnings=[],
            path=str(file_path),
            markdown=markdown,
        ).model_dump(mode="python")
        result_obj.result = f"Preprocessed {file_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Preprocessing {path}...", progress_callback=do_work)
