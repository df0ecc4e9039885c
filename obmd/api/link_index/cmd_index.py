"""Link index API command."""

import json
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkIndexOutput
from ..StageResult import StageResult
from .build_link_index import build_link_index


def _iter_files(root: Path) -> Iterator[str]:
    """Corpus-relative POSIX paths of every file, skipping hidden entries."""
    for file_path in sorted(root.rglob("*")):
        rel = file_path.relative_to(root)
        if any(part.startswith(".") for part in rel.parts):
            continue
        if file_path.is_file():
            yield rel.as_posix()


def cmd_index(path: str, url_prefix: str = "/", output: str | None = None) -> StageResult:
    """Build a link index from the files under a directory.

    Args:
        path: Corpus root
        url_prefix: Prefix for every target url
        output: Optional JSON file to write the wire-form index to
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        root = Path(path).expanduser()
        output_path = Path(output).expanduser() if output else None
        try:
            yield (0.2, "Scanning files...")
            if not root.is_dir():
                raise ValueError(f"Directory not found: {root}")
            files = list(_iter_files(root))

            yield (0.6, "Building index...")
            wire = build_link_index(files, url_prefix).to_mapping()

            if output_path is not None:
                yield (0.9, "Writing index...")
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(json.dumps(wire, indent=2, ensure_ascii=False), encoding="utf-8")
        except Exception as e:
            result_obj.output = LinkIndexOutput(
                errors=[str(e)],
                warnings=[],
                root=str(root),
                files=0,
                output_path="",
                index={},
            ).model_dump(mode="python")
            result_obj.result = f"Index failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        shared = sorted(key for key, value in wire.items() if isinstance(value, list))
        result_obj.output = LinkIndexOutput(
            errors=[],
            warnings=[f"Shared name: {key}" for key in shared],
            root=str(root),
            files=len(files),
            output_path=str(output_path) if output_path else "",
            index=wire,
        ).model_dump(mode="python")
        result_obj.result = f"Indexed {len(files)} files ({len(wire)} keys)"
        result_obj.success = True

    return StageResult(announce=f"Indexing {path}...", progress_callback=do_work)
