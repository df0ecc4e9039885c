"""Link audit API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkAuditOutput
from ..render._load_options import _load_options
from ..StageResult import StageResult
from .audit_links import audit_links


def cmd_audit(path: str, index: str | None = None, config_path: str | None = None) -> StageResult:
    """Report unresolved and ambiguous references in a markdown file.

    Succeeds only when the file has no unresolved references; ambiguous
    ones are listed but tolerated.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser()
        try:
            yield (0.2, "Loading link index...")
            options = _load_options(config_path, index)

            yield (0.5, "Reading file...")
            if not file_path.is_file():
                raise ValueError(f"File not found: {file_path}")
            text = file_path.read_text(encoding="utf-8")

            yield (0.8, "Auditing links...")
            issues = audit_links(text, options.link_index)
        except Exception as e:
            result_obj.output = LinkAuditOutput(
                errors=[str(e)],
                warnings=[],
                path=str(file_path),
                count=0,
                issues=[],
            ).model_dump(mode="python")
            result_obj.result = f"Audit failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        unresolved = [issue for issue in issues if issue.kind == "unresolved"]
        ambiguous = [issue for issue in issues if issue.kind == "ambiguous"]
        result_obj.output = LinkAuditOutput(
            errors=[issue.message for issue in unresolved],
            warnings=[issue.message for issue in ambiguous],
            path=str(file_path),
            count=len(issues),
            issues=[issue.to_dict() for issue in issues],
        ).model_dump(mode="python")
        result_obj.result = f"{len(unresolved)} unresolved, {len(ambiguous)} ambiguous in {file_path.name}"
        result_obj.success = not unresolved

    return StageResult(announce=f"Auditing {path}...", progress_callback=do_work)
