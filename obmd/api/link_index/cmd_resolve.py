"""Link resolve API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkResolveOutput
from ..render._load_options import _load_options
from ..StageResult import StageResult
from .find_similar import find_similar
from .resolve_link_path import resolve_link_path


def cmd_resolve(path: str, index: str | None = None, config_path: str | None = None) -> StageResult:
    """Resolve one wikilink path against the link index."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        try:
            yield (0.3, "Loading link index...")
            options = _load_options(config_path, index)

            yield (0.7, "Resolving...")
            resolution = resolve_link_path(path, options.link_index, options.current_path)
            basename = path.rsplit("/", 1)[-1]
            similar = find_similar(basename, options.link_index)
        except Exception as e:
            result_obj.output = LinkResolveOutput(
                errors=[str(e)],
                warnings=[],
                path=path,
                resolved=path,
                matched=False,
                is_ambiguous=False,
                candidates=[],
                similar=[],
            ).model_dump(mode="python")
            result_obj.result = f"Resolve failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = []
        if resolution.is_ambiguous:
            warnings.append(f"{len(resolution.candidates)} targets share this name")
        result_obj.output = LinkResolveOutput(
            errors=[] if resolution.matched else [f"No index entry for {path}"],
            warnings=warnings,
            path=path,
            resolved=resolution.resolved,
            matched=resolution.matched,
            is_ambiguous=resolution.is_ambiguous,
            candidates=list(resolution.candidates),
            similar=similar,
        ).model_dump(mode="python")
        if resolution.matched:
            result_obj.result = f"Resolved {path} to {resolution.resolved}"
        else:
            result_obj.result = f"Unresolved: {path}"
        result_obj.success = resolution.matched

    return StageResult(announce=f"Resolving {path}...", progress_callback=do_work)
