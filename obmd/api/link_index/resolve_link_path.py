"""Link path resolver (UNO: single function)."""

from .LinkIndex import LinkIndex, RawLinkIndex
from .LinkResolution import LinkResolution


def resolve_link_path(
    path: str,
    link_index: LinkIndex | RawLinkIndex | None,
    current_path: str | None = None,  # noqa: ARG001
) -> LinkResolution:
    """Resolve a wikilink path against the link index.

    Priority (first match wins):
        1. Exact key match on ``path``.
        2. Basename match on the last '/' segment. With several candidates,
           the one whose tail matches the full requested path wins,
           otherwise the first one.
        3. No match: ``path`` is returned unchanged.

    Same-name notes are resolved silently, like the note application does;
    ``is_ambiguous`` reports that a choice was made.

    Args:
        path: Link path without display text or anchor
        link_index: Index or its wire form
        current_path: Path of the referencing document (accepted, unused)

    Returns:
        LinkResolution
    """
    index = LinkIndex.from_mapping(link_index)

    exact = index.get(path)
    if exact is not None:
        return LinkResolution(
            resolved=exact.urls[0],
            candidates=exact.urls,
            is_ambiguous=exact.is_ambiguous,
        )

    basename = path.rsplit("/", 1)[-1] or path
    by_name = index.get(basename)
    if by_name is None:
        return LinkResolution(resolved=path)

    candidates = by_name.urls
    if len(candidates) == 1:
        return LinkResolution(resolved=candidates[0], candidates=candidates)

    # e.g. path "test/a" against ["/a", "/test/a"] picks "/test/a"
    rooted = path if path.startswith("/") else f"/{path}"
    for candidate in candidates:
        if candidate.endswith(rooted) or candidate.endswith(rooted[1:]):
            return LinkResolution(resolved=candidate, candidates=candidates, is_ambiguous=True)
    return LinkResolution(resolved=candidates[0], candidates=candidates, is_ambiguous=True)
