"""Link audit (UNO: single function)."""

from pathlib import PurePosixPath

from ...utils.logger import get_logger
from ..link_index import LinkIndex, RawLinkIndex, find_similar, resolve_link_path
from ..preprocess import iter_wiki_spans, resolve_embed
from ..wikilink import parse_wiki_link
from .LinkIssue import LinkIssue


def _position(text: str, offset: int) -> tuple[int, int]:
    line_start = text.rfind("\n", 0, offset) + 1
    return text.count("\n", 0, offset) + 1, offset - line_start + 1


def audit_links(text: str, link_index: LinkIndex | RawLinkIndex | None) -> list[LinkIssue]:
    """Report references that a render would resolve poorly.

    Every terminated ``[[...]]`` and ``![[...]]`` span is looked up the same
    way rendering does. Misses are reported as ``unresolved`` (with
    same-named targets as suggestions) and silent same-name picks as
    ``ambiguous``. Blank payloads and same-page ``[[#heading]]`` links are
    skipped. Each issue is also logged as a warning.

    Args:
        text: Raw document text
        link_index: Index or its wire form

    Returns:
        Issues in document order
    """
    logger = get_logger("audit")
    index = LinkIndex.from_mapping(link_index)
    issues: list[LinkIssue] = []

    for span in iter_wiki_spans(text):
        if not span.raw.strip():
            continue
        info = parse_wiki_link(span.raw)
        if not info.path:
            continue

        if span.is_embed:
            resolution = resolve_embed(info.path, index)
        else:
            resolution = resolve_link_path(info.path, index)

        line, column = _position(text, span.start)
        if not resolution.matched:
            stem = PurePosixPath(info.path.rsplit("/", 1)[-1]).stem
            issue = LinkIssue(
                kind="unresolved",
                line=line,
                column=column,
                source=span.source,
                path=info.path,
                is_embed=span.is_embed,
                suggestions=tuple(find_similar(stem, index)),
            )
        elif resolution.is_ambiguous:
            issue = LinkIssue(
                kind="ambiguous",
                line=line,
                column=column,
                source=span.source,
                path=info.path,
                is_embed=span.is_embed,
                resolved=resolution.resolved,
                candidates=resolution.candidates,
            )
        else:
            continue

        logger.warning(issue.message)
        issues.append(issue)

    return issues
