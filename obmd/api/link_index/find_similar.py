"""Similar-target lookup for diagnostics (UNO: single function)."""

import re

from .LinkIndex import LinkIndex, RawLinkIndex

EXTENSION_PATTERN = re.compile(r"\.[^.]+$")


def find_similar(query: str, link_index: LinkIndex | RawLinkIndex | None) -> list[str]:
    """List every target url whose basename equals ``query``.

    Comparison is case-insensitive and ignores the file extension. Used to
    explain unresolved or ambiguous links, never for resolution itself.
    """
    needle = query.lower()
    results: list[str] = []
    for target in LinkIndex.from_mapping(link_index).values():
        for url in target.urls:
            basename = EXTENSION_PATTERN.sub("", url.rsplit("/", 1)[-1]).lower()
            if basename == needle and url not in results:
                results.append(url)
    return results
