"""Wikilink payload parser (UNO: single function)."""

import re

from .WikiLinkInfo import WikiLinkInfo

SIZE_PATTERN = re.compile(r"^(\d+)(?:x(\d+))?$")
MD_SUFFIX_PATTERN = re.compile(r"\.md$", re.IGNORECASE)


def parse_wiki_link(raw: str) -> WikiLinkInfo:
    """Parse the inside of a [[...]] or ![[...]] span.

    The last '|' separates the display text, the first '#' of what remains
    separates the anchor. A display segment made only of a size
    (``600`` or ``600x400``) is recorded as ``size`` instead.

    Args:
        raw: Text between the delimiters

    Returns:
        WikiLinkInfo, never raises
    """
    inner = raw.strip()

    path_part, pipe, display_part = inner.rpartition("|")
    if not pipe:
        path_part, display_part = inner, ""
    display_part = display_part.strip()

    path, hash_, anchor = path_part.partition("#")
    path = MD_SUFFIX_PATTERN.sub("", path.strip())

    size = None
    display = display_part or path
    size_match = SIZE_PATTERN.match(display_part)
    if size_match:
        width, height = size_match.groups()
        size = f"{width}x{height}" if height else width
        display = path

    anchor = anchor.strip() if hash_ else ""
    return WikiLinkInfo(path=path, display=display, anchor=anchor or None, size=size)
