"""Link index builder (UNO: single function)."""

from collections.abc import Iterable
from pathlib import PurePosixPath

from .Candidates import Candidates
from .LinkIndex import LinkIndex, LinkTarget
from .Single import Single

MD_EXTENSIONS = {".md", ".markdown"}


def build_link_index(paths: Iterable[str], url_prefix: str = "/") -> LinkIndex:
    """Build a LinkIndex from corpus-relative file paths.

    Notes (``.md``) are keyed by their path without extension and by their
    title (stem) and link to ``url_prefix + path`` without the extension.
    Other files are keyed by relative path and by file name and keep their
    extension. Titles shared by several files become Candidates, in input
    order.

    Args:
        paths: Relative paths such as ``"Notes/dev.md"``; backslashes allowed
        url_prefix: Prefix for every target url

    Returns:
        LinkIndex
    """
    prefix = url_prefix if url_prefix.endswith("/") else f"{url_prefix}/"
    collected: dict[str, list[str]] = {}

    def add(key: str, url: str) -> None:
        urls = collected.setdefault(key, [])
        if url not in urls:
            urls.append(url)

    for raw in paths:
        rel = PurePosixPath(raw.replace("\\", "/").lstrip("/"))
        if not rel.name:
            continue
        if rel.suffix.lower() in MD_EXTENSIONS:
            no_ext = rel.with_suffix("").as_posix()
            url = f"{prefix}{no_ext}"
            add(no_ext, url)
            add(rel.stem, url)
        else:
            url = f"{prefix}{rel.as_posix()}"
            add(rel.as_posix(), url)
            add(rel.name, url)

    entries: dict[str, LinkTarget] = {}
    for key, urls in collected.items():
        entries[key] = Single(urls[0]) if len(urls) == 1 else Candidates(tuple(urls))
    return LinkIndex(entries)
