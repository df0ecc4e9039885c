"""Wikilink span scanner (UNO: single function)."""

from collections.abc import Iterator

from .WikiSpan import WikiSpan


def iter_wiki_spans(text: str) -> Iterator[WikiSpan]:
    """Yield terminated [[...]] and ![[...]] spans, left to right.

    Single forward pass: each span closes at the first ']]' after its
    opener and scanning resumes past it. An unterminated opener means no
    later opener can close either, so scanning stops there and the rest of
    the text stays literal.

    Args:
        text: Raw document text

    Yields:
        WikiSpan for each terminated span
    """
    pos = 0
    while True:
        start = text.find("[[", pos)
        if start == -1:
            return
        is_embed = start > pos and text[start - 1] == "!"
        close = text.find("]]", start + 2)
        if close == -1:
            return
        yield WikiSpan(
            is_embed=is_embed,
            start=start - 1 if is_embed else start,
            end=close + 2,
            raw=text[start + 2 : close],
        )
        pos = close + 2
