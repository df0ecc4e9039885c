"""Embed preprocessor (UNO: single function).

Rewrites ``![[...]]`` embeds into standard markdown before the document is
tokenized:

    ![[diagram.png|600]]  ->  ![diagram.png|600x0](/attachments/diagram.png){.obsidian-embed}
    ![[doc.pdf]]          ->  [doc.pdf](/attachments/doc.pdf){.obsidian-embed-file}

Plain ``[[...]]`` links pass through untouched; the inline wikilink rule
handles them during tokenization.
"""

import re
from pathlib import PurePosixPath

from .._constants import DEFAULT_BASE_PATH, EMBED_FILE_CLASS, EMBED_IMAGE_CLASS, IMAGE_EXTENSIONS
from ..link_index import (
    LinkIndex,
    LinkResolution,
    RawLinkIndex,
    encode_target,
    fallback_target,
    resolve_link_path,
)
from ..wikilink import WikiLinkInfo, parse_wiki_link
from .iter_wiki_spans import iter_wiki_spans

# ![alt|600](url) -> ![alt|600x0](url)
IMAGE_WIDTH_PATTERN = re.compile(r"!\[([^\]]*?)\|(\d+)\]\(([^)]+)\)")


def _is_image(target: str) -> bool:
    return PurePosixPath(target.split("?", 1)[0]).suffix.lower() in IMAGE_EXTENSIONS


def resolve_embed(
    path: str,
    link_index: LinkIndex | RawLinkIndex | None,
    current_path: str | None = None,
) -> LinkResolution:
    """Look an embed path up, retrying with the extension stripped.

    Indexes often key attachments by stem: ``![[photo.png]]`` finds ``"photo"``.
    """
    resolution = resolve_link_path(path, link_index, current_path)
    if not resolution.matched:
        stem = PurePosixPath(path).with_suffix("").as_posix() if PurePosixPath(path).suffix else ""
        if stem and stem != path:
            by_stem = resolve_link_path(stem, link_index, current_path)
            if by_stem.matched:
                return by_stem
    return resolution


def _resolve_embed_target(path: str, index: LinkIndex, base_path: str, current_path: str | None) -> str:
    """Index target for an embed, else the attachment-root fallback."""
    resolution = resolve_embed(path, index, current_path)
    if resolution.matched:
        return resolution.resolved
    return fallback_target(path, base_path)


def _render_embed(info: WikiLinkInfo, target: str) -> str:
    href = encode_target(target)
    if _is_image(target) or _is_image(info.path):
        alt = f"{info.display}|{info.size}" if info.size else info.display
        return f"![{alt}]({href}){{.{EMBED_IMAGE_CLASS}}}"
    label = info.display or info.path
    return f"[{label}]({href}){{.{EMBED_FILE_CLASS}}}"


def _pad_image_width(match: re.Match) -> str:
    alt, width, url = match.groups()
    return f"![{alt}|{width}x0]({url})"


def preprocess(
    text: str,
    link_index: LinkIndex | RawLinkIndex | None = None,
    base_path: str = DEFAULT_BASE_PATH,
    current_path: str | None = None,
) -> str:
    """Rewrite embeds into standard markdown in one forward pass.

    Unterminated delimiters are copied through as literal text, as are
    embeds with an empty payload. Afterwards every standard image whose alt
    text ends in ``|WIDTH`` is padded to ``|WIDTHx0`` so image sizing always
    sees two dimensions.

    Args:
        text: Raw document text
        link_index: Index used to resolve embed targets
        base_path: Attachment root used when a target is not in the index
        current_path: Path of the document being rendered

    Returns:
        Rewritten text
    """
    index = LinkIndex.from_mapping(link_index)
    parts: list[str] = []
    cursor = 0

    for span in iter_wiki_spans(text):
        parts.append(text[cursor : span.start])
        cursor = span.end
        if not span.is_embed or not span.raw.strip():
            parts.append(text[span.start : span.end])
            continue
        info = parse_wiki_link(span.raw)
        target = _resolve_embed_target(info.path, index, base_path, current_path)
        parts.append(_render_embed(info, target))

    parts.append(text[cursor:])
    return IMAGE_WIDTH_PATTERN.sub(_pad_image_width, "".join(parts))
