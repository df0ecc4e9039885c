"""Inline rule turning [[target|display]] into link tokens."""

from collections.abc import Callable

from markdown_it.rules_inline import StateInline

from .._constants import UNRESOLVED_HREF_BASE_PATH
from ..link_index import encode_component, encode_target, fallback_target, resolve_link_path
from ..wikilink import WikiLinkInfo, parse_wiki_link
from .RenderOptions import RenderOptions


def build_href(info: WikiLinkInfo, options: RenderOptions) -> str:
    """Compute the href for a parsed wikilink.

    Unresolved paths give ``""`` unless options ask for the attachment-root
    fallback. The anchor is appended to any non-empty href and to
    same-page links (``[[#heading]]``).
    """
    href = ""
    if info.path:
        resolution = resolve_link_path(info.path, options.link_index, options.current_path)
        if resolution.matched:
            href = encode_target(resolution.resolved)
        elif options.unresolved_href == UNRESOLVED_HREF_BASE_PATH:
            href = encode_target(fallback_target(info.path, options.base_path))

    if info.anchor and (href or not info.path):
        href = f"{href}#{encode_component(info.anchor)}"
    return href


def _inside_link(state: StateInline) -> bool:
    """Whether the tokens pushed so far leave a link open (e.g. a link label)."""
    for token in reversed(state.tokens):
        if token.type == "link_close":
            return False
        if token.type == "link_open":
            return True
    return False


def wikilink_rule(options: RenderOptions) -> Callable[[StateInline, bool], bool]:
    """Build the inline rule; register it before markdown-it's ``link`` rule."""

    def rule(state: StateInline, silent: bool) -> bool:
        start = state.pos
        maximum = state.posMax
        src = state.src

        if start + 2 >= maximum or not src.startswith("[[", start):
            return False

        close = src.find("]]", start + 2, maximum)
        if close == -1:
            return False

        raw = src[start + 2 : close]
        if not raw.strip() or silent or _inside_link(state):
            return False

        info = parse_wiki_link(raw)

        token = state.push("link_open", "a", 1)
        token.attrs = {"href": build_href(info, options)}
        token.markup = "[["
        token.info = "wikilink"
        token = state.push("text", "", 0)
        token.content = info.display or info.path or info.anchor or ""
        token = state.push("link_close", "a", -1)
        token.markup = "]]"
        token.info = "wikilink"

        state.pos = close + 2
        return True

    return rule
