"""Wikilink syntax domain."""

from .parse_wiki_link import parse_wiki_link
from .WikiLinkInfo import WikiLinkInfo

__all__ = ["WikiLinkInfo", "parse_wiki_link"]
