"""Obsidian wikilinks, embeds and tags for markdown-it-py."""

from .api.audit import LinkIssue, audit_links
from .api.link_index import (
    Candidates,
    LinkIndex,
    LinkResolution,
    Single,
    build_link_index,
    find_similar,
    resolve_link_path,
)
from .api.preprocess import preprocess
from .api.render import RenderOptions, Rule, Stage, create_markdown, install, render
from .api.wikilink import WikiLinkInfo, parse_wiki_link

__all__ = [
    "Candidates",
    "LinkIndex",
    "LinkIssue",
    "LinkResolution",
    "RenderOptions",
    "Rule",
    "Single",
    "Stage",
    "WikiLinkInfo",
    "audit_links",
    "build_link_index",
    "create_markdown",
    "find_similar",
    "install",
    "parse_wiki_link",
    "preprocess",
    "render",
    "resolve_link_path",
]
