"""Preconfigured markdown-it engine with the full pipeline."""

from typing import Any

from markdown_it import MarkdownIt
from mdit_py_plugins.attrs import attrs_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from .install import install
from .RenderOptions import RenderOptions


def create_markdown(options: RenderOptions | None = None, **overrides: Any) -> MarkdownIt:
    """Build a CommonMark engine with tables, strikethrough, the pipeline,
    attribute lists (``{.class}``) and task lists.
    """
    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    install(md, options, **overrides)
    # embeds carry their marker class as a trailing {.class} block
    md.use(attrs_plugin)
    md.use(tasklists_plugin)
    return md


def render(text: str, options: RenderOptions | None = None, **overrides: Any) -> str:
    """Render one document to HTML on a fresh engine."""
    return create_markdown(options, **overrides).render(text)
