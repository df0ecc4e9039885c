"""Pipeline installer (UNO: single function)."""

from typing import Any

from markdown_it import MarkdownIt

from .pipeline import PIPELINE
from .RenderOptions import RenderOptions


def install(md: MarkdownIt, options: RenderOptions | None = None, **overrides: Any) -> None:
    """Register every pipeline rule on ``md``, in order.

    All rules share one RenderOptions built from ``options`` and
    ``overrides`` (``link_index``, ``base_path``, ``current_path``,
    ``unresolved_href``). Nothing is kept between documents; install again
    on a fresh engine for different options.

    Args:
        md: Engine to extend
        options: Base options, defaults when omitted
        **overrides: Individual option fields

    Raises:
        ValueError: If ``unresolved_href`` is not a known mode
        TypeError: If the link index holds unsupported values
    """
    resolved = RenderOptions.build(options, **overrides)
    for rule in PIPELINE:
        rule.apply(md, resolved)
