"""Pipeline rule descriptor (UNO: single model)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .Stage import Stage

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

    from .RenderOptions import RenderOptions


@dataclass(frozen=True)
class Rule:
    """A named rule and where it plugs into the markdown-it engine.

    ``anchor`` is the neighbouring engine rule for parser stages and the
    token type for Stage.RENDER. ``factory`` receives the RenderOptions and
    returns the handler; for Stage.RENDER the handler is a decorator that
    takes the previously installed renderer (or None) and returns the new one.
    """

    name: str
    stage: Stage
    anchor: str
    factory: Callable[[RenderOptions], Callable[..., Any]]
    before: bool = False

    def apply(self, md: MarkdownIt, options: RenderOptions) -> None:
        """Register this rule on ``md``."""
        handler = self.factory(options)

        if self.stage is Stage.RENDER:
            previous = md.renderer.rules.get(self.anchor)
            md.add_render_rule(self.anchor, handler(previous))
            return

        ruler = md.inline.ruler if self.stage is Stage.INLINE else md.core.ruler
        if self.before:
            ruler.before(self.anchor, self.name, handler)
        else:
            ruler.after(self.anchor, self.name, handler)
