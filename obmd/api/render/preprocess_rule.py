"""Core rule running the embed preprocessor on the raw source."""

from collections.abc import Callable

from markdown_it.rules_core import StateCore

from ..preprocess import preprocess
from .RenderOptions import RenderOptions


def preprocess_rule(options: RenderOptions) -> Callable[[StateCore], None]:
    """Build the core rule that rewrites ``state.src`` before normalize."""

    def rule(state: StateCore) -> None:
        state.src = preprocess(
            state.src,
            link_index=options.link_index,
            base_path=options.base_path,
            current_path=options.current_path,
        )

    return rule
