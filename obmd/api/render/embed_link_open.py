"""Renderer decorator for ``link_open`` tokens produced by file embeds."""

from collections.abc import Callable, Sequence
from typing import Any

from markdown_it.token import Token

from .._constants import EMBED_FILE_CLASS
from .RenderOptions import RenderOptions

RenderFn = Callable[..., str]


def ensure_embed_class(token: Token) -> bool:
    """Normalize the class attribute of an embed-file link.

    No-op for other links. For embed links the marker is kept exactly once
    and duplicate classes are dropped. Returns whether the token is an embed.
    """
    classes = str(token.attrGet("class") or "").split()
    if EMBED_FILE_CLASS not in classes:
        return False
    token.attrSet("class", " ".join(dict.fromkeys(classes)))
    return True


def embed_link_open(options: RenderOptions) -> Callable[[RenderFn | None], RenderFn]:  # noqa: ARG001
    """Build the ``link_open`` decorator; it wraps whatever renderer came before."""

    def decorate(previous: RenderFn | None) -> RenderFn:
        def render(self: Any, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
            ensure_embed_class(tokens[idx])
            if previous is not None:
                return previous(tokens, idx, options, env)
            return self.renderToken(tokens, idx, options, env)

        return render

    return decorate
