"""Core rule applying ``![alt|WIDTHxHEIGHT](url)`` sizes to image tokens."""

import re
from collections.abc import Callable

from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from .RenderOptions import RenderOptions

ALT_SIZE_PATTERN = re.compile(r"^(.*?)\|(\d+)x(\d+)$", re.DOTALL)


def apply_image_size(token: Token) -> bool:
    """Move a ``|WxH`` alt suffix into width/height attributes.

    A zero dimension is left unset. Returns whether the token changed.
    """
    match = ALT_SIZE_PATTERN.match(token.content)
    if not match:
        return False

    alt, width, height = match.groups()
    token.content = alt
    if token.children:
        # alt is rendered from the children; the suffix sits in the last text child
        last = token.children[-1]
        if last.type == "text":
            suffix = f"|{width}x{height}"
            last.content = last.content[: -len(suffix)] if last.content.endswith(suffix) else last.content
    if int(width):
        token.attrSet("width", width)
    if int(height):
        token.attrSet("height", height)
    return True


def image_size_rule(options: RenderOptions) -> Callable[[StateCore], None]:  # noqa: ARG001
    """Build the core rule; register it after the tag rule."""

    def rule(state: StateCore) -> None:
        for block_token in state.tokens:
            if block_token.type != "inline" or not block_token.children:
                continue
            for child in block_token.children:
                if child.type == "image":
                    apply_image_size(child)

    return rule
