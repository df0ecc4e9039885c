"""Core rule wrapping inline #tags into span tokens.

Supported: ``#tag``, ``#中文标签``, ``#nested/tag``, ``#my-tag``, ``#my_tag``
and emoji. The '#' must start a text leaf or follow whitespace.
"""

from collections.abc import Callable

import regex
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from .._constants import TAG_CLASS
from .RenderOptions import RenderOptions

# Letters of any script (with combining marks), digits, "_", "-", "/",
# pictographs, plus zero-width joiner and emoji variation selector
TAG_BODY = r"\p{L}\p{M}\p{N}_\-/\p{Extended_Pictographic}\p{Emoji_Presentation}" + "\u200d\ufe0f"
TAG_PATTERN = regex.compile(rf"(^|\s)#([{TAG_BODY}]+)")

LINE_BREAKS = {"softbreak", "hardbreak"}


def _starts_at_boundary(children: list[Token], idx: int) -> bool:
    """Whether the start of ``children[idx]`` counts as start-of-line/whitespace.

    Markup open/close tokens (``**``, ``*``, ``[``) start a new text leaf, so
    ``**#tag**`` is a tag. Adjacent text must end in whitespace.
    """
    if idx == 0:
        return True
    previous = children[idx - 1]
    if previous.type in LINE_BREAKS or previous.nesting != 0:
        return True
    return previous.type == "text" and previous.content[-1:].isspace()


def split_tags(text: str, at_boundary: bool = True, level: int = 0) -> list[Token] | None:
    """Split ``text`` into text and tag tokens, or None if it holds no tag.

    Args:
        text: Content of one text token
        at_boundary: Whether a tag may start at offset 0
        level: Nesting level of the token being replaced

    Returns:
        Replacement tokens, or None when nothing matched
    """
    tokens: list[Token] = []
    last = 0
    for match in TAG_PATTERN.finditer(text):
        prefix, body = match.group(1), match.group(2)
        if not prefix and not at_boundary:
            continue
        head = text[last : match.start() + len(prefix)]
        if head:
            tokens.append(Token("text", "", 0, content=head, level=level))
        tokens.append(
            Token("span_open", "span", 1, attrs={"class": TAG_CLASS, "data-tag": body}, level=level)
        )
        tokens.append(Token("text", "", 0, content=f"#{body}", level=level + 1))
        tokens.append(Token("span_close", "span", -1, level=level))
        last = match.end()

    if not tokens:
        return None
    if last < len(text):
        tokens.append(Token("text", "", 0, content=text[last:], level=level))
    return tokens


def tag_rule(options: RenderOptions) -> Callable[[StateCore], None]:  # noqa: ARG001
    """Build the core rule; register it after markdown-it's ``inline`` rule."""

    def rule(state: StateCore) -> None:
        for block_token in state.tokens:
            if block_token.type != "inline" or not block_token.children:
                continue

            children = block_token.children
            new_children: list[Token] = []
            changed = False
            for idx, child in enumerate(children):
                replacement = None
                if child.type == "text":
                    replacement = split_tags(child.content, _starts_at_boundary(children, idx), child.level)
                if replacement is None:
                    new_children.append(child)
                else:
                    new_children.extend(replacement)
                    changed = True

            if changed:
                block_token.children = new_children

    return rule
