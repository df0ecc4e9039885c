"""WikiSpan model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikiSpan:
    """A terminated [[...]] or ![[...]] occurrence in source text.

    ``start`` points at '!' for embeds and at the first '[' otherwise;
    ``end`` is exclusive and points past the closing ']]'.
    """

    is_embed: bool
    start: int
    end: int
    raw: str

    @property
    def source(self) -> str:
        prefix = "![[" if self.is_embed else "[["
        return f"{prefix}{self.raw}]]"
