"""WikiLinkInfo model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikiLinkInfo:
    """Structured fields parsed from the payload of a [[...]] span."""

    path: str
    display: str
    anchor: str | None = None
    size: str | None = None
