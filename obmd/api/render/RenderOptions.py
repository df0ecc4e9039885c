"""Render options shared by every pipeline rule (UNO: single model)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .._constants import DEFAULT_BASE_PATH, UNRESOLVED_HREF_BASE_PATH, UNRESOLVED_HREF_EMPTY
from ..link_index import LinkIndex, RawLinkIndex


@dataclass(frozen=True)
class RenderOptions:
    """Immutable options forwarded to every rule by install().

    unresolved_href selects what a [[link]] missing from the index points
    to: ``"empty"`` renders ``href=""``, ``"base_path"`` points into the
    attachment root like embeds do.
    """

    link_index: LinkIndex = field(default_factory=LinkIndex)
    base_path: str = DEFAULT_BASE_PATH
    current_path: str | None = None
    unresolved_href: str = UNRESOLVED_HREF_EMPTY

    def __post_init__(self) -> None:
        if self.unresolved_href not in (UNRESOLVED_HREF_EMPTY, UNRESOLVED_HREF_BASE_PATH):
            raise ValueError(f"Invalid unresolved_href: {self.unresolved_href!r}")
        object.__setattr__(self, "link_index", LinkIndex.from_mapping(self.link_index))

    @classmethod
    def build(
        cls,
        options: RenderOptions | None = None,
        link_index: LinkIndex | RawLinkIndex | None = None,
        **overrides: Any,
    ) -> RenderOptions:
        """Return ``options`` (or defaults) with the given fields replaced."""
        base = options or cls()
        if link_index is not None:
            overrides["link_index"] = LinkIndex.from_mapping(link_index)
        if "base_path" in overrides and not overrides["base_path"]:
            overrides["base_path"] = DEFAULT_BASE_PATH
        return replace(base, **overrides) if overrides else base
