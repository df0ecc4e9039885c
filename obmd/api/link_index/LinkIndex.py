"""Link index (UNO: single class)."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Union

from .Candidates import Candidates
from .Single import Single

LinkTarget = Union[Single, Candidates]
RawLinkIndex = Mapping[str, Union[str, Sequence[str], Single, Candidates]]


class LinkIndex(Mapping[str, LinkTarget]):
    """Read-only mapping from a title or relative path to its target(s).

    Built once per site generation by the caller; never mutated while a
    document is being rendered.
    """

    def __init__(self, entries: Mapping[str, LinkTarget] | None = None):
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_mapping(cls, raw: RawLinkIndex | LinkIndex | None) -> LinkIndex:
        """Coerce the wire form ``{key: url | [url, ...]}`` into an index.

        Empty strings and empty lists are dropped, they never match.

        Raises:
            TypeError: If a value is neither a string, a list of strings nor a LinkTarget
        """
        if isinstance(raw, LinkIndex):
            return raw
        entries: dict[str, LinkTarget] = {}
        for key, value in (raw or {}).items():
            if isinstance(value, (Single, Candidates)):
                entries[key] = value
            elif isinstance(value, str):
                if value:
                    entries[key] = Single(value)
            elif isinstance(value, Sequence):
                urls = tuple(v for v in value if isinstance(v, str) and v)
                if urls:
                    entries[key] = Candidates(urls)
            else:
                raise TypeError(f"Unsupported link index value for {key!r}: {type(value).__name__}")
        return cls(entries)

    def to_mapping(self) -> dict[str, str | list[str]]:
        """Convert back to the JSON wire form."""
        out: dict[str, str | list[str]] = {}
        for key, target in self._entries.items():
            out[key] = target.url if isinstance(target, Single) else list(target.urls)
        return out

    def __getitem__(self, key: str) -> LinkTarget:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LinkIndex({dict(self._entries)!r})"
