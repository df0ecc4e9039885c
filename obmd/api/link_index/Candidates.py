"""Candidate link targets (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidates:
    """An index key shared by several targets (same-basename notes).

    Order matters: the first url is the default pick when nothing else
    disambiguates.
    """

    urls: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.urls:
            raise ValueError("Candidates requires at least one url")
        object.__setattr__(self, "urls", tuple(self.urls))

    @property
    def is_ambiguous(self) -> bool:
        return len(self.urls) > 1
