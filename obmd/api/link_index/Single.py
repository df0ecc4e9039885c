"""Single link target (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Single:
    """An index key that maps to exactly one target url."""

    url: str

    @property
    def urls(self) -> tuple[str, ...]:
        return (self.url,)

    @property
    def is_ambiguous(self) -> bool:
        return False
