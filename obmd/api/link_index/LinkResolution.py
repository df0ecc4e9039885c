"""LinkResolution model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkResolution:
    """Outcome of looking a path up in a LinkIndex.

    ``resolved`` falls back to the requested path when nothing matched, so
    callers can always build a value from it. ``candidates`` is empty exactly
    when no index entry matched.
    """

    resolved: str
    candidates: tuple[str, ...] = ()
    is_ambiguous: bool = False

    @property
    def matched(self) -> bool:
        return bool(self.candidates)

    def to_dict(self) -> dict[str, object]:
        return {
            "resolved": self.resolved,
            "candidates": list(self.candidates),
            "is_ambiguous": self.is_ambiguous,
        }
