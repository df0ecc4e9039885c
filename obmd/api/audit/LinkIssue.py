"""LinkIssue model (UNO: single model)."""

from dataclasses import dataclass
from typing import Literal

IssueKind = Literal["unresolved", "ambiguous"]


@dataclass(frozen=True)
class LinkIssue:
    """A wikilink or embed that did not resolve cleanly.

    ``line`` and ``column`` are 1-based and point at the opening delimiter.
    ``candidates`` lists the targets an ambiguous reference chose from;
    ``suggestions`` lists same-named targets for an unresolved one.
    """

    kind: IssueKind
    line: int
    column: int
    source: str
    path: str
    is_embed: bool = False
    resolved: str = ""
    candidates: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        if self.kind == "ambiguous":
            return f"{self.line}:{self.column} {self.source} is ambiguous, using {self.resolved}"
        hint = f" (did you mean {', '.join(self.suggestions)}?)" if self.suggestions else ""
        return f"{self.line}:{self.column} {self.source} does not resolve{hint}"

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind,
            "line": self.line,
            "column": self.column,
            "source": self.source,
            "path": self.path,
            "is_embed": self.is_embed,
            "resolved": self.resolved,
            "candidates": list(self.candidates),
            "suggestions": list(self.suggestions),
        }
