"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkResolveOutput(BaseOutputSchema):
    path: str = Field(..., description="Requested link path")
    resolved: str = Field(..., description="Chosen target, the requested path when nothing matched")
    matched: bool = Field(..., description="Whether an index entry matched")
    is_ambiguous: bool = Field(..., description="Whether several targets shared the name")
    candidates: list[str] = Field(..., description="Targets the resolution chose from")
    similar: list[str] = Field(..., description="Targets with the same basename, ignoring case and extension")


class LinkAuditOutput(BaseOutputSchema):
    path: str = Field(..., description="Audited markdown file")
    count: int = Field(..., description="Number of issues")
    issues: list[dict[str, Any]] = Field(..., description="Unresolved and ambiguous references")


class LinkIndexOutput(BaseOutputSchema):
    root: str = Field(..., description="Scanned directory")
    files: int = Field(..., description="Number of files indexed")
    output_path: str = Field(..., description="File the index was written to, empty string if none")
    index: dict[str, Any] = Field(..., description="Wire-form index {key: url | [url, ...]}")


register_output_schema("link_index", "resolve", LinkResolveOutput)
register_output_schema("audit", "audit", LinkAuditOutput)
register_output_schema("link_index", "index", LinkIndexOutput)
