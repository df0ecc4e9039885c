"""Render configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .._constants import DEFAULT_BASE_PATH
from ..render.RenderOptions import RenderOptions


class RenderConfig(BaseModel):
    """Defaults for rendering documents."""

    model_config = ConfigDict(extra="forbid")

    link_index: dict[str, str | list[str]] = Field(default_factory=dict, description="Wire-form link index")
    base_path: str = Field(DEFAULT_BASE_PATH, description="Attachment root for unresolved embeds")
    current_path: str | None = Field(None, description="Path of the document being rendered")
    unresolved_href: Literal["empty", "base_path"] = Field(
        "empty", description="Href of wikilinks missing from the index"
    )

    def to_options(self) -> RenderOptions:
        """Convert to the immutable options consumed by the pipeline."""
        return RenderOptions.build(
            link_index=self.link_index,
            base_path=self.base_path,
            current_path=self.current_path,
            unresolved_href=self.unresolved_href,
        )
