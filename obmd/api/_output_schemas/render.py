"""Output schemas for render commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RenderRenderOutput(BaseOutputSchema):
    """Output schema for the render command.

    Link problems found while rendering are reported as warnings.
    """

    path: str = Field(..., description="Rendered markdown file")
    output_path: str = Field(..., description="File the HTML was written to, empty string if none")
    html: str = Field(..., description="Rendered HTML, empty string on failure")


class RenderPreprocessOutput(BaseOutputSchema):
    """Output schema for the preprocess command."""

    path: str = Field(..., description="Preprocessed markdown file")
    markdown: str = Field(..., description="Markdown with embeds rewritten, empty string on failure")


register_output_schema("render", "render", RenderRenderOutput)
register_output_schema("render", "preprocess", RenderPreprocessOutput)
