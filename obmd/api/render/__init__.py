"""Rendering pipeline domain."""

from .create_markdown import create_markdown, render
from .embed_link_open import embed_link_open, ensure_embed_class
from .image_size_rule import apply_image_size, image_size_rule
from .install import install
from .pipeline import PIPELINE
from .preprocess_rule import preprocess_rule
from .RenderOptions import RenderOptions
from .Rule import Rule
from .Stage import Stage
from .tag_rule import TAG_PATTERN, split_tags, tag_rule
from .wikilink_rule import build_href, wikilink_rule

__all__ = [
    "PIPELINE",
    "TAG_PATTERN",
    "RenderOptions",
    "Rule",
    "Stage",
    "apply_image_size",
    "build_href",
    "create_markdown",
    "embed_link_open",
    "ensure_embed_class",
    "image_size_rule",
    "install",
    "preprocess_rule",
    "render",
    "split_tags",
    "tag_rule",
    "wikilink_rule",
]
