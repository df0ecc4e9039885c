"""Source preprocessing domain."""

from .iter_wiki_spans import iter_wiki_spans
from .preprocess import preprocess, resolve_embed
from .WikiSpan import WikiSpan

__all__ = ["WikiSpan", "iter_wiki_spans", "preprocess", "resolve_embed"]
