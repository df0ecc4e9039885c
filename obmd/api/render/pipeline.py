"""Ordered rule chain installed by install()."""

from .embed_link_open import embed_link_open
from .image_size_rule import image_size_rule
from .preprocess_rule import preprocess_rule
from .Rule import Rule
from .Stage import Stage
from .tag_rule import tag_rule
from .wikilink_rule import wikilink_rule

PIPELINE: tuple[Rule, ...] = (
    Rule("obsidian_preprocessor", Stage.PRE_TOKENIZE, "normalize", preprocess_rule, before=True),
    Rule("obsidian_wikilink", Stage.INLINE, "link", wikilink_rule, before=True),
    Rule("obsidian_tags", Stage.POST_INLINE, "inline", tag_rule),
    # anchored on the tag rule so sizes are read after tags are split out
    Rule("obsidian_img_size", Stage.POST_INLINE, "obsidian_tags", image_size_rule),
    Rule("obsidian_embed", Stage.RENDER, "link_open", embed_link_open),
)
