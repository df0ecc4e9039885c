"""Stage enum for pipeline rule registration."""

from enum import Enum


class Stage(str, Enum):
    PRE_TOKENIZE = "pre_tokenize"  # core rule before "normalize", rewrites state.src
    INLINE = "inline"  # inline rule, emits tokens while scanning
    POST_INLINE = "post_inline"  # core rule after "inline", edits token children
    RENDER = "render"  # renderer override for one token type
