"""Link index and resolution domain."""

from .build_link_index import build_link_index
from .Candidates import Candidates
from .encode_target import encode_component, encode_target, fallback_target, normalize_base_path
from .find_similar import find_similar
from .LinkIndex import LinkIndex, LinkTarget, RawLinkIndex
from .LinkResolution import LinkResolution
from .load_link_index import load_link_index
from .resolve_link_path import resolve_link_path
from .Single import Single

__all__ = [
    "Candidates",
    "LinkIndex",
    "LinkResolution",
    "LinkTarget",
    "RawLinkIndex",
    "Single",
    "build_link_index",
    "encode_component",
    "encode_target",
    "fallback_target",
    "find_similar",
    "load_link_index",
    "normalize_base_path",
    "resolve_link_path",
]
