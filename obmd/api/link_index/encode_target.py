"""Target url encoding (UNO: single function)."""

import re
from urllib.parse import quote

from .._constants import DEFAULT_BASE_PATH

SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*://)(.*)$", re.DOTALL)

# Characters encodeURIComponent leaves alone on top of quote()'s own set
_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode a single url component (UTF-8, '/' included)."""
    return quote(value, safe=_COMPONENT_SAFE)


def encode_target(target: str) -> str:
    """Percent-encode every '/'-delimited segment of a target.

    A ``scheme://`` prefix is kept verbatim and only the remainder is
    encoded. Anything else becomes a root-relative path: empty segments are
    dropped and a single leading '/' is added.

    >>> encode_target("/Notes/C++ tips.md")
    '/Notes/C%2B%2B%20tips.md'
    """
    match = SCHEME_PATTERN.match(target)
    if match:
        scheme, rest = match.groups()
        return scheme + "/".join(encode_component(s) for s in rest.split("/"))
    segments = [encode_component(s) for s in target.split("/") if s]
    return "/" + "/".join(segments)


def normalize_base_path(base_path: str | None) -> str:
    """Return the attachment root without a trailing '/'."""
    base = base_path or DEFAULT_BASE_PATH
    return base[:-1] if base.endswith("/") else base


def fallback_target(path: str, base_path: str | None) -> str:
    """Target used when a path is not in the index: ``{base}/{path}``."""
    return f"{normalize_base_path(base_path)}/{path}"
