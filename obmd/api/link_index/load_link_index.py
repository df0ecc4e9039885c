"""Link index file loader (UNO: single function)."""

import json
from pathlib import Path

from .LinkIndex import LinkIndex


def load_link_index(path: str | Path) -> LinkIndex:
    """Read a wire-form JSON index ``{key: url | [url, ...]}`` from disk.

    Raises:
        ValueError: If the file is missing, not JSON, or not a JSON object of
            strings and string lists
    """
    index_path = Path(path).expanduser()
    if not index_path.exists():
        raise ValueError(f"Link index not found at {index_path}")

    try:
        with index_path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in link index {index_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Link index {index_path} must contain a JSON object")
    try:
        return LinkIndex.from_mapping(raw)
    except TypeError as e:
        raise ValueError(f"Invalid link index {index_path}: {e}") from e
