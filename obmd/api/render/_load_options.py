"""Options for CLI commands: config file, then command-line overrides."""

from pathlib import Path
from typing import Any

from ...utils.logger import configure_logging
from ..config.ObmdConfig import ObmdConfig
from ..link_index.load_link_index import load_link_index
from .RenderOptions import RenderOptions


def _load_options(
    config_path: str | Path | None = None,
    index_path: str | Path | None = None,
    base_path: str | None = None,
) -> RenderOptions:
    """Load config (configuring logging from it) and apply overrides.

    Raises:
        ValueError: If the config or the index file cannot be loaded
    """
    config = ObmdConfig.load(config_path)
    configure_logging(config.log.level, config.log.file)

    overrides: dict[str, Any] = {}
    if index_path is not None:
        overrides["link_index"] = load_link_index(index_path)
    if base_path is not None:
        overrides["base_path"] = base_path
    return RenderOptions.build(config.render.to_options(), **overrides)
