"""Config API module."""

from .LogConfig import LogConfig
from .ObmdConfig import ObmdConfig
from .RenderConfig import RenderConfig

__all__ = ["LogConfig", "ObmdConfig", "RenderConfig"]
