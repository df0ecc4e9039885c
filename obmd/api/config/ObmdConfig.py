"""Top-level obmd configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .LogConfig import LogConfig
from .RenderConfig import RenderConfig


class ObmdConfig(BaseModel):
    """Top-level configuration; every section is optional."""

    model_config = ConfigDict(extra="forbid")

    render: RenderConfig = Field(default_factory=RenderConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get obmd home directory based on OBMD_HOME or default to ~/.obmd."""
        home_env = os.environ.get("OBMD_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".obmd"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: str | Path | None = None) -> "ObmdConfig":
        """Load and validate config from file.

        An explicit ``path`` must exist. Without one the default location is
        used, and a missing file there means all defaults.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if path is None:
            config_path = cls.get_config_path()
            if not config_path.exists():
                return cls()
        else:
            config_path = Path(path).expanduser()
            if not config_path.exists():
                raise ValueError(f"Configuration file not found at {config_path}")

        try:
            with config_path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file {config_path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert ObmdConfig instance to a dictionary for serialization."""
        return {
            "render": self.render.model_dump(),
            "log": self.log.model_dump(),
        }
