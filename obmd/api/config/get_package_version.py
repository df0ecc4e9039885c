"""Package version lookup."""

from importlib import metadata as importlib_metadata

_VERSION_CACHE: str | None = None


def get_package_version() -> str:
    """Get obmd package version (cached)."""
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib_metadata.version("obmd")
        except importlib_metadata.PackageNotFoundError:
            _VERSION_CACHE = "unknown"
    return _VERSION_CACHE
