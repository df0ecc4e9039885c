"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: full pipeline and CLI tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def obmd_home(tmp_path: Path, monkeypatch) -> Path:
    """Point OBMD_HOME at an empty directory so no user config leaks in."""
    home = tmp_path / ".obmd"
    monkeypatch.setenv("OBMD_HOME", str(home))
    return home


# =============================================================================
# Link Index Helpers
# =============================================================================


@pytest.fixture
def wire_index() -> dict:
    """A small wire-form index covering every resolution branch."""
    return {
        "home": "/docs/home",
        "a": ["/a", "/test/a"],
        "guide": "/docs/guide",
        "diagram": "/assets/diagram.png",
        "Notes/dev": "/Notes/dev",
        "dev": "/Notes/dev",
    }


@pytest.fixture
def index_file(tmp_path: Path, wire_index: dict) -> Path:
    """The wire index written to a JSON file."""
    path = tmp_path / "index.json"
    path.write_text(json.dumps(wire_index), encoding="utf-8")
    return path


@pytest.fixture
def note_file(tmp_path: Path) -> Path:
    """A note exercising links, embeds and tags."""
    path = tmp_path / "note.md"
    path.write_text(
        "# Note\n\nSee [[home|首页]] and [[missing]].\n\n![[diagram.png|600]]\n\n#project #status/draft\n",
        encoding="utf-8",
    )
    return path


# =============================================================================
# Test Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    """Return the helper that drives a cmd function through all its stages."""
    return _run_cmd
