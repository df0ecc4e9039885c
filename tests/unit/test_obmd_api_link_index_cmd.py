"""Unit tests for obmd.api.link_index.cmd_resolve and cmd_index modules."""

import json

from obmd.api.link_index.cmd_index import cmd_index
from obmd.api.link_index.cmd_resolve import cmd_resolve


class TestCmdResolve:
    def test_resolved(self, run_cmd, index_file):
        result = run_cmd(cmd_resolve, "test/a", index=str(index_file))
        assert result.success
        assert result.output["resolved"] == "/test/a"
        assert result.output["is_ambiguous"] is True
        assert result.output["candidates"] == ["/a", "/test/a"]
        assert result.output["warnings"] == ["2 targets share this name"]

    def test_unresolved_lists_similar(self, run_cmd, index_file):
        result = run_cmd(cmd_resolve, "Guide", index=str(index_file))
        assert not result.success
        assert result.output["matched"] is False
        assert result.output["resolved"] == "Guide"
        assert result.output["similar"] == ["/docs/guide"]

    def test_missing_index(self, run_cmd, tmp_path):
        result = run_cmd(cmd_resolve, "a", index=str(tmp_path / "none.json"))
        assert not result.success
        assert "not found" in result.output["errors"][0]


class TestCmdIndex:
    def _corpus(self, root):
        (root / "Notes").mkdir(parents=True)
        (root / "Notes" / "dev.md").write_text("x")
        (root / "a.md").write_text("x")
        (root / "test").mkdir()
        (root / "test" / "a.md").write_text("x")
        (root / "img.png").write_bytes(b"")
        (root / ".obsidian").mkdir()
        (root / ".obsidian" / "app.json").write_text("{}")
        return root

    def test_index(self, run_cmd, tmp_path):
        root = self._corpus(tmp_path / "vault")
        result = run_cmd(cmd_index, str(root))
        assert result.success
        assert result.output["files"] == 4
        index = result.output["index"]
        assert index["dev"] == "/Notes/dev"
        assert index["a"] == ["/a", "/test/a"]
        assert index["img.png"] == "/img.png"
        assert "app.json" not in index
        assert result.output["warnings"] == ["Shared name: a"]

    def test_index_to_file(self, run_cmd, tmp_path):
        root = self._corpus(tmp_path / "vault")
        out = tmp_path / "out" / "index.json"
        result = run_cmd(cmd_index, str(root), url_prefix="/site", output=str(out))
        assert result.success
        assert json.loads(out.read_text(encoding="utf-8"))["dev"] == "/site/Notes/dev"

    def test_missing_directory(self, run_cmd, tmp_path):
        result = run_cmd(cmd_index, str(tmp_path / "nope"))
        assert not result.success
        assert "Directory not found" in result.output["errors"][0]
