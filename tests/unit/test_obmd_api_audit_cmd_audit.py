"""Unit tests for obmd.api.audit.cmd_audit module."""

from obmd.api.audit.cmd_audit import cmd_audit


def test_unresolved_fails(run_cmd, note_file, index_file):
    result = run_cmd(cmd_audit, str(note_file), index=str(index_file))
    assert not result.success
    assert result.output["count"] == 1
    issue = result.output["issues"][0]
    assert issue["kind"] == "unresolved"
    assert issue["line"] == 3
    assert "[[missing]]" in result.output["errors"][0]


def test_ambiguous_only_succeeds(run_cmd, tmp_path, index_file):
    note = tmp_path / "amb.md"
    note.write_text("[[a]] and [[home]]\n", encoding="utf-8")
    result = run_cmd(cmd_audit, str(note), index=str(index_file))
    assert result.success
    assert result.output["errors"] == []
    assert len(result.output["warnings"]) == 1
    assert result.result == "0 unresolved, 1 ambiguous in amb.md"


def test_missing_file(run_cmd, tmp_path):
    result = run_cmd(cmd_audit, str(tmp_path / "nope.md"))
    assert not result.success
    assert result.output["issues"] == []
