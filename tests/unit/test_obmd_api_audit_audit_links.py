"""Unit tests for obmd.api.audit.audit_links module."""

import logging

from obmd.api.audit import LinkIssue, audit_links


class TestAuditLinks:
    def test_clean_document(self, wire_index):
        assert audit_links("[[home]] ![[diagram.png]] [[dev]]", wire_index) == []

    def test_unresolved_with_position(self, wire_index):
        issues = audit_links("intro\nsee [[missing]]", wire_index)
        assert issues == [
            LinkIssue(kind="unresolved", line=2, column=5, source="[[missing]]", path="missing"),
        ]

    def test_unresolved_suggestions(self, wire_index):
        (issue,) = audit_links("[[Guide#Setup|the guide]]", wire_index)
        assert issue.kind == "unresolved"
        assert issue.path == "Guide"
        assert issue.suggestions == ("/docs/guide",)
        assert "did you mean /docs/guide?" in issue.message

    def test_ambiguous(self, wire_index):
        (issue,) = audit_links("x ![[a]]", wire_index)
        assert issue.kind == "ambiguous"
        assert issue.is_embed
        assert issue.column == 3
        assert issue.resolved == "/a"
        assert issue.candidates == ("/a", "/test/a")

    def test_skips_blank_and_same_page(self, wire_index):
        assert audit_links("[[ ]] [[#top]] ![[ ]]", wire_index) == []

    def test_unresolved_embed(self):
        (issue,) = audit_links("![[photo.png]]", {})
        assert issue.is_embed
        assert issue.source == "![[photo.png]]"

    def test_logs_each_issue(self, wire_index, caplog):
        with caplog.at_level(logging.WARNING, logger="obmd.audit"):
            audit_links("[[missing]]\n[[a]]", wire_index)
        messages = [r.getMessage() for r in caplog.records if r.name == "obmd.audit"]
        assert len(messages) == 2
        assert "[[missing]] does not resolve" in messages[0]
        assert "[[a]] is ambiguous, using /a" in messages[1]


def test_issue_to_dict():
    issue = LinkIssue(kind="ambiguous", line=1, column=1, source="[[a]]", path="a", resolved="/a", candidates=("/a",))
    assert issue.to_dict() == {
        "kind": "ambiguous",
        "line": 1,
        "column": 1,
        "source": "[[a]]",
        "path": "a",
        "is_embed": False,
        "resolved": "/a",
        "candidates": ["/a"],
        "suggestions": [],
    }
