"""Unit tests for obmd.api.link_index.LinkIndex module."""

import pytest

from obmd.api.link_index import Candidates, LinkIndex, Single


class TestLinkIndexFromMapping:
    """LinkIndex.from_mapping() coerces the wire form."""

    def test_string_becomes_single(self):
        index = LinkIndex.from_mapping({"home": "/docs/home"})
        assert index["home"] == Single("/docs/home")

    def test_list_becomes_candidates(self):
        index = LinkIndex.from_mapping({"a": ["/a", "/test/a"]})
        assert index["a"] == Candidates(("/a", "/test/a"))
        assert index["a"].is_ambiguous

    def test_single_element_list_is_not_ambiguous(self):
        index = LinkIndex.from_mapping({"a": ["/a"]})
        assert index["a"].urls == ("/a",)
        assert not index["a"].is_ambiguous

    def test_empty_values_are_dropped(self):
        index = LinkIndex.from_mapping({"a": "", "b": [], "c": ["", "/c"]})
        assert "a" not in index
        assert "b" not in index
        assert index["c"].urls == ("/c",)

    def test_targets_pass_through(self):
        target = Single("/x")
        assert LinkIndex.from_mapping({"x": target})["x"] is target

    def test_index_passes_through(self):
        index = LinkIndex.from_mapping({"x": "/x"})
        assert LinkIndex.from_mapping(index) is index

    def test_none_is_empty(self):
        assert len(LinkIndex.from_mapping(None)) == 0

    def test_unsupported_value_raises(self):
        with pytest.raises(TypeError, match="'bad'"):
            LinkIndex.from_mapping({"bad": 42})


class TestLinkIndexMapping:
    """LinkIndex behaves as a read-only mapping."""

    def test_to_mapping(self, wire_index):
        assert LinkIndex.from_mapping(wire_index).to_mapping() == wire_index

    def test_read_only(self):
        index = LinkIndex.from_mapping({"x": "/x"})
        with pytest.raises(TypeError):
            index["y"] = Single("/y")  # type: ignore[index]

    def test_source_mapping_changes_do_not_leak(self):
        entries = {"x": Single("/x")}
        index = LinkIndex(entries)
        entries["y"] = Single("/y")
        assert "y" not in index

    def test_len_and_iter(self, wire_index):
        index = LinkIndex.from_mapping(wire_index)
        assert len(index) == len(wire_index)
        assert set(index) == set(wire_index)


def test_candidates_require_a_url():
    with pytest.raises(ValueError):
        Candidates(())


def test_candidates_coerce_list_to_tuple():
    assert Candidates(["/a", "/b"]).urls == ("/a", "/b")  # type: ignore[arg-type]
