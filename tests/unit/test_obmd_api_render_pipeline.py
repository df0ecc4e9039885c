"""Unit tests for the obmd.api.render pipeline, install and create_markdown."""

from dataclasses import FrozenInstanceError

import pytest
from markdown_it import MarkdownIt

from obmd.api.link_index import LinkIndex
from obmd.api.render import PIPELINE, RenderOptions, Rule, Stage, create_markdown, install, render


class TestPipeline:
    def test_fixed_order(self):
        assert [rule.name for rule in PIPELINE] == [
            "obsidian_preprocessor",
            "obsidian_wikilink",
            "obsidian_tags",
            "obsidian_img_size",
            "obsidian_embed",
        ]
        assert [rule.stage for rule in PIPELINE] == [
            Stage.PRE_TOKENIZE,
            Stage.INLINE,
            Stage.POST_INLINE,
            Stage.POST_INLINE,
            Stage.RENDER,
        ]

    def test_install_positions(self):
        md = MarkdownIt("commonmark")
        install(md)
        core = md.core.ruler.get_all_rules()
        assert core.index("obsidian_preprocessor") == core.index("normalize") - 1
        assert core.index("obsidian_tags") == core.index("inline") + 1
        assert core.index("obsidian_img_size") == core.index("obsidian_tags") + 1
        inline = md.inline.ruler.get_all_rules()
        assert inline.index("obsidian_wikilink") == inline.index("link") - 1
        assert "link_open" in md.renderer.rules

    def test_custom_rule_apply(self):
        seen = []

        def factory(options):
            def rule(state):
                seen.append(options.base_path)

            return rule

        md = MarkdownIt("commonmark")
        Rule("probe", Stage.POST_INLINE, "inline", factory).apply(md, RenderOptions(base_path="/p"))
        md.render("x")
        assert seen == ["/p"]


class TestInstall:
    def test_overrides(self, wire_index):
        md = MarkdownIt("commonmark")
        install(md, link_index=wire_index, base_path="/files")
        html = md.render("[[home]] ![[doc.pdf]]")
        assert 'href="/docs/home"' in html
        assert "/files/doc.pdf" in html

    def test_options_with_overrides(self, wire_index):
        options = RenderOptions.build(link_index=wire_index)
        html = render("[[missing]]", options, unresolved_href="base_path")
        assert '<a href="/attachments/missing">missing</a>' in html

    def test_invalid_mode(self):
        with pytest.raises(ValueError, match="unresolved_href"):
            install(MarkdownIt("commonmark"), unresolved_href="nowhere")

    def test_engines_are_independent(self, wire_index):
        with_index = create_markdown(link_index=wire_index)
        without = create_markdown()
        assert 'href="/docs/home"' in with_index.render("[[home]]")
        assert 'href=""' in without.render("[[home]]")
        assert 'href="/docs/home"' in with_index.render("[[home]]")


class TestCreateMarkdown:
    def test_table(self):
        assert "<table>" in render("| a | b |\n|---|---|\n| 1 | 2 |\n")

    def test_strikethrough(self):
        assert "<s>gone</s>" in render("~~gone~~")

    def test_tasklist(self):
        html = render("- [ ] open\n- [x] done\n")
        assert 'type="checkbox"' in html
        assert "checked" in html

    def test_full_document(self, wire_index):
        html = render(
            "# Title\n\nSee [[home|首页]] #project\n\n![[diagram.png|600]]\n\n![[doc.pdf]]\n",
            link_index=wire_index,
        )
        assert "<h1>Title</h1>" in html
        assert '<a href="/docs/home">首页</a>' in html
        assert '<span class="obsidian-tag" data-tag="project">#project</span>' in html
        assert '<img src="/assets/diagram.png" alt="diagram.png" class="obsidian-embed" width="600"' in html
        assert '<a href="/attachments/doc.pdf" class="obsidian-embed-file">doc.pdf</a>' in html


class TestRenderOptions:
    def test_defaults(self):
        options = RenderOptions()
        assert options.base_path == "/attachments"
        assert options.unresolved_href == "empty"
        assert len(options.link_index) == 0

    def test_wire_index_is_coerced(self, wire_index):
        assert isinstance(RenderOptions(link_index=wire_index).link_index, LinkIndex)  # type: ignore[arg-type]

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            RenderOptions().base_path = "/x"  # type: ignore[misc]

    def test_build_empty_base_path_means_default(self):
        assert RenderOptions.build(base_path="").base_path == "/attachments"

    def test_build_without_changes_returns_same(self):
        options = RenderOptions(base_path="/x")
        assert RenderOptions.build(options) is options
