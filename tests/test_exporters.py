"""Tests for the Markdown and JSON exporters."""

from __future__ import annotations

import json

import pytest
from markdown_it import MarkdownIt

from docmark.core.document import Heading, Link, List, Paragraph, Root, Strong, Text
from docmark.exporters import ExporterRegistry, JSONExporter, MarkdownExporter
from docmark.exporters.markdown import escape_block_start, escape_text


def _root(*blocks) -> Root:
    return Root(children=list(blocks))


def _para(*runs) -> Paragraph:
    return Paragraph(children=list(runs))


class TestEscaping:
    """Tests for Markdown escaping helpers."""

    def test_inline_characters(self):
        assert escape_text("a*b_c [d] `e` \\") == "a\\*b\\_c \\[d\\] \\`e\\` \\\\"

    def test_plain_text_unchanged(self):
        assert escape_text("Plain text, 100% fine.") == "Plain text, 100% fine."

    def test_html_characters(self):
        assert escape_text("a <b> & c") == "a \\<b> \\& c"

    def test_block_start_drops_indentation(self):
        assert escape_block_start("    indented") == "indented"
        assert escape_block_start("\t  - dash") == "\\- dash"

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("# not a heading", "\\# not a heading"),
            ("> not a quote", "\\> not a quote"),
            ("- not a list", "\\- not a list"),
            ("+ not a list", "\\+ not a list"),
            ("1. not a list", "1\\. not a list"),
            ("12) not a list", "12\\) not a list"),
            ("-dash", "-dash"),
            ("2024 was good", "2024 was good"),
            ("3.5 percent", "3.5 percent"),
        ],
    )
    def test_block_start(self, line, expected):
        assert escape_block_start(line) == expected


class TestMarkdownExporter:
    """Tests for MarkdownExporter."""

    def test_empty_document(self):
        assert MarkdownExporter().render(_root()) == ""

    def test_headings(self):
        root = _root(Heading(depth=1, children=[Text("One")]), Heading(depth=3, children=[Text("Three")]))
        assert MarkdownExporter().render(root) == "# One\n\n### Three\n"

    def test_paragraph_with_strong_and_link(self):
        root = _root(
            _para(
                Text("See "),
                Strong(children=[Text("this")]),
                Text(" at "),
                Link(url="https://example.com", children=[Text("example")]),
            )
        )
        assert MarkdownExporter().render(root) == "See **this** at [example](https://example.com)\n"

    def test_link_with_spaces(self):
        root = _root(_para(Link(url="https://example.com/a b", children=[Text("x")])))
        assert MarkdownExporter().render(root) == "[x](<https://example.com/a b>)\n"

    def test_list(self):
        root = _root(List.from_paragraphs([_para(Text("one")), _para(Text("- two"))]))
        assert MarkdownExporter().render(root) == "- one\n- \\- two\n"

    def test_bullet_option(self):
        root = _root(List.from_paragraphs([_para(Text("one"))]))
        assert MarkdownExporter(bullet="*").render(root) == "* one\n"

    def test_rejects_unknown_bullet(self):
        with pytest.raises(ValueError):
            MarkdownExporter(bullet="#")

    def test_escapes_paragraph_start(self):
        root = _root(_para(Text("# literal")))
        assert MarkdownExporter().render(root) == "\\# literal\n"

    def test_export_fixes_extension(self, tmp_path):
        root = _root(_para(Text("hi")))
        path = MarkdownExporter().export(root, tmp_path / "out.txt")

        assert path == tmp_path / "out.md"
        assert path.read_text(encoding="utf-8") == "hi\n"


class TestJSONExporter:
    """Tests for JSONExporter."""

    def test_render(self):
        root = _root(Heading(depth=2, children=[Text("Title")]))
        data = json.loads(JSONExporter().render(root))

        assert data["type"] == "root"
        assert data["children"][0]["depth"] == 2

    def test_keeps_unicode(self):
        rendered = JSONExporter().render(_root(_para(Text("café"))))
        assert "café" in rendered

    def test_indent(self):
        rendered = JSONExporter(indent=4).render(_root())
        assert '\n    "type": "root"' in rendered

    def test_export(self, tmp_path):
        path = JSONExporter().export(_root(), tmp_path / "tree")
        assert path.suffix == ".json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"type": "root", "children": []}


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_available(self):
        assert {"markdown", "json"} <= set(ExporterRegistry.available_exporters())

    def test_options_are_passed(self):
        exporter = ExporterRegistry.get_exporter("markdown", bullet="+")
        assert isinstance(exporter, MarkdownExporter)
        assert exporter.bullet == "+"

    def test_unknown_format(self):
        assert ExporterRegistry.get_exporter("pdf") is None
        with pytest.raises(ValueError, match="Unknown export format: pdf"):
            ExporterRegistry.require_exporter("pdf")


class TestMarkdownParses:
    """Rendered Markdown parses back into the intended blocks."""

    def test_block_structure(self):
        root = _root(
            Heading(depth=1, children=[Text("Title")]),
            _para(Text("# not a heading")),
            List.from_paragraphs([_para(Text("one")), _para(Text("1. two"))]),
            Heading(depth=2, children=[Text("Section")]),
        )
        tokens = MarkdownIt("commonmark").parse(MarkdownExporter().render(root))
        opening = [(t.type, t.tag) for t in tokens if t.nesting == 1]

        assert opening == [
            ("heading_open", "h1"),
            ("paragraph_open", "p"),
            ("bullet_list_open", "ul"),
            ("list_item_open", "li"),
            ("paragraph_open", "p"),
            ("list_item_open", "li"),
            ("paragraph_open", "p"),
            ("heading_open", "h2"),
        ]

    def test_indented_bold_is_not_code(self):
        root = _root(
            _para(Text("    "), Strong(children=[Text("Note")]), Text(" here")),
            List.from_paragraphs([_para(Text("\t"), Strong(children=[Text("item")]))]),
            Heading(depth=2, children=[Text("  Section")]),
        )
        rendered = MarkdownExporter().render(root)
        tokens = MarkdownIt("commonmark").parse(rendered)

        assert "code_block" not in {t.type for t in tokens}
        assert rendered.startswith("**Note** here\n")
        assert "- **item**\n" in rendered
        assert "## Section\n" in rendered

    def test_html_is_text(self):
        root = _root(_para(Text("use <b>tags</b> & &amp; here")))
        md = MarkdownIt("commonmark")
        rendered = MarkdownExporter().render(root)
        inline = [t for t in md.parse(rendered) if t.type == "inline"][0]

        assert all(child.type != "html_inline" for child in inline.children)
        assert md.render(rendered) == "<p>use &lt;b&gt;tags&lt;/b&gt; &amp; &amp;amp; here</p>\n"
