"""Tests for the semantic tree data model."""

from __future__ import annotations

import pytest

from docmark.core.document import (
    Heading,
    Link,
    List,
    ListItem,
    Node,
    NodeType,
    Paragraph,
    ParagraphSignature,
    Root,
    RunSignature,
    Strong,
    Text,
    plain_text,
)


class TestSignatures:
    """Tests for formatting signatures."""

    def test_run_signature_defaults(self):
        signature = RunSignature()
        assert signature.font_size is None
        assert signature.is_bold is False
        assert signature.is_underlined is False

    def test_signatures_are_immutable(self):
        signature = ParagraphSignature(font_size=24)
        with pytest.raises(AttributeError):
            signature.font_size = 28  # type: ignore[misc]

    def test_cluster_key_ignores_id_and_style(self):
        a = ParagraphSignature(font_size=24, is_bold=True, paragraph_id="1A", paragraph_style="Normal")
        b = ParagraphSignature(font_size=24, is_bold=True, paragraph_id="2B", paragraph_style="Quote")
        assert a.cluster_key() == b.cluster_key() == (24, True, False, None)

    def test_paragraph_signature_to_dict(self):
        signature = ParagraphSignature(
            font_size=32, is_bold=True, justify_class="center", paragraph_style="Title"
        )
        assert signature.to_dict() == {
            "fontSize": 32,
            "isBold": True,
            "isUnderlined": False,
            "id": None,
            "justifyClass": "center",
            "paragraphStyle": "Title",
        }


class TestNodeInvariants:
    """Tests for constructor checks on composite nodes."""

    def test_strong_requires_children(self):
        with pytest.raises(ValueError):
            Strong(children=[])

    def test_heading_requires_children(self):
        with pytest.raises(ValueError):
            Heading(depth=1, children=[])

    @pytest.mark.parametrize("depth", [0, 7])
    def test_heading_depth_range(self, depth):
        with pytest.raises(ValueError):
            Heading(depth=depth, children=[Text("x")])

    def test_list_requires_items(self):
        with pytest.raises(ValueError):
            List(children=[])

    def test_list_item_holds_one_paragraph(self):
        with pytest.raises(ValueError):
            ListItem(children=[])

    def test_list_from_paragraphs(self):
        paragraphs = [Paragraph(children=[Text("a")]), Paragraph(children=[Text("b")])]
        node = List.from_paragraphs(paragraphs)
        assert len(node.children) == 2
        assert node.children[0].children[0] is paragraphs[0]
        assert node.children[1].children[0] is paragraphs[1]


class TestNodes:
    """Tests for node helpers and serialization."""

    def test_node_types(self):
        assert Text("x").type is NodeType.TEXT
        assert List.type.value == "list"
        assert ListItem.type.value == "listItem"

    def test_bold_flag_follows_signature(self):
        assert Text("x", signature=RunSignature(is_bold=True)).is_bold
        assert not Text("x").is_bold
        assert Link(url="u", children=[Text("u")], signature=RunSignature(is_bold=True)).is_bold

    def test_style_name(self):
        assert Paragraph(children=[Text("x")]).style_name is None
        paragraph = Paragraph(
            children=[Text("x")], signature=ParagraphSignature(paragraph_style="ListParagraph")
        )
        assert paragraph.style_name == "ListParagraph"

    def test_style_without_signature(self):
        paragraph = Paragraph(children=[Text("x")], style="Heading1")

        assert paragraph.style_name == "Heading1"
        assert paragraph.to_dict()["data"] == {"paragraphStyle": "Heading1"}

    def test_node_base_is_abstract(self):
        with pytest.raises(TypeError):
            Node()  # type: ignore[abstract]

    def test_plain_text(self):
        node = Paragraph(
            children=[
                Text("Hello "),
                Strong(children=[Text("bold")]),
                Text(" and "),
                Link(url="https://example.com", children=[Text("link")]),
            ]
        )
        assert plain_text(node) == "Hello bold and link"

    def test_to_dict_shape(self):
        root = Root(
            children=[
                Heading(depth=2, children=[Text("Title")]),
                List.from_paragraphs([Paragraph(children=[Strong(children=[Text("item")])])]),
            ]
        )
        data = root.to_dict()

        assert data["type"] == "root"
        heading, list_node = data["children"]
        assert heading == {"type": "heading", "depth": 2, "children": [{"type": "text", "value": "Title"}]}
        assert list_node["ordered"] is False
        item = list_node["children"][0]
        assert item["type"] == "listItem"
        assert item["children"][0]["children"][0]["type"] == "strong"

    def test_text_to_dict_includes_signature(self):
        data = Text("x", signature=RunSignature(font_size=20, is_bold=True)).to_dict()
        assert data["data"] == {"fontSize": 20, "isBold": True, "isUnderlined": False}
