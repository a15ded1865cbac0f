"""
Tests for HTMLRenderer and backend parity.
"""

import pytest

from docflow.config import RenderConfig
from docflow.engine.columns import ColumnItem, Columns
from docflow.engine.content import FilledBox, HRule, Spacer, Text
from docflow.engine.document import Document
from docflow.engine.geometry import Rect
from docflow.engine.layout_primitives import FLEX, Color, Fixed
from docflow.engine.page import Footer, Page
from docflow.engine.table import Column, Table
from docflow.exceptions import ContextCreationError
from docflow.renderers.html_renderer import HTMLRenderer


class FakeConverter:
    """Converter double recording what it was asked to convert."""

    def __init__(self, output=b"%PDF-fake"):
        self.output = output
        self.calls = []

    def convert(self, html, page_width, page_height):
        self.calls.append((html, page_width, page_height))
        return self.output


@pytest.fixture
def document():
    return Document(
        [
            Page([Text("First page"), Footer(contents=[Text("footer")], height=30)]),
            Page([Text("Second page")]),
        ]
    )


class TestMarkup:
    """Test cases for render_markup."""

    def test_document_wrapper(self, document):
        html = HTMLRenderer(config=RenderConfig(html_title="Invoice 42")).render_markup(document)

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Invoice 42</title>" in html
        assert "size: 595pt 842pt;" in html
        assert "margin: 0;" in html
        assert html.count('<div class="page"') == 2
        assert html.rstrip().endswith("</body></html>")

    def test_empty_document(self):
        assert HTMLRenderer(config=RenderConfig()).render_markup(Document()) == ""

    def test_page_size_taken_from_first_page(self):
        html = HTMLRenderer(config=RenderConfig()).render_markup(Document([Page([], size="letter")]))

        assert "size: 612pt 792pt;" in html


class TestRender:
    """Test cases for PDF output through a converter."""

    def test_delegates_to_converter(self, document):
        converter = FakeConverter()

        data = HTMLRenderer(converter=converter, config=RenderConfig()).render(document)

        assert data == b"%PDF-fake"
        html, width, height = converter.calls[0]
        assert (width, height) == (595, 842)
        assert "First page" in html

    def test_document_render_with_html_backend(self, document):
        converter = FakeConverter()

        assert document.render(HTMLRenderer(converter=converter, config=RenderConfig())) == b"%PDF-fake"

    def test_empty_document_fails_before_conversion(self):
        converter = FakeConverter()

        with pytest.raises(ContextCreationError):
            HTMLRenderer(converter=converter, config=RenderConfig()).render(Document())
        assert converter.calls == []


class TestBackendParity:
    """Both backends consume the same vertical space for the same content."""

    @pytest.mark.parametrize(
        "node",
        [
            Text("short"),
            Text("a considerably longer line of text that must wrap across several lines").size(11),
            Spacer(17),
            HRule(thickness=2),
            FilledBox(color=Color.BLUE, height=40, contents=[Text("inside").size(9)]),
            Columns(
                items=[ColumnItem(Fixed(100), [Text("left"), Spacer(40)]), ColumnItem(FLEX, [Text("right")])],
                spacing=12,
            ),
            Table(rows=[["a", "b"], ["c"]], columns=[Column("A"), Column("B", Fixed(80))]),
        ],
    )
    def test_cursor_parity(self, mock_canvas, node):
        bounds = Rect(40, 80, 300, 722)

        drawn = node.draw(mock_canvas, bounds, 802)
        _, rendered = node.render(bounds, 802)

        assert drawn == pytest.approx(rendered)
        assert drawn <= 802
