"""
Tests for building layouts from dictionaries.
"""

import pytest

from docflow.engine.content import HRule, Spacer, Text
from docflow.engine.layout_primitives import FLEX, Color, Fixed, TextAlignment
from docflow.engine.table import Table
from docflow.exceptions import LayoutError
from docflow.layouts.builder import LayoutStyle
from docflow.layouts.loader import HEADER_SPACING, layout_from_dict, parse_item


@pytest.fixture
def invoice_data():
    return {
        "page": {"size": "A4", "margin": 40},
        "style": "classic",
        "columns": [
            {"header": "Item"},
            {"header": "Qty", "width": 60, "align": "right"},
            {"header": "Amount", "width": 90, "align": "trailing", "header_align": "center"},
        ],
        "records": [["Widget", 2, "10.00"], ["Gadget", 1, "4.50"]],
        "header": {"items": [{"text": "Invoice 42", "size": 18, "bold": True}], "height": 60},
        "summary": [["Total", "14.50"]],
        "notes": "Payable within 14 days",
        "footer": {"lines": ["ACME Ltd", "acme.example"]},
    }


class TestParseItem:
    """Test cases for single content items."""

    def test_text(self):
        node = parse_item({"text": "Hello", "size": 12, "italic": True, "color": "gray", "align": "center"})

        assert isinstance(node, Text)
        assert node.text == "Hello"
        assert node.font_size == 12
        assert node.is_italic
        assert node.color == Color.GRAY
        assert node.alignment is TextAlignment.CENTER

    def test_spacer(self):
        assert parse_item({"spacer": 8}) == Spacer(8)

    def test_rule(self):
        rule = parse_item({"rule": 2, "color": [1, 0, 0]})

        assert isinstance(rule, HRule)
        assert rule.thickness == 2
        assert rule.color == Color(1.0, 0.0, 0.0)

    def test_default_rule(self):
        assert parse_item({"rule": True}) == HRule(0.5, Color.LIGHT_GRAY)

    def test_unknown_item(self):
        with pytest.raises(LayoutError):
            parse_item({"image": "logo.png"})

    def test_bad_color(self):
        with pytest.raises(LayoutError):
            parse_item({"text": "x", "color": "octarine"})


class TestLayoutFromDict:
    """Test cases for whole layouts."""

    def test_columns(self, invoice_data):
        layout = layout_from_dict(invoice_data)

        assert [column.header for column in layout.columns] == ["Item", "Qty", "Amount"]
        assert layout.columns[0].width is FLEX
        assert layout.columns[1].width == Fixed(60)
        assert layout.columns[1].alignment is TextAlignment.TRAILING
        assert layout.columns[2].resolved_header_alignment is TextAlignment.CENTER

    def test_records_stringified(self, invoice_data):
        layout = layout_from_dict(invoice_data)

        assert layout.records == [["Widget", "2", "10.00"], ["Gadget", "1", "4.50"]]

    def test_header_gets_spacing(self, invoice_data):
        layout = layout_from_dict(invoice_data)

        assert layout.header.contents[-1] == Spacer(HEADER_SPACING)
        assert layout.header.height == 60 + HEADER_SPACING

    def test_summary_and_notes_lead_trailing(self, invoice_data):
        layout = layout_from_dict(invoice_data)

        contents = layout.trailing.contents
        assert isinstance(contents[1], Table)
        assert isinstance(contents[-1], Text)
        assert contents[-1].text == "Payable within 14 days"

    def test_trailing_height_includes_summary(self, invoice_data):
        invoice_data["trailing"] = {"items": [{"text": "Thanks"}], "height": 50}

        layout = layout_from_dict(invoice_data)

        assert layout.trailing.height == 50 + 18 + 12 + 34

    def test_footer(self, invoice_data):
        layout = layout_from_dict(invoice_data)

        assert layout.footer is not None
        assert layout.footer.height == 40
        assert layout.body_height == 722

    def test_page_options(self, invoice_data):
        invoice_data["page"] = {"size": "letter", "margin": 36}
        invoice_data["style"] = "stacked"
        invoice_data["row_height"] = 24
        invoice_data["accent_color"] = "blue"

        layout = layout_from_dict(invoice_data)

        assert layout.page_size.as_tuple() == (612, 792)
        assert layout.margins == 36
        assert layout.style is LayoutStyle.STACKED
        assert layout.table_style.row_height == 24
        assert layout.accent_color == Color.BLUE

    def test_table_style(self, invoice_data):
        invoice_data["table_style"] = {"cell_font_size": 8, "alternate_row_color": [0.95, 0.95, 0.95], "cell_bold": True}

        style = layout_from_dict(invoice_data).table_style

        assert style.cell_font_size == 8
        assert style.alternate_row_color == Color(0.95, 0.95, 0.95)
        assert style.cell_bold

    def test_unknown_style(self, invoice_data):
        invoice_data["style"] = "poster"

        with pytest.raises(LayoutError):
            layout_from_dict(invoice_data)

    def test_missing_columns(self, invoice_data):
        invoice_data["columns"] = []

        with pytest.raises(LayoutError):
            layout_from_dict(invoice_data)

    def test_bad_page_size(self, invoice_data):
        invoice_data["page"] = {"size": "A0"}

        with pytest.raises(LayoutError):
            layout_from_dict(invoice_data)

    def test_builds(self, invoice_data):
        document = layout_from_dict(invoice_data).build()

        assert len(document) == 1
        assert document.render().startswith(b"%PDF")

    def test_explicit_header_height_keeps_first_page_in_body(self, invoice_data, mock_canvas):
        invoice_data["header"] = {"items": [{"text": "Invoice 42", "size": 18}], "height": 21.6}
        invoice_data["records"] = [[f"Item {i}", "1", "1.00"] for i in range(200)]

        layout = layout_from_dict(invoice_data)
        first = layout.build().pages[0]
        end = first.draw(mock_canvas)

        assert layout.pagination_inputs().first_page_overhead == pytest.approx(21.6 + HEADER_SPACING)
        assert end >= first.body_bounds.bottom - 1e-6


class TestMalformedInput:
    """Badly shaped layouts are reported as LayoutError."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"page": {"margin": "abc"}},
            {"page": ["A4"]},
            {"page": {"size": None}},
            {"columns": [{"header": "Item", "align": 5}]},
            {"columns": [{"header": "Item", "width": "wide"}]},
            {"columns": ["Item"]},
            {"columns": {"header": "Item"}},
            {"records": [5]},
            {"records": "Widget"},
            {"row_height": "tall"},
            {"header": {"items": [{"spacer": "big"}]}},
            {"header": {"items": [{"text": "x", "size": None}]}},
            {"header": {"items": "Invoice"}},
            {"header": ["Invoice"]},
            {"trailing": {"items": [], "height": "auto"}},
            {"summary": [["Total"]]},
            {"summary": "Total"},
            {"footer": {"lines": ["x"], "height": "tall"}},
            {"footer": "Thanks"},
            {"table_style": {"cell_font_size": "small"}},
            {"accent_color": [1, "zero", 0]},
        ],
    )
    def test_raises_layout_error(self, invoice_data, overrides):
        invoice_data.update(overrides)

        with pytest.raises(LayoutError):
            layout_from_dict(invoice_data)

    def test_not_an_object(self):
        with pytest.raises(LayoutError):
            layout_from_dict(["columns"])

    def test_null_page_uses_defaults(self, invoice_data):
        invoice_data["page"] = None

        layout = layout_from_dict(invoice_data)

        assert layout.page_size.as_tuple() == (595, 842)
        assert layout.margins == 40
