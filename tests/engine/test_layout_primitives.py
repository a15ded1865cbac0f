"""
Tests for column width resolution, colors and alignment.
"""

import pytest

from docflow.engine.layout_primitives import (
    FLEX,
    Color,
    Fixed,
    TableStyle,
    TextAlignment,
    resolve_column_widths,
)


class TestResolveColumnWidths:
    """Test cases for resolve_column_widths."""

    def test_fixed_flex_fixed_with_spacing(self):
        """Flex column receives what fixed columns and spacing leave over."""
        widths = resolve_column_widths([Fixed(160), FLEX, Fixed(70)], 595, spacing=20)

        assert widths == [160, 325, 70]

    def test_flex_columns_share_evenly(self):
        widths = resolve_column_widths([FLEX, FLEX, Fixed(100)], 500)

        assert widths == [200, 200, 100]

    def test_no_flex_columns_keep_fixed_widths(self):
        widths = resolve_column_widths([Fixed(100), Fixed(50)], 500, spacing=10)

        assert widths == [100, 50]

    def test_empty_specs(self):
        assert resolve_column_widths([], 500, spacing=10) == []

    def test_negative_remainder_passes_through(self):
        widths = resolve_column_widths([Fixed(400), FLEX], 300)

        assert widths[1] == pytest.approx(-100)

    @pytest.mark.parametrize(
        "specs,total,spacing",
        [
            ([FLEX], 515, 0),
            ([FLEX, FLEX, FLEX], 515, 7.5),
            ([Fixed(12.5), FLEX, Fixed(33.3), FLEX], 481.7, 16),
            ([Fixed(160), FLEX, Fixed(70)], 595, 20),
            ([FLEX, Fixed(1), FLEX, Fixed(2), FLEX, Fixed(3), FLEX], 1000, 3.3),
        ],
    )
    def test_widths_and_spacing_fill_span(self, specs, total, spacing):
        """Resolved widths plus spacing add up to the available span."""
        widths = resolve_column_widths(specs, total, spacing)

        assert sum(widths) + spacing * (len(specs) - 1) == pytest.approx(total)


class TestColor:
    """Test cases for Color."""

    def test_css_opaque(self):
        assert Color(1, 0, 0).css == "rgb(255,0,0)"

    def test_css_translucent(self):
        assert Color(0, 0, 0, 0.5).css == "rgba(0,0,0,0.50)"

    def test_white_level(self):
        gray = Color.white_level(0.5)

        assert (gray.red, gray.green, gray.blue) == (0.5, 0.5, 0.5)
        assert gray.css == "rgb(127,127,127)"

    def test_presets(self):
        assert Color.BLACK == Color(0, 0, 0)
        assert Color.GREEN == Color(0, 0.6, 0)
        assert Color.BLUE == Color(0, 0.3, 1)
        assert Color.LIGHT_GRAY == Color.white_level(0.75)

    def test_tint_mixes_towards_white(self):
        tinted = Color(0, 0, 0).tint(0.12)

        assert tinted.red == pytest.approx(0.88)
        assert tinted.blue == pytest.approx(0.88)

    def test_to_reportlab(self):
        converted = Color(0.2, 0.4, 0.6, 0.8).to_reportlab()

        assert converted.red == pytest.approx(0.2)
        assert converted.alpha == pytest.approx(0.8)


class TestTextAlignment:
    """Test cases for TextAlignment."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("left", TextAlignment.LEADING),
            ("leading", TextAlignment.LEADING),
            ("center", TextAlignment.CENTER),
            ("right", TextAlignment.TRAILING),
            (None, TextAlignment.LEADING),
            (TextAlignment.TRAILING, TextAlignment.TRAILING),
        ],
    )
    def test_parse(self, value, expected):
        assert TextAlignment.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            TextAlignment.parse("justify")

    def test_offsets(self):
        assert TextAlignment.LEADING.offset(100, 40) == 0
        assert TextAlignment.CENTER.offset(100, 40) == 30
        assert TextAlignment.TRAILING.offset(100, 40) == 60

    def test_css(self):
        assert TextAlignment.TRAILING.css == "right"


def test_table_style_defaults():
    style = TableStyle()

    assert style.row_height == 20
    assert style.header_font_size == 10
    assert style.cell_font_size == 10
    assert style.header_background == Color.white_level(0.85)
    assert style.border_color == Color.white_level(0.7)
    assert style.border_width == 0.25
    assert style.cell_padding == 4
    assert style.alternate_row_color is None
    assert style.cell_bold is False
