"""
Tests for the Columns container.
"""

import pytest

from docflow.engine.columns import ColumnItem, Columns
from docflow.engine.content import Spacer, Text
from docflow.engine.geometry import Rect
from docflow.engine.layout_primitives import FLEX, Fixed


class TestColumns:
    """Test cases for Columns."""

    def test_advances_by_tallest_column(self, mock_canvas, body_bounds):
        container = Columns(
            items=[ColumnItem(FLEX, [Spacer(30)]), ColumnItem(FLEX, [Spacer(50)]), ColumnItem(FLEX, [])],
            spacing=10,
        )

        assert container.draw(mock_canvas, body_bounds, 700) == 650
        assert container.render(body_bounds, 700)[1] == 650

    def test_columns_start_from_same_cursor(self, mock_canvas, recording_node):
        left, right = recording_node(40), recording_node(5)
        container = Columns(items=[ColumnItem(Fixed(100), [left]), ColumnItem(FLEX, [right])], spacing=15)

        container.draw(mock_canvas, Rect(40, 100, 515, 600), 700)

        left_bounds, left_cursor = left.draw_calls[0]
        right_bounds, right_cursor = right.draw_calls[0]
        assert left_cursor == right_cursor == 700
        assert (left_bounds.x, left_bounds.width) == (40, 100)
        assert (right_bounds.x, right_bounds.width) == (155, 400)
        assert right_bounds.y == 100
        assert right_bounds.height == 600

    def test_sequential_content_inside_a_column(self, mock_canvas, body_bounds, recording_node):
        first, second = recording_node(10), recording_node(10)
        container = Columns(items=[ColumnItem(FLEX, [first, second])])

        assert container.draw(mock_canvas, body_bounds, 700) == 680
        assert second.draw_calls[0][1] == 690

    def test_empty_container_leaves_cursor(self, mock_canvas, body_bounds):
        assert Columns().draw(mock_canvas, body_bounds, 700) == 700
        assert Columns().render(body_bounds, 700) == ("", 700)

    def test_markup_is_flex_row(self, body_bounds):
        container = Columns(
            items=[ColumnItem(Fixed(160), [Text("Left")]), ColumnItem(FLEX, [Text("Right")])],
            spacing=20,
        )

        markup, _ = container.render(body_bounds, 700)

        assert markup.startswith('<div style="display:flex;gap:20pt;')
        assert "flex:0 0 160pt" in markup
        assert "flex:0 0 335pt" in markup
        assert markup.index("Left") < markup.index("Right")

    @pytest.mark.parametrize("heights", [(1, 2, 3), (30, 10), (5,), (12.5, 12.5, 0)])
    def test_draw_and_render_agree(self, mock_canvas, body_bounds, heights):
        container = Columns(items=[ColumnItem(FLEX, [Spacer(h)]) for h in heights], spacing=4)

        drawn = container.draw(mock_canvas, body_bounds, 500)
        _, rendered = container.render(body_bounds, 500)

        assert drawn == rendered == 500 - max(heights)
