"""Side-by-side column container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from reportlab.pdfgen.canvas import Canvas

from . import markup
from .content import ContentNode, Rendered, draw_all, render_all
from .geometry import Rect
from .layout_primitives import FLEX, ColumnWidth, resolve_column_widths


@dataclass(frozen=True)
class ColumnItem:
    width: ColumnWidth = FLEX
    contents: Tuple[ContentNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))


@dataclass(frozen=True)
class Columns(ContentNode):
    """Lays out column stacks side by side from a shared starting cursor.

    Each column advances its own cursor; the container then continues below
    the tallest column.
    """

    items: Tuple[ColumnItem, ...] = ()
    spacing: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def column_bounds(self, bounds: Rect) -> List[Rect]:
        widths = resolve_column_widths([item.width for item in self.items], bounds.width, self.spacing)
        result: List[Rect] = []
        x = bounds.x
        for width in widths:
            result.append(bounds.with_x(x, width))
            x += width + self.spacing
        return result

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        if not self.items:
            return cursor
        ends = [
            draw_all(item.contents, canvas, column, cursor)
            for item, column in zip(self.items, self.column_bounds(bounds))
        ]
        return min(ends)

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        if not self.items:
            return "", cursor
        parts: List[str] = []
        ends: List[float] = []
        for item, column in zip(self.items, self.column_bounds(bounds)):
            fragment, end = render_all(item.contents, column, cursor)
            ends.append(end)
            style = markup.style_attr({"flex": f"0 0 {markup.pt(column.width)}", "min-width": "0"})
            parts.append(f"<div {style}>{fragment}</div>")
        container = markup.style_attr({"display": "flex", "gap": markup.pt(self.spacing), "align-items": "flex-start"})
        return f"<div {container}>{''.join(parts)}</div>", min(ends)


def columns(*items: ColumnItem, spacing: float = 0.0) -> Columns:
    return Columns(items=items, spacing=spacing)
