"""Fixed-row-height table grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from reportlab.pdfgen.canvas import Canvas

from . import markup
from .content import ContentNode, Rendered
from .geometry import Rect
from .layout_primitives import FLEX, Color, ColumnWidth, TableStyle, TextAlignment, resolve_column_widths
from .text_metrics import ascent_descent, css_font_family, resolve_font_variant, string_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    header: str
    width: ColumnWidth = FLEX
    alignment: TextAlignment = TextAlignment.LEADING
    header_alignment: Optional[TextAlignment] = None

    @property
    def resolved_header_alignment(self) -> TextAlignment:
        return self.header_alignment or self.alignment


@dataclass(frozen=True)
class Table(ContentNode):
    """Optional header row followed by data rows, all ``style.row_height`` tall.

    Rows hold display strings; missing trailing cells render empty and extra
    cells are ignored.
    """

    rows: Tuple[Tuple[str, ...], ...] = ()
    columns: Tuple[Column, ...] = ()
    style: TableStyle = field(default_factory=TableStyle)
    show_header: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))
        object.__setattr__(self, "columns", tuple(self.columns))

    @property
    def header_height(self) -> float:
        return self.style.row_height if self.show_header and self.columns else 0.0

    @property
    def height(self) -> float:
        if not self.columns:
            return 0.0
        return self.header_height + len(self.rows) * self.style.row_height

    def cell(self, row: Sequence[str], index: int) -> str:
        return row[index] if index < len(row) else ""

    def column_widths(self, width: float) -> List[float]:
        return resolve_column_widths([column.width for column in self.columns], width, 0.0)

    # ------------------------------------------------------------------
    # Canvas
    # ------------------------------------------------------------------
    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        if not self.columns:
            return cursor
        widths = self.column_widths(bounds.width)
        style = self.style

        overflow = self.height - (cursor - bounds.bottom)
        if overflow > 0.01:
            logger.debug(f"Table with {len(self.rows)} rows overflows its bounds by {overflow:.1f}pt")

        if self.show_header:
            self._draw_row(
                canvas,
                bounds,
                cursor,
                widths,
                [column.header for column in self.columns],
                [column.resolved_header_alignment for column in self.columns],
                font_name=resolve_font_variant(style.font_name, True, False),
                font_size=style.header_font_size,
                text_color=style.header_text_color,
                background=style.header_background,
            )
            cursor -= style.row_height

        cell_font = resolve_font_variant(style.font_name, style.cell_bold, False)
        alignments = [column.alignment for column in self.columns]
        for index, row in enumerate(self.rows):
            background = style.alternate_row_color if index % 2 == 0 else None
            self._draw_row(
                canvas,
                bounds,
                cursor,
                widths,
                [self.cell(row, i) for i in range(len(self.columns))],
                alignments,
                font_name=cell_font,
                font_size=style.cell_font_size,
                text_color=Color.BLACK,
                background=background,
            )
            cursor -= style.row_height
        return cursor

    def _draw_row(
        self,
        canvas: Canvas,
        bounds: Rect,
        top: float,
        widths: Sequence[float],
        values: Sequence[str],
        alignments: Sequence[TextAlignment],
        font_name: str,
        font_size: float,
        text_color: Color,
        background: Optional[Color],
    ) -> None:
        style = self.style
        bottom = top - style.row_height

        canvas.saveState()
        if background is not None:
            canvas.setFillColor(background.to_reportlab())
            canvas.rect(bounds.x, bottom, bounds.width, style.row_height, stroke=0, fill=1)

        ascent, descent = ascent_descent(font_name, font_size)
        # Vertically centre the glyph box in the row
        baseline = bottom + (style.row_height - (ascent - descent)) / 2 - descent

        canvas.setFont(font_name, font_size)
        canvas.setFillColor(text_color.to_reportlab())
        x = bounds.x
        for width, value, alignment in zip(widths, values, alignments):
            if value:
                inner = width - 2 * style.cell_padding
                used = string_width(value, font_name, font_size)
                canvas.drawString(x + style.cell_padding + alignment.offset(inner, used), baseline, value)
            x += width

        if style.border_width > 0:
            canvas.setStrokeColor(style.border_color.to_reportlab())
            canvas.setLineWidth(style.border_width)
            canvas.line(bounds.left, bottom, bounds.right, bottom)
        canvas.restoreState()

    # ------------------------------------------------------------------
    # Markup
    # ------------------------------------------------------------------
    def render(self, bounds: Rect, cursor: float) -> Rendered:
        if not self.columns:
            return "", cursor
        widths = self.column_widths(bounds.width)
        style = self.style

        colgroup = "".join(f'<col {markup.style_attr({"width": markup.pt(w)})}>' for w in widths)
        table_style = markup.style_attr(
            {
                "width": markup.pt(bounds.width),
                "border-collapse": "collapse",
                "table-layout": "fixed",
                "font-family": css_font_family(style.font_name),
            }
        )
        parts = [
            f"<table {table_style}>",
            f"<colgroup>{colgroup}</colgroup>",
        ]

        if self.show_header:
            cells = "".join(
                self._cell_markup(
                    "th",
                    column.header,
                    column.resolved_header_alignment,
                    style.header_font_size,
                    bold=True,
                    color=style.header_text_color,
                )
                for column in self.columns
            )
            row_style = markup.style_attr(
                {"background": style.header_background.css, "height": markup.pt(style.row_height)}
            )
            parts.append(f"<thead><tr {row_style}>{cells}</tr></thead>")

        body_rows: List[str] = []
        for index, row in enumerate(self.rows):
            background = style.alternate_row_color if index % 2 == 0 else None
            row_style = markup.style_attr(
                {
                    "background": background.css if background is not None else None,
                    "height": markup.pt(style.row_height),
                }
            )
            cells = "".join(
                self._cell_markup(
                    "td",
                    self.cell(row, i),
                    column.alignment,
                    style.cell_font_size,
                    bold=style.cell_bold,
                    color=Color.BLACK,
                )
                for i, column in enumerate(self.columns)
            )
            body_rows.append(f"<tr {row_style}>{cells}</tr>")
        parts.append(f"<tbody>{''.join(body_rows)}</tbody>")
        parts.append("</table>")
        return "".join(parts), cursor - self.height

    def _cell_markup(
        self, tag: str, value: str, alignment: TextAlignment, font_size: float, bold: bool, color: Color
    ) -> str:
        style = self.style
        declarations = {
            "padding": f"0 {markup.pt(style.cell_padding)}",
            "text-align": alignment.css,
            "vertical-align": "middle",
            "font-size": markup.pt(font_size),
            "font-weight": "bold" if bold else "normal",
            "color": color.css,
            "white-space": "nowrap",
            "overflow": "hidden",
            "border-bottom": (
                f"{markup.pt(style.border_width)} solid {style.border_color.css}" if style.border_width > 0 else None
            ),
        }
        return f"<{tag} {markup.style_attr(declarations)}>{markup.text(value)}</{tag}>"
