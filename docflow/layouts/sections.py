"""Reusable blocks for document headers, trailing content and footers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..engine.columns import ColumnItem, Columns
from ..engine.content import ContentNode, FilledBox, HRule, Spacer, Text
from ..engine.layout_primitives import Color, Fixed, FLEX, TableStyle, TextAlignment
from ..engine.page import DEFAULT_FOOTER_HEIGHT, Footer
from ..engine.table import Column, Table

SUMMARY_SPACING = 12.0


@dataclass(frozen=True)
class BlockStyle:
    font_name: str = "Helvetica"
    title_font_name: str = "Helvetica"
    body_font_size: float = 9.0
    accent_color: Color = Color.DARK_GRAY
    rule_color: Color = Color.LIGHT_GRAY
    muted_color: Color = Color.GRAY
    inverse_text_color: Color = Color.WHITE


DEFAULT_BLOCK_STYLE = BlockStyle()


def footer_from_lines(
    lines: Sequence[str],
    height: float = DEFAULT_FOOTER_HEIGHT,
    style: BlockStyle = DEFAULT_BLOCK_STYLE,
) -> Footer:
    """A rule followed by centred 8pt lines."""
    contents: List[ContentNode] = [HRule(0.5, style.rule_color), Spacer(4)]
    for line in lines:
        contents.append(
            Text(line).font(style.font_name, 8).foreground_color(style.muted_color).align(TextAlignment.CENTER)
        )
    return Footer(contents=contents, height=height)


def notes_block(notes: Optional[str], style: BlockStyle = DEFAULT_BLOCK_STYLE) -> List[ContentNode]:
    if not notes:
        return []
    return [Spacer(20), Text(notes).font(style.font_name, style.body_font_size).italic()]


def notes_height(notes: Optional[str]) -> float:
    return 34.0 if notes else 0.0


def summary_table(
    rows: Sequence[Tuple[str, str]],
    row_height: float = 18.0,
    value_width: float = 110.0,
    style: BlockStyle = DEFAULT_BLOCK_STYLE,
) -> List[ContentNode]:
    """Right-aligned label/value rows, e.g. subtotal, tax and total."""
    if not rows:
        return []
    table_style = TableStyle(
        row_height=row_height,
        border_width=0.0,
        cell_font_size=style.body_font_size + 1,
        font_name=style.font_name,
    )
    table = Table(
        rows=[(label, value) for label, value in rows],
        columns=[
            Column("", FLEX, TextAlignment.TRAILING),
            Column("", Fixed(value_width), TextAlignment.TRAILING),
        ],
        style=table_style,
        show_header=False,
    )
    return [Spacer(SUMMARY_SPACING), table]


def summary_height(row_count: int, row_height: float = 18.0) -> float:
    return row_count * row_height + SUMMARY_SPACING if row_count else 0.0


def _signature_line(caption: str, style: BlockStyle) -> List[ContentNode]:
    return [HRule(0.5, style.rule_color), Spacer(3), Text(caption).font(style.font_name, 8)]


def signature_block(label: str, style: BlockStyle = DEFAULT_BLOCK_STYLE) -> List[ContentNode]:
    """Acknowledgement block with signature, date and printed-name lines."""
    return [
        Spacer(28),
        HRule(0.5, style.accent_color),
        Spacer(8),
        Text("Acknowledgement of Receipt").font(style.title_font_name, 10).bold(),
        Spacer(5),
        Text(label).font(style.font_name, 9),
        Spacer(18),
        Columns(
            items=[
                ColumnItem(FLEX, _signature_line("Signature", style)),
                ColumnItem(Fixed(130), _signature_line("Date received", style)),
                ColumnItem(Fixed(110), _signature_line("Print name", style)),
            ],
            spacing=20,
        ),
    ]


def acceptance_block(note: Optional[str], style: BlockStyle = DEFAULT_BLOCK_STYLE) -> List[ContentNode]:
    """Sign-off block for quotes; empty when there is no note."""
    if note is None:
        return []
    return [
        Spacer(24),
        HRule(0.5, style.accent_color),
        Spacer(8),
        Text("Acceptance").font(style.title_font_name, 11).bold(),
        Spacer(6),
        Text(note).font(style.font_name, 9),
        Spacer(18),
        Columns(
            items=[
                ColumnItem(FLEX, _signature_line("Authorized signature", style)),
                ColumnItem(Fixed(120), _signature_line("Date", style)),
            ],
            spacing=20,
        ),
    ]


def address_banner(
    label: str,
    address: str,
    style: BlockStyle = DEFAULT_BLOCK_STYLE,
) -> List[ContentNode]:
    """Lightly tinted strip with a short label beside a multi-line address."""
    lines = address.split("\n")
    height = 12 + max(len(lines), 1) * 12 + 6
    return [
        FilledBox(
            color=style.accent_color.tint(0.12),
            height=height,
            padding=8,
            contents=[
                Columns(
                    items=[
                        ColumnItem(Fixed(50), [Text(label).font(style.font_name, 8).bold()]),
                        ColumnItem(FLEX, [Text(line).font(style.font_name, style.body_font_size) for line in lines]),
                    ],
                    spacing=12,
                )
            ],
        )
    ]


def status_banner(
    text: str,
    detail: Optional[str] = None,
    style: BlockStyle = DEFAULT_BLOCK_STYLE,
    height: float = 38.0,
) -> List[ContentNode]:
    """Accent-colored band, e.g. carrier and tracking details, with an optional right column."""
    items = [
        ColumnItem(
            FLEX,
            [Text(text).font(style.font_name, 9).bold().foreground_color(style.inverse_text_color)] if text else [],
        )
    ]
    if detail:
        items.append(
            ColumnItem(Fixed(130), [Text(detail).font(style.font_name, 9).foreground_color(style.inverse_text_color)])
        )
    return [FilledBox(color=style.accent_color, height=height, padding=8, contents=[Columns(items=items, spacing=12)])]
