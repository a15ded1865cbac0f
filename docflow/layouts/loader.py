"""Build a :class:`DocumentLayout` from a plain dictionary (e.g. parsed JSON).

Example::

    {
        "page": {"size": "A4", "margin": 40},
        "style": "classic",
        "columns": [{"header": "Item"}, {"header": "Qty", "width": 60, "align": "trailing"}],
        "records": [["Widget", "2"]],
        "header": {"items": [{"text": "Invoice 42", "size": 18, "bold": true}]},
        "summary": [["Total", "10.00"]],
        "footer": {"lines": ["Thank you"]}
    }

Malformed input of any shape raises :class:`LayoutError`.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..engine.content import ContentNode, HRule, Spacer, Text
from ..engine.geometry import PageSize, Size
from ..engine.layout_primitives import FLEX, Color, ColumnWidth, Fixed, TableStyle, TextAlignment
from ..engine.page import DEFAULT_FOOTER_HEIGHT, DEFAULT_MARGIN
from ..engine.table import Column
from ..exceptions import LayoutError
from .builder import DocumentLayout, LayoutStyle, Section
from .sections import footer_from_lines, notes_block, notes_height, summary_height, summary_table

logger = logging.getLogger(__name__)

HEADER_SPACING = 20.0


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    """Return ``value`` as a mapping; ``None`` counts as empty."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise LayoutError(f"'{name}' must be an object", f"got {type(value).__name__}")
    return value


def _list(value: Any, name: str) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise LayoutError(f"'{name}' must be a list", f"got {type(value).__name__}")
    return list(value)


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise LayoutError(f"'{name}' must be a number", repr(value))
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise LayoutError(f"'{name}' must be a number", repr(value)) from exc


def _color(value: Any) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        return Color(*[_number(component, "color") for component in value])
    if isinstance(value, str):
        preset = getattr(Color, value.upper(), None)
        if isinstance(preset, Color):
            return preset
    raise LayoutError("Unsupported color", repr(value))


def _width(value: Any) -> ColumnWidth:
    if value is None or value == "flex":
        return FLEX
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Fixed(float(value))
    raise LayoutError("Column width must be a number or 'flex'", repr(value))


def _alignment(value: Any) -> TextAlignment:
    try:
        return TextAlignment.parse(value)
    except ValueError as exc:
        raise LayoutError("Unsupported alignment", repr(value)) from exc


def parse_columns(items: Sequence[Any]) -> List[Column]:
    columns = []
    for item in items:
        item = _mapping(item, "columns[]")
        alignment = _alignment(item.get("align"))
        header_alignment = _alignment(item["header_align"]) if "header_align" in item else None
        columns.append(Column(str(item.get("header", "")), _width(item.get("width")), alignment, header_alignment))
    return columns


def parse_records(items: Any) -> List[List[str]]:
    records = []
    for index, record in enumerate(_list(items, "records")):
        if isinstance(record, (str, bytes)) or not isinstance(record, Sequence):
            raise LayoutError("Each record must be a list of values", f"record {index}: {record!r}")
        records.append([str(value) for value in record])
    return records


def parse_item(item: Any) -> ContentNode:
    """Convert one ``{"text": ...}``, ``{"spacer": h}`` or ``{"rule": ...}`` item."""
    item = _mapping(item, "items[]")
    if "text" in item:
        node = Text(str(item["text"]))
        if "font" in item or "size" in item:
            size = _number(item["size"], "size") if "size" in item else None
            node = node.font(str(item.get("font", node.font_name)), size)
        if item.get("bold"):
            node = node.bold()
        if item.get("italic"):
            node = node.italic()
        if "color" in item:
            node = node.foreground_color(_color(item["color"]))
        if "align" in item:
            node = node.align(_alignment(item["align"]))
        return node
    if "spacer" in item:
        return Spacer(_number(item["spacer"], "spacer"))
    if "rule" in item:
        rule = item["rule"]
        thickness = float(rule) if isinstance(rule, (int, float)) and not isinstance(rule, bool) else 0.5
        return HRule(thickness, _color(item.get("color", "light_gray")))
    raise LayoutError("Unknown content item", ", ".join(sorted(item)) or "empty item")


def parse_section(data: Any, name: str = "section", trailing_spacing: float = 0.0) -> Section:
    """Parse ``{"items": [...], "height": h}``.

    ``trailing_spacing`` appends a spacer after non-empty contents; an explicit
    ``height`` is grown by the same amount so the estimate covers it.
    """
    data = _mapping(data, name)
    if not data:
        return Section()
    contents = [parse_item(item) for item in _list(data.get("items"), f"{name}.items")]
    spacing = trailing_spacing if contents else 0.0
    if spacing:
        contents.append(Spacer(spacing))
    height = data.get("height")
    return Section(contents, _number(height, f"{name}.height") + spacing if height is not None else None)


def parse_table_style(data: Any) -> TableStyle:
    data = _mapping(data, "table_style")
    if not data:
        return TableStyle()
    options: Dict[str, Any] = {}
    for key in ("header_font_size", "cell_font_size", "row_height", "border_width", "cell_padding"):
        if key in data:
            options[key] = _number(data[key], key)
    for key in ("header_background", "header_text_color", "alternate_row_color", "border_color"):
        if key in data:
            options[key] = _color(data[key])
    if "cell_bold" in data:
        options["cell_bold"] = bool(data["cell_bold"])
    if "font" in data:
        options["font_name"] = str(data["font"])
    return TableStyle(**options)


def parse_summary(rows: Any) -> List[Tuple[str, str]]:
    summary = []
    for row in _list(rows, "summary"):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence) or len(row) != 2:
            raise LayoutError("Summary rows must be [label, value] pairs", repr(row))
        label, value = row
        summary.append((str(label), str(value)))
    return summary


def layout_from_dict(data: Any) -> DocumentLayout:
    data = _mapping(data, "layout")
    page = _mapping(data.get("page"), "page")
    try:
        style = LayoutStyle(data.get("style", LayoutStyle.CLASSIC.value))
    except ValueError as exc:
        raise LayoutError("Unknown layout style", repr(data.get("style"))) from exc

    columns = parse_columns(_list(data.get("columns"), "columns"))
    if not columns:
        raise LayoutError("Layout needs at least one column")

    table_style = parse_table_style(data.get("table_style"))
    if "row_height" in data:
        table_style = replace(table_style, row_height=_number(data["row_height"], "row_height"))

    trailing = parse_section(data.get("trailing"), "trailing")
    trailing_contents = list(trailing.contents)
    trailing_height = trailing.height

    summary = parse_summary(data.get("summary"))
    notes = data.get("notes")
    if notes is not None:
        notes = str(notes)
    if summary or notes:
        summary_nodes = summary_table(summary) + notes_block(notes)
        trailing_contents = summary_nodes + trailing_contents
        if trailing_height is not None:
            trailing_height += summary_height(len(summary)) + notes_height(notes)
    trailing = Section(trailing_contents, trailing_height)

    footer = None
    footer_data = _mapping(data.get("footer"), "footer")
    if footer_data:
        footer = footer_from_lines(
            [str(line) for line in _list(footer_data.get("lines"), "footer.lines")],
            height=_number(footer_data.get("height", DEFAULT_FOOTER_HEIGHT), "footer.height"),
        )

    continuation = data.get("continuation_header")
    layout = DocumentLayout(
        columns=columns,
        records=parse_records(data.get("records")),
        table_style=table_style,
        header=parse_section(data.get("header"), "header", trailing_spacing=HEADER_SPACING),
        continuation_header=parse_section(continuation, "continuation_header") if continuation else None,
        trailing=trailing,
        footer=footer,
        page_size=_page_size(page.get("size", "A4")),
        margins=_number(page.get("margin", DEFAULT_MARGIN), "page.margin"),
        style=style,
    )
    if "accent_color" in data:
        layout.accent_color = _color(data["accent_color"])
    logger.debug(f"Loaded {style.value} layout with {len(layout.records)} records")
    return layout


def _page_size(value: Any) -> Size:
    try:
        return PageSize.resolve(value)
    except (ValueError, TypeError) as exc:
        raise LayoutError("Unsupported page size", repr(value)) from exc
