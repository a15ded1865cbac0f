"""Flow layout engine: content nodes, tables, columns, pages and pagination."""

from .columns import ColumnItem, Columns
from .content import (
    ContentBuilder,
    ContentNode,
    FilledBox,
    HRule,
    ImageContent,
    QRCodeContent,
    Spacer,
    Text,
    measure_height,
)
from .document import Document
from .geometry import PageSize, Rect, Size, points_to_mm
from .layout_primitives import (
    FLEX,
    Color,
    ColumnWidth,
    Fixed,
    Flex,
    TableStyle,
    TextAlignment,
    resolve_column_widths,
)
from .page import Footer, Page
from .pagination_manager import PaginationInputs, PaginationManager, PaginationPlan, paginate
from .table import Column, Table

__all__ = [
    "Color",
    "Column",
    "ColumnItem",
    "ColumnWidth",
    "Columns",
    "ContentBuilder",
    "ContentNode",
    "Document",
    "FLEX",
    "FilledBox",
    "Fixed",
    "Flex",
    "Footer",
    "HRule",
    "ImageContent",
    "Page",
    "PageSize",
    "PaginationInputs",
    "PaginationManager",
    "PaginationPlan",
    "QRCodeContent",
    "Rect",
    "Size",
    "Spacer",
    "Table",
    "TableStyle",
    "Text",
    "TextAlignment",
    "measure_height",
    "paginate",
    "points_to_mm",
    "resolve_column_widths",
]
