"""
docflow - paginated business documents from declarative layouts.

Pages are composed from immutable content nodes (text, rules, tables,
columns, filled boxes, images, QR codes) and rendered either directly to PDF
through a ReportLab canvas or to HTML that an external converter turns into
PDF. Long record lists are split across pages so that headers, totals and
footers always stay intact.

Quick Start:
    from docflow import Column, DocumentLayout, Fixed, Section, Text

    layout = DocumentLayout(
        columns=[Column("Item"), Column("Qty", Fixed(60))],
        records=[["Widget", "2"], ["Gadget", "5"]],
        header=Section([Text("Invoice 42").size(18).bold()]),
    )
    layout.build().write("invoice.pdf")
"""

from .version import __version__, __version_info__

from .exceptions import (
    ContextCreationError,
    ConversionFailedError,
    ConverterError,
    DocflowError,
    ExternalToolNotFoundError,
    LayoutError,
    MediaError,
    RenderingError,
)
from .config import RenderConfig
from .engine import (
    FLEX,
    Color,
    Column,
    ColumnItem,
    Columns,
    ContentBuilder,
    ContentNode,
    Document,
    FilledBox,
    Fixed,
    Flex,
    Footer,
    HRule,
    ImageContent,
    Page,
    PageSize,
    PaginationInputs,
    PaginationManager,
    PaginationPlan,
    QRCodeContent,
    Rect,
    Size,
    Spacer,
    Table,
    TableStyle,
    Text,
    TextAlignment,
    measure_height,
    paginate,
    resolve_column_widths,
)
from .layouts import DocumentLayout, LayoutStyle, RecordFormatter, Section, layout_from_dict
from .renderers import CanvasRenderer, HTMLRenderer, HTMLToPDFConverter

__all__ = [
    "__version__",
    "__version_info__",
    "CanvasRenderer",
    "Color",
    "Column",
    "ColumnItem",
    "Columns",
    "ContentBuilder",
    "ContentNode",
    "ContextCreationError",
    "ConversionFailedError",
    "ConverterError",
    "DocflowError",
    "Document",
    "DocumentLayout",
    "ExternalToolNotFoundError",
    "FLEX",
    "FilledBox",
    "Fixed",
    "Flex",
    "Footer",
    "HRule",
    "HTMLRenderer",
    "HTMLToPDFConverter",
    "ImageContent",
    "LayoutError",
    "LayoutStyle",
    "MediaError",
    "Page",
    "PageSize",
    "PaginationInputs",
    "PaginationManager",
    "PaginationPlan",
    "QRCodeContent",
    "RecordFormatter",
    "Rect",
    "RenderConfig",
    "RenderingError",
    "Section",
    "Size",
    "Spacer",
    "Table",
    "TableStyle",
    "Text",
    "TextAlignment",
    "layout_from_dict",
    "measure_height",
    "paginate",
    "resolve_column_widths",
]
