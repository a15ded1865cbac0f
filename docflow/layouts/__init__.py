"""Paginated document layouts built on the flow engine."""

from .builder import DocumentLayout, LayoutStyle, Section, build_document
from .formatter import RecordFormatter
from .loader import layout_from_dict
from .sections import (
    BlockStyle,
    acceptance_block,
    address_banner,
    footer_from_lines,
    notes_block,
    signature_block,
    status_banner,
    summary_height,
    summary_table,
)

__all__ = [
    "BlockStyle",
    "DocumentLayout",
    "LayoutStyle",
    "RecordFormatter",
    "Section",
    "acceptance_block",
    "address_banner",
    "build_document",
    "footer_from_lines",
    "layout_from_dict",
    "notes_block",
    "signature_block",
    "status_banner",
    "summary_height",
    "summary_table",
]
