"""HTML markup backend.

Builds one self-contained HTML document for all pages and hands it to a
:class:`MarkupConverter` for PDF output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ..config import RenderConfig
from ..engine import markup
from ..exceptions import ContextCreationError
from .base_renderer import IRenderer
from .html_converter import HTMLToPDFConverter, MarkupConverter

if TYPE_CHECKING:
    from ..engine.document import Document

logger = logging.getLogger(__name__)

_BASE_STYLES = (
    "* { margin: 0; padding: 0; }",
    "body { font-family: Helvetica, Arial, sans-serif; -webkit-print-color-adjust: exact; }",
    ".page { page-break-after: always; position: relative; overflow: hidden; box-sizing: border-box; }",
    ".page:last-child { page-break-after: auto; }",
    "table { border-collapse: collapse; }",
    "img { display: block; }",
)


class HTMLRenderer(IRenderer):
    """Renders documents to HTML and, through a converter, to PDF."""

    def __init__(
        self,
        converter: Optional[MarkupConverter] = None,
        config: Optional[RenderConfig] = None,
    ) -> None:
        self.config = config or RenderConfig.from_env()
        self.converter = converter

    def _get_converter(self) -> MarkupConverter:
        if self.converter is None:
            self.converter = HTMLToPDFConverter(config=self.config)
        return self.converter

    def render_markup(self, document: "Document") -> str:
        """Return the full HTML document, or an empty string when there are no pages."""
        if not document.pages:
            return ""
        first = document.pages[0]
        head = self._render_head(first.size.width, first.size.height)
        pages = "\n".join(page.render() for page in document.pages)
        html_lang = markup.attribute(self.config.html_lang)
        return "\n".join(
            [
                "<!DOCTYPE html>",
                f'<html lang="{html_lang}"><head>',
                head,
                "</head><body>",
                pages,
                "</body></html>",
            ]
        )

    def _render_head(self, width: float, height: float) -> str:
        styles: List[str] = [
            "@page {",
            f"    size: {markup.pt(width)} {markup.pt(height)};",
            "    margin: 0;",
            "}",
            *_BASE_STYLES,
        ]
        return "\n".join(
            [
                '<meta charset="utf-8">',
                f"<title>{markup.text(self.config.html_title)}</title>",
                "<style>",
                *styles,
                "</style>",
            ]
        )

    def render(self, document: "Document") -> bytes:
        html = self.render_markup(document)
        if not html:
            raise ContextCreationError("Cannot create output context", "document has no pages")
        first = document.pages[0]
        data = self._get_converter().convert(html, first.size.width, first.size.height)
        logger.info(f"Converted {len(document.pages)} pages of markup to PDF ({len(data)} bytes)")
        return data
