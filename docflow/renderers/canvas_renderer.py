"""Direct PDF output through a ReportLab canvas."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import TYPE_CHECKING, Optional

from reportlab.pdfgen import canvas as pdf_canvas

from ..exceptions import ContextCreationError
from .base_renderer import IRenderer, first_page

if TYPE_CHECKING:
    from ..engine.document import Document

logger = logging.getLogger(__name__)


class CanvasRenderer(IRenderer):
    """Draws each page onto a ReportLab canvas backed by an in-memory buffer."""

    def __init__(self, title: Optional[str] = None, compress: bool = True) -> None:
        self.title = title
        self.compress = compress

    def render(self, document: "Document") -> bytes:
        page = first_page(document)
        buffer = BytesIO()
        try:
            canvas = pdf_canvas.Canvas(
                buffer,
                pagesize=page.size.as_tuple(),
                pageCompression=1 if self.compress else 0,
            )
        except (ValueError, TypeError, OSError) as exc:
            raise ContextCreationError("Cannot create output context", str(exc)) from exc

        if self.title:
            canvas.setTitle(self.title)

        for index, current in enumerate(document.pages):
            canvas.setPageSize(current.size.as_tuple())
            cursor = current.draw(canvas)
            logger.debug(f"Drew page {index + 1}/{len(document.pages)}; body cursor ended at {cursor:.1f}")
            canvas.showPage()
        canvas.save()

        data = buffer.getvalue()
        logger.info(f"Rendered {len(document.pages)} pages to PDF ({len(data)} bytes)")
        return data
