"""Multi-page document container."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .page import Page

logger = logging.getLogger(__name__)


class Document:
    """Ordered pages rendered through an interchangeable backend."""

    def __init__(self, pages: Iterable[Page] = ()) -> None:
        self.pages: List[Page] = list(pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __repr__(self) -> str:
        return f"Document(pages={len(self.pages)})"

    def add_page(self, page: Page) -> "Document":
        self.pages.append(page)
        return self

    def render(self, renderer=None) -> bytes:
        """Render to PDF bytes; the ReportLab canvas backend is used by default.

        Raises:
            ContextCreationError: The document has no pages or the output
                surface could not be created.
            ConverterError: The markup backend's converter failed.
        """
        if renderer is None:
            from ..renderers.canvas_renderer import CanvasRenderer

            renderer = CanvasRenderer()
        return renderer.render(self)

    def render_html(self, renderer=None) -> str:
        if renderer is None:
            from ..renderers.html_renderer import HTMLRenderer

            renderer = HTMLRenderer()
        return renderer.render_markup(self)

    def write(self, path: Union[str, Path], renderer=None) -> Path:
        target = Path(path)
        data = self.render(renderer)
        target.write_bytes(data)
        logger.info(f"Wrote {len(self.pages)} pages to {target}")
        return target
