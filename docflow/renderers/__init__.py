"""Output backends for docflow documents."""

from .base_renderer import IRenderer
from .canvas_renderer import CanvasRenderer
from .html_converter import HTMLToPDFConverter, MarkupConverter
from .html_renderer import HTMLRenderer

__all__ = ["CanvasRenderer", "HTMLRenderer", "HTMLToPDFConverter", "IRenderer", "MarkupConverter"]
