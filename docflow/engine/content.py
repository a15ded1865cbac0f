"""Content nodes: the renderable units composed into pages.

Every node implements two paths that consume the same vertical space:

* ``draw(canvas, bounds, cursor)`` paints onto a ReportLab canvas and returns
  the advanced cursor.
* ``render(bounds, cursor)`` returns an HTML fragment and the advanced cursor.

The cursor is a y-coordinate in PDF points measured from the bottom of the
page, so advancing means decreasing it.
"""

from __future__ import annotations

import base64
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from io import BytesIO
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import qrcode
from PIL import Image, UnidentifiedImageError
from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from ..exceptions import MediaError
from . import markup
from .geometry import Rect
from .layout_primitives import Color, TextAlignment
from .text_metrics import (
    LINE_HEIGHT_FACTOR,
    ascent_descent,
    css_font_family,
    layout_text,
    resolve_font_variant,
    string_width,
)

logger = logging.getLogger(__name__)

Rendered = Tuple[str, float]


class ContentNode(ABC):
    """Interface implemented by every renderable node."""

    @abstractmethod
    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        """Draw onto ``canvas`` inside ``bounds`` starting at ``cursor``; return the new cursor."""

    @abstractmethod
    def render(self, bounds: Rect, cursor: float) -> Rendered:
        """Return the HTML fragment for this node and the new cursor."""


def draw_all(nodes: Iterable[ContentNode], canvas: Canvas, bounds: Rect, cursor: float) -> float:
    for node in nodes:
        cursor = node.draw(canvas, bounds, cursor)
    return cursor


def render_all(nodes: Iterable[ContentNode], bounds: Rect, cursor: float) -> Rendered:
    parts: List[str] = []
    for node in nodes:
        fragment, cursor = node.render(bounds, cursor)
        if fragment:
            parts.append(fragment)
    return "".join(parts), cursor


def measure_height(nodes: Iterable[ContentNode], width: float) -> float:
    """Vertical space consumed by ``nodes`` laid out at ``width``.

    Runs the markup path offscreen, so no canvas is needed.
    """
    start = 0.0
    _, end = render_all(nodes, Rect(0.0, -1e9, width, 1e9), start)
    return start - end


class ContentBuilder:
    """Collects nodes in order, with helpers for optional content."""

    def __init__(self) -> None:
        self._nodes: List[ContentNode] = []

    def add(self, node: Optional[ContentNode]) -> "ContentBuilder":
        if node is not None:
            self._nodes.append(node)
        return self

    def add_if(self, condition: bool, node: ContentNode) -> "ContentBuilder":
        if condition:
            self._nodes.append(node)
        return self

    def extend(self, nodes: Iterable[ContentNode]) -> "ContentBuilder":
        self._nodes.extend(nodes)
        return self

    def build(self) -> List[ContentNode]:
        return list(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


# ----------------------------------------------------------------------
# Leaf nodes
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Text(ContentNode):
    """A run of text wrapped to the available width."""

    text: str
    font_name: str = "Helvetica"
    font_size: float = 16.0
    is_bold: bool = False
    is_italic: bool = False
    color: Color = Color.BLACK
    alignment: TextAlignment = TextAlignment.LEADING

    def font(self, name: str, size: Optional[float] = None) -> "Text":
        return replace(self, font_name=name, font_size=self.font_size if size is None else size)

    def size(self, size: float) -> "Text":
        return replace(self, font_size=size)

    def bold(self, flag: bool = True) -> "Text":
        return replace(self, is_bold=flag)

    def italic(self, flag: bool = True) -> "Text":
        return replace(self, is_italic=flag)

    def foreground_color(self, color: Color) -> "Text":
        return replace(self, color=color)

    def align(self, alignment: Union[TextAlignment, str]) -> "Text":
        return replace(self, alignment=TextAlignment.parse(alignment))

    @property
    def resolved_font(self) -> str:
        return resolve_font_variant(self.font_name, self.is_bold, self.is_italic)

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        font_name = self.resolved_font
        layout = layout_text(self.text, font_name, self.font_size, bounds.width)
        ascent, _ = ascent_descent(font_name, self.font_size)

        canvas.saveState()
        canvas.setFont(font_name, self.font_size)
        canvas.setFillColor(self.color.to_reportlab())
        for line in layout.lines:
            if line:
                width = string_width(line, font_name, self.font_size)
                x = bounds.x + self.alignment.offset(bounds.width, width)
                canvas.drawString(x, cursor - ascent, line)
            cursor -= layout.line_height
        canvas.restoreState()
        return cursor

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        font_name = self.resolved_font
        layout = layout_text(self.text, font_name, self.font_size, bounds.width)
        body = "<br>".join(markup.text(line) for line in layout.lines)
        style = markup.style_attr(
            {
                "margin": "0",
                "font-family": css_font_family(self.font_name),
                "font-size": markup.pt(self.font_size),
                "font-weight": "bold" if self.is_bold else "normal",
                "font-style": "italic" if self.is_italic else "normal",
                "color": self.color.css,
                "text-align": self.alignment.css,
                "line-height": f"{LINE_HEIGHT_FACTOR}",
                "white-space": "nowrap",
            }
        )
        return f"<p {style}>{body}</p>", cursor - layout.height


@dataclass(frozen=True)
class Spacer(ContentNode):
    height: float = 12.0

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        return cursor - self.height

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        return f'<div {markup.style_attr({"height": markup.pt(self.height)})}></div>', cursor - self.height


@dataclass(frozen=True)
class HRule(ContentNode):
    """Horizontal rule spanning the bounds, with 2pt of space above and below."""

    thickness: float = 0.5
    color: Color = Color.LIGHT_GRAY

    @property
    def height(self) -> float:
        return self.thickness + 4.0

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        y = cursor - 2.0 - self.thickness / 2
        canvas.saveState()
        canvas.setStrokeColor(self.color.to_reportlab())
        canvas.setLineWidth(self.thickness)
        canvas.line(bounds.left, y, bounds.right, y)
        canvas.restoreState()
        return cursor - self.height

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        style = markup.style_attr(
            {
                "border": "none",
                "border-top": f"{markup.pt(self.thickness)} solid {self.color.css}",
                "margin": "2pt 0",
            }
        )
        return f"<hr {style}>", cursor - self.height


@dataclass(frozen=True)
class FilledBox(ContentNode):
    """A colored band of fixed height; children are laid out inside its padding."""

    color: Color
    height: float
    padding: float = 4.0
    contents: Tuple[ContentNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))

    def _inner_bounds(self, bounds: Rect) -> Rect:
        return Rect(
            x=bounds.x + self.padding,
            y=bounds.y,
            width=bounds.width - 2 * self.padding,
            height=bounds.height,
        )

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        canvas.saveState()
        canvas.setFillColor(self.color.to_reportlab())
        canvas.rect(bounds.x, cursor - self.height, bounds.width, self.height, stroke=0, fill=1)
        canvas.restoreState()

        draw_all(self.contents, canvas, self._inner_bounds(bounds), cursor - self.padding)
        return cursor - self.height

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        inner, _ = render_all(self.contents, self._inner_bounds(bounds), cursor - self.padding)
        style = markup.style_attr(
            {
                "background": self.color.css,
                "height": markup.pt(self.height),
                "padding": f"{markup.pt(self.padding)} {markup.pt(self.padding)} 0",
                "box-sizing": "border-box",
                "overflow": "hidden",
            }
        )
        return f"<div {style}>{inner}</div>", cursor - self.height


@dataclass(frozen=True)
class ImageContent(ContentNode):
    """A raster image scaled down to fit ``max_width`` (and ``max_height`` if given)."""

    data: bytes = field(repr=False)
    pixel_width: int
    pixel_height: int
    image_format: str = "PNG"
    max_width: float = 160.0
    max_height: Optional[float] = None
    alignment: TextAlignment = TextAlignment.LEADING

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        max_width: float = 160.0,
        max_height: Optional[float] = None,
        alignment: Union[TextAlignment, str] = TextAlignment.LEADING,
    ) -> "ImageContent":
        try:
            with Image.open(BytesIO(data)) as image:
                width, height = image.size
                image_format = image.format or "PNG"
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise MediaError("Unable to decode image data", str(exc)) from exc
        return cls(
            data=data,
            pixel_width=width,
            pixel_height=height,
            image_format=image_format,
            max_width=max_width,
            max_height=max_height,
            alignment=TextAlignment.parse(alignment),
        )

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        max_width: float = 160.0,
        max_height: Optional[float] = None,
        alignment: Union[TextAlignment, str] = TextAlignment.LEADING,
    ) -> Optional["ImageContent"]:
        """Load an image file; returns None when it cannot be read or decoded."""
        try:
            data = Path(path).read_bytes()
            return cls.from_bytes(data, max_width, max_height, alignment)
        except (OSError, MediaError) as exc:
            logger.warning(f"Skipping image {path}: {exc}")
            return None

    def scaled_size(self) -> Tuple[float, float]:
        if self.pixel_width <= 0 or self.pixel_height <= 0:
            return 0.0, 0.0
        draw_width = min(self.max_width, float(self.pixel_width))
        draw_height = self.pixel_height * (draw_width / self.pixel_width)
        if self.max_height is not None and draw_height > self.max_height:
            draw_height = self.max_height
            draw_width = self.pixel_width * (draw_height / self.pixel_height)
        return draw_width, draw_height

    @property
    def mime_type(self) -> str:
        return f"image/{self.image_format.lower()}"

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        width, height = self.scaled_size()
        if height <= 0:
            return cursor
        x = bounds.x + self.alignment.offset(bounds.width, width)
        canvas.drawImage(ImageReader(BytesIO(self.data)), x, cursor - height, width, height, mask="auto")
        return cursor - height

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        width, height = self.scaled_size()
        if height <= 0:
            return "", cursor
        encoded = base64.b64encode(self.data).decode("ascii")
        wrapper = markup.style_attr({"text-align": self.alignment.css, "line-height": "0"})
        image_style = markup.style_attr({"width": markup.pt(width), "height": markup.pt(height)})
        fragment = f'<div {wrapper}><img src="data:{self.mime_type};base64,{encoded}" {image_style}></div>'
        return fragment, cursor - height


@dataclass(frozen=True)
class QRCodeContent(ContentNode):
    """A square QR symbol ``size`` points wide.

    A payload that cannot be encoded draws nothing and leaves the cursor alone.
    """

    payload: str
    size: float = 80.0
    alignment: TextAlignment = TextAlignment.LEADING

    def modules(self) -> Optional[List[List[bool]]]:
        code = qrcode.QRCode(error_correction=ERROR_CORRECT_M, border=0)
        try:
            code.add_data(self.payload)
            code.make(fit=True)
        except (DataOverflowError, ValueError) as exc:
            logger.warning(f"Cannot encode QR payload of {len(self.payload)} characters: {exc}")
            return None
        return code.get_matrix()

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        matrix = self.modules()
        if not matrix:
            return cursor
        count = len(matrix)
        module = self.size / count
        x0 = bounds.x + self.alignment.offset(bounds.width, self.size)
        y0 = cursor - self.size

        canvas.saveState()
        canvas.setFillColor(Color.BLACK.to_reportlab())
        for row_index, row in enumerate(matrix):
            for col_index, dark in enumerate(row):
                if dark:
                    # Matrix row 0 is the top of the symbol
                    y = y0 + (count - 1 - row_index) * module
                    canvas.rect(x0 + col_index * module, y, module, module, stroke=0, fill=1)
        canvas.restoreState()
        return cursor - self.size

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        matrix = self.modules()
        if not matrix:
            return "", cursor
        count = len(matrix)
        cells = "".join(
            f'<rect x="{col}" y="{row}" width="1" height="1"/>'
            for row, values in enumerate(matrix)
            for col, dark in enumerate(values)
            if dark
        )
        wrapper = markup.style_attr({"text-align": self.alignment.css, "line-height": "0"})
        svg = (
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {count} {count}" '
            f'width="{markup.pt(self.size)}" height="{markup.pt(self.size)}" '
            f'shape-rendering="crispEdges" fill="#000">{cells}</svg>'
        )
        return f"<div {wrapper}>{svg}</div>", cursor - self.size
