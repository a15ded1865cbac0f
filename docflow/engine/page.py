"""Page composition: margins, body flow and the pinned footer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from reportlab.pdfgen.canvas import Canvas

from . import markup
from .content import ContentNode, Rendered, draw_all, render_all
from .geometry import PageSize, Rect, Size

logger = logging.getLogger(__name__)

DEFAULT_MARGIN = 40.0
DEFAULT_FOOTER_HEIGHT = 40.0


@dataclass(frozen=True)
class Footer(ContentNode):
    """Content pinned to the bottom margin of a page.

    Placed among a page's contents it is lifted out of the body flow; drawn
    inline it does nothing.
    """

    contents: Tuple[ContentNode, ...] = ()
    height: float = DEFAULT_FOOTER_HEIGHT

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))

    def draw(self, canvas: Canvas, bounds: Rect, cursor: float) -> float:
        return cursor

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        return "", cursor

    def draw_pinned(self, canvas: Canvas, band: Rect) -> float:
        return draw_all(self.contents, canvas, band, band.top)

    def render_pinned(self, band: Rect) -> str:
        fragment, _ = render_all(self.contents, band, band.top)
        return fragment


class Page:
    """A fixed-size page with a uniform margin.

    Body contents flow top-down from the top of the body area; the footer
    band (if any) is reserved at the bottom before the body is laid out.
    """

    def __init__(
        self,
        contents: Iterable[ContentNode] = (),
        size: Union[str, Size, Iterable[float]] = PageSize.A4,
        margins: float = DEFAULT_MARGIN,
    ) -> None:
        self.size = PageSize.resolve(size)
        self.margins = float(margins)
        body: List[ContentNode] = []
        footer: Optional[Footer] = None
        for node in contents:
            if isinstance(node, Footer):
                footer = node
            else:
                body.append(node)
        self.body_contents: Tuple[ContentNode, ...] = tuple(body)
        self.footer = footer

    def __repr__(self) -> str:
        return (
            f"Page(size=({self.size.width:g}x{self.size.height:g}), margins={self.margins:g}, "
            f"nodes={len(self.body_contents)}, footer={self.footer is not None})"
        )

    @property
    def footer_height(self) -> float:
        return self.footer.height if self.footer is not None else 0.0

    @property
    def content_width(self) -> float:
        return self.size.width - 2 * self.margins

    @property
    def body_bounds(self) -> Rect:
        return Rect(
            x=self.margins,
            y=self.margins + self.footer_height,
            width=self.content_width,
            height=self.size.height - 2 * self.margins - self.footer_height,
        )

    @property
    def footer_bounds(self) -> Rect:
        return Rect(x=self.margins, y=self.margins, width=self.content_width, height=self.footer_height)

    def draw(self, canvas: Canvas) -> float:
        """Draw body and footer; returns the final body cursor."""
        bounds = self.body_bounds
        cursor = draw_all(self.body_contents, canvas, bounds, bounds.top)
        if cursor < bounds.bottom:
            logger.debug(f"Body content overflows page body by {bounds.bottom - cursor:.1f}pt")
        if self.footer is not None:
            self.footer.draw_pinned(canvas, self.footer_bounds)
        return cursor

    def render(self) -> str:
        bounds = self.body_bounds
        body_html, _ = render_all(self.body_contents, bounds, bounds.top)
        footer_html = self.footer.render_pinned(self.footer_bounds) if self.footer is not None else ""

        margin = markup.pt(self.margins)
        page_style = markup.style_attr(
            {
                "width": markup.pt(self.size.width),
                "height": markup.pt(self.size.height),
                "padding": margin,
                "position": "relative",
                "box-sizing": "border-box",
                "page-break-after": "always",
                "overflow": "hidden",
            }
        )
        parts = [
            f'<div class="page" {page_style}>',
            f'<div class="body" {markup.style_attr({"min-height": markup.pt(bounds.height)})}>',
            body_html,
            "</div>",
        ]
        if footer_html:
            footer_style = markup.style_attr(
                {
                    "position": "absolute",
                    "bottom": margin,
                    "left": margin,
                    "right": margin,
                    "height": markup.pt(self.footer_height),
                }
            )
            parts.append(f'<div class="footer" {footer_style}>{footer_html}</div>')
        parts.append("</div>")
        return "".join(parts)
