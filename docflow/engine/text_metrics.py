"""
Text metrics shared by both drawing backends.

Uses ReportLab standard-font metrics to measure strings and break them into
lines, so the canvas and markup paths agree on how many lines a text occupies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from reportlab.pdfbase import pdfmetrics

LINE_HEIGHT_FACTOR = 1.2

_FAMILY_VARIANTS = {
    # family: (regular, bold, italic, bold-italic)
    "helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "times": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "courier": ("Courier", "Courier-Bold", "Courier", "Courier-Bold"),
}

_FAMILY_ALIASES = {
    "arial": "helvetica",
    "sans-serif": "helvetica",
    "times-roman": "times",
    "times new roman": "times",
    "serif": "times",
    "courier new": "courier",
    "monospace": "courier",
}

_CSS_FAMILIES = {
    "helvetica": "Helvetica, Arial, sans-serif",
    "times": "'Times New Roman', Times, serif",
    "courier": "'Courier New', Courier, monospace",
}


def _family_key(font_name: Optional[str]) -> str:
    if not font_name or not font_name.strip():
        return "helvetica"
    lowered = font_name.strip().lower()
    lowered = _FAMILY_ALIASES.get(lowered, lowered)
    if lowered in _FAMILY_VARIANTS:
        return lowered
    for family, variants in _FAMILY_VARIANTS.items():
        if font_name.strip() in variants:
            return family
    return "helvetica"


def resolve_font_variant(font_name: Optional[str], bold: bool, italic: bool) -> str:
    """Map a family name plus weight/style flags onto a standard PDF font."""
    cleaned = (font_name or "").strip()
    variants = _FAMILY_VARIANTS[_family_key(cleaned)]
    # Names that already encode a variant keep their own weight and style
    if cleaned in variants:
        encoded = variants.index(cleaned)
        bold = bold or encoded in (1, 3)
        italic = italic or encoded in (2, 3)
    index = (1 if bold else 0) + (2 if italic else 0)
    return variants[index]


def css_font_family(font_name: Optional[str]) -> str:
    return _CSS_FAMILIES[_family_key(font_name)]


def string_width(text: str, font_name: str, font_size: float) -> float:
    return pdfmetrics.stringWidth(text, font_name, font_size)


def ascent_descent(font_name: str, font_size: float) -> Tuple[float, float]:
    """Return ascent (positive) and descent (negative or zero) in points."""
    return pdfmetrics.getAscentDescent(font_name, font_size)


def line_height(font_size: float) -> float:
    return font_size * LINE_HEIGHT_FACTOR


def wrap_text(text: str, font_name: str, font_size: float, max_width: float) -> List[str]:
    """Break ``text`` into lines no wider than ``max_width``.

    Explicit newlines always break. Words longer than the available width are
    kept on a line of their own rather than split. An empty text yields a
    single empty line so that every text occupies at least one line.
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if max_width > 0 and string_width(candidate, font_name, font_size) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines or [""]


@dataclass(slots=True)
class TextLayout:
    """Wrapped lines and the vertical space they take."""

    lines: List[str] = field(default_factory=list)
    font_name: str = "Helvetica"
    font_size: float = 16.0

    @property
    def line_height(self) -> float:
        return line_height(self.font_size)

    @property
    def height(self) -> float:
        return self.line_height * max(1, len(self.lines))


def layout_text(text: str, font_name: str, font_size: float, max_width: float) -> TextLayout:
    return TextLayout(
        lines=wrap_text(text, font_name, font_size, max_width),
        font_name=font_name,
        font_size=font_size,
    )
