"""Value types shared by content nodes: colors, alignment, column widths, table styles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union

from reportlab.lib import colors

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with components in the 0..1 range."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def white_level(cls, white: float, alpha: float = 1.0) -> "Color":
        return cls(white, white, white, alpha)

    @property
    def css(self) -> str:
        r = int(self.red * 255)
        g = int(self.green * 255)
        b = int(self.blue * 255)
        if self.alpha < 1.0:
            return f"rgba({r},{g},{b},{self.alpha:.2f})"
        return f"rgb({r},{g},{b})"

    def tint(self, strength: float) -> "Color":
        """Mix the color towards white, keeping ``strength`` of the original."""
        def mix(component: float) -> float:
            return component * strength + (1.0 - strength)

        return Color(mix(self.red), mix(self.green), mix(self.blue), self.alpha)

    def to_reportlab(self) -> colors.Color:
        return colors.Color(self.red, self.green, self.blue, alpha=self.alpha)


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.GRAY = Color.white_level(0.5)
Color.LIGHT_GRAY = Color.white_level(0.75)
Color.DARK_GRAY = Color.white_level(0.25)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 0.6, 0.0)
Color.BLUE = Color(0.0, 0.3, 1.0)


class TextAlignment(str, Enum):
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"

    @property
    def css(self) -> str:
        return {
            TextAlignment.LEADING: "left",
            TextAlignment.CENTER: "center",
            TextAlignment.TRAILING: "right",
        }[self]

    @classmethod
    def parse(cls, value: Union[str, "TextAlignment", None]) -> "TextAlignment":
        if isinstance(value, TextAlignment):
            return value
        if value is None:
            return cls.LEADING
        if not isinstance(value, str):
            raise ValueError(f"Alignment must be a string, got {value!r}")
        aliases = {"left": cls.LEADING, "right": cls.TRAILING, "centre": cls.CENTER}
        key = value.lower()
        if key in aliases:
            return aliases[key]
        return cls(key)

    def offset(self, available: float, used: float) -> float:
        """Horizontal offset of content ``used`` wide inside ``available`` space."""
        if self is TextAlignment.CENTER:
            return (available - used) / 2
        if self is TextAlignment.TRAILING:
            return available - used
        return 0.0


@dataclass(frozen=True, slots=True)
class Fixed:
    width: float


@dataclass(frozen=True, slots=True)
class Flex:
    pass


FLEX = Flex()

ColumnWidth = Union[Fixed, Flex]


def resolve_column_widths(
    specs: Sequence[ColumnWidth], total_width: float, spacing: float = 0.0
) -> List[float]:
    """Divide ``total_width`` among fixed and flexible columns.

    Fixed columns keep their width. Whatever is left after fixed widths and the
    ``spacing`` between adjacent columns is shared evenly by the flex columns.
    Negative remainders are passed through unchanged.

    Args:
        specs: Width specification per column
        total_width: Available horizontal span
        spacing: Gap between adjacent columns

    Returns:
        One resolved width per column, in order
    """
    if not specs:
        return []

    fixed_total = sum(spec.width for spec in specs if isinstance(spec, Fixed))
    flex_count = sum(1 for spec in specs if not isinstance(spec, Fixed))
    total_spacing = spacing * (len(specs) - 1)
    remaining = total_width - fixed_total - total_spacing
    flex_width = remaining / flex_count if flex_count else 0.0

    if flex_count and flex_width < 0:
        logger.debug(f"Flex columns resolved to negative width {flex_width:.2f}")

    return [spec.width if isinstance(spec, Fixed) else flex_width for spec in specs]


@dataclass(frozen=True, slots=True)
class TableStyle:
    header_background: Color = field(default_factory=lambda: Color.white_level(0.85))
    header_text_color: Color = field(default_factory=lambda: Color.BLACK)
    header_font_size: float = 10.0
    cell_font_size: float = 10.0
    row_height: float = 20.0
    alternate_row_color: Optional[Color] = None
    border_color: Color = field(default_factory=lambda: Color.white_level(0.7))
    border_width: float = 0.25
    cell_padding: float = 4.0
    cell_bold: bool = False
    font_name: str = "Helvetica"
