"""Geometry primitives and helpers for layout calculations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


MM_PER_POINT = 0.3528


@dataclass(slots=True)
class Size:
    width: float
    height: float

    @classmethod
    def from_tuple(cls, value: Iterable[float]) -> "Size":
        width, height = value
        return cls(float(width), float(height))

    def as_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)


@dataclass(slots=True)
class Rect:
    """Axis-aligned rectangle in PDF points; ``y`` is the bottom edge."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.height

    def with_x(self, x: float, width: float) -> "Rect":
        return Rect(x=x, y=self.y, width=width, height=self.height)


class PageSize:
    """Named page size presets in points."""

    A4 = Size(595.0, 842.0)
    LETTER = Size(612.0, 792.0)
    LEGAL = Size(612.0, 1008.0)

    @classmethod
    def resolve(cls, value: Union[str, Size, Iterable[float]]) -> Size:
        """Resolve a preset name, a Size or a ``(width, height)`` pair."""
        if isinstance(value, Size):
            return value
        if isinstance(value, str):
            preset = getattr(cls, value.upper(), None)
            if not isinstance(preset, Size):
                raise ValueError(f"Unsupported page size preset: {value}")
            return Size(preset.width, preset.height)
        values = list(value)
        if len(values) != 2:
            raise ValueError("Page size iterable must contain exactly two values")
        return Size.from_tuple(values)


def points_to_mm(value: float) -> int:
    """Convert points to whole millimetres."""
    return int(round(value * MM_PER_POINT))
