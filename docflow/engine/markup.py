"""Small helpers for building inline-styled HTML fragments."""

from __future__ import annotations

from html import escape
from typing import Mapping, Optional


def pt(value: float) -> str:
    """Format a point value for CSS, dropping redundant decimals."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        text = "0"
    return f"{text}pt"


def style_attr(declarations: Mapping[str, Optional[str]]) -> str:
    """Render a ``style="..."`` attribute, skipping declarations set to None."""
    body = "".join(f"{key}:{value};" for key, value in declarations.items() if value is not None)
    return f'style="{body}"'


def text(value: str) -> str:
    return escape(value, quote=False)


def attribute(value: str) -> str:
    return escape(value, quote=True)
