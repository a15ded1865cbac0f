"""Display formatting for record rows and totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class RecordFormatter:
    """Formats numbers for table cells.

    Grouping uses ``,`` and decimals ``.`` by default; both can be swapped for
    locales such as ``1.234,50``.
    """

    grouping_separator: str = ","
    decimal_separator: str = "."
    currency: Optional[str] = None

    def label(self, text: str) -> str:
        return text

    def amount(self, value: Number) -> str:
        """Grouped, exactly two decimals: ``1234.5`` -> ``1,234.50``."""
        return self._localize(f"{float(value):,.2f}")

    def quantity(self, value: Number) -> str:
        """Grouped, at most two decimals with trailing zeros dropped: ``2.50`` -> ``2.5``."""
        text = f"{float(value):,.2f}".rstrip("0").rstrip(".")
        if text == "-0":
            text = "0"
        return self._localize(text)

    def percent(self, value: Number) -> str:
        if float(value).is_integer():
            return "%.0f%%" % value
        return "%.2f%%" % value

    def money(self, value: Number) -> str:
        text = self.amount(value)
        return f"{text} {self.currency}" if self.currency else text

    def _localize(self, text: str) -> str:
        if self.grouping_separator == "," and self.decimal_separator == ".":
            return text
        return text.translate({ord(","): self.grouping_separator, ord("."): self.decimal_separator})
