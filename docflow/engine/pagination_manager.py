"""
Pagination of variable-length record lists.

Splits records into one chunk per page from estimated fixed-overhead heights,
then checks whether the trailing block (totals, notes, signatures) still fits
under the last chunk and adds a dedicated page when it does not.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

from ..exceptions import LayoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationInputs:
    """
    Geometry driving pagination, all in points.

    Attributes:
        row_height: Height of one data row (``h``).
        header_row_height: Height of the repeated table header row (``hh``).
        body_height: Usable body height of a page (``B``).
        first_page_overhead: Fixed content above the table on page one (``H1``).
        continuation_overhead: Fixed content above the table on later pages (``H0``).
        trailing_height: Fixed content that must follow the last row (``L``).
    """

    row_height: float
    header_row_height: float
    body_height: float
    first_page_overhead: float = 0.0
    continuation_overhead: float = 0.0
    trailing_height: float = 0.0

    def __post_init__(self) -> None:
        if self.row_height <= 0:
            raise LayoutError("Row height must be positive", f"got {self.row_height}")
        if self.body_height < 0:
            logger.warning(
                f"Page body height is negative ({self.body_height:.1f}pt); "
                "margins and footer leave no room, placing one row per page"
            )
        for name in (
            "header_row_height",
            "first_page_overhead",
            "continuation_overhead",
            "trailing_height",
        ):
            value = getattr(self, name)
            if value < 0:
                raise LayoutError(f"{name} must not be negative", f"got {value}")

    @property
    def max_rows_first(self) -> int:
        available = self.body_height - self.first_page_overhead - self.header_row_height
        return max(1, math.floor(available / self.row_height))

    @property
    def max_rows_continuation(self) -> int:
        available = self.body_height - self.header_row_height
        return max(1, math.floor(available / self.row_height))

    def used_height(self, page_index: int, rows: int) -> float:
        """Estimated body height consumed by overhead, header row and ``rows`` rows."""
        overhead = self.first_page_overhead if page_index == 0 else self.continuation_overhead
        return overhead + self.header_row_height + rows * self.row_height


@dataclass
class PaginationPlan(Generic[T]):
    """Record chunks, one per page, plus the capacities that produced them."""

    chunks: List[List[T]]
    max_rows_first: int
    max_rows_continuation: int
    overflow_page_added: bool = False
    trailing_page_index: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.trailing_page_index < 0:
            self.trailing_page_index = len(self.chunks) - 1

    @property
    def page_count(self) -> int:
        return len(self.chunks)

    def records(self) -> List[T]:
        return [record for chunk in self.chunks for record in chunk]

    def is_first(self, index: int) -> bool:
        return index == 0

    def is_last(self, index: int) -> bool:
        return index == len(self.chunks) - 1

    def carries_trailing(self, index: int) -> bool:
        return index == self.trailing_page_index


def split_records(records: Sequence[T], first_capacity: int, capacity: int) -> List[List[T]]:
    """Chunk ``records``: the first chunk holds up to ``first_capacity``, the rest up to ``capacity``.

    Always returns at least one chunk; an empty record list yields ``[[]]``.
    """
    items = list(records)
    chunks: List[List[T]] = [items[:first_capacity]]
    offset = len(chunks[0])
    while offset < len(items):
        chunks.append(items[offset:offset + capacity])
        offset += capacity
    return chunks


class PaginationManager:
    """Two-pass record pagination.

    Pass one fills pages greedily using the first-page and continuation
    capacities. Pass two estimates the space used on the last chunk's page
    and appends an empty chunk when the trailing block would not fit.
    """

    def __init__(self, inputs: PaginationInputs) -> None:
        self.inputs = inputs
        if inputs.trailing_height > inputs.body_height:
            logger.warning(
                f"Trailing block ({inputs.trailing_height:.1f}pt) is taller than the page body "
                f"({inputs.body_height:.1f}pt) and will overflow"
            )

    def paginate(self, records: Sequence[T]) -> PaginationPlan[T]:
        inputs = self.inputs
        first_capacity = inputs.max_rows_first
        capacity = inputs.max_rows_continuation

        # Pass 1: distribute rows
        chunks = split_records(records, first_capacity, capacity)

        # Pass 2: make room for the trailing block
        last_index = len(chunks) - 1
        used = inputs.used_height(last_index, len(chunks[last_index]))
        overflow = used + inputs.trailing_height > inputs.body_height
        if overflow:
            logger.debug(
                f"Trailing block needs {inputs.trailing_height:.1f}pt but only "
                f"{inputs.body_height - used:.1f}pt remain on page {last_index + 1}; adding a page"
            )
            chunks.append([])

        logger.info(
            f"Paginated {len(records)} records into {len(chunks)} pages "
            f"(first page {first_capacity} rows, continuation {capacity} rows)"
        )
        return PaginationPlan(
            chunks=chunks,
            max_rows_first=first_capacity,
            max_rows_continuation=capacity,
            overflow_page_added=overflow,
        )

    def paginate_summary_first(self, records: Sequence[T]) -> PaginationPlan[T]:
        """Page one carries the summary only; records follow at continuation capacity."""
        capacity = self.inputs.max_rows_continuation
        items = list(records)
        chunks: List[List[T]] = [[]]
        if items:
            chunks.extend(split_records(items, capacity, capacity))

        logger.info(f"Paginated {len(items)} records into {len(chunks)} pages after a summary page")
        return PaginationPlan(
            chunks=chunks,
            max_rows_first=0,
            max_rows_continuation=capacity,
            overflow_page_added=False,
            trailing_page_index=0,
        )


def paginate(records: Sequence[T], inputs: PaginationInputs) -> PaginationPlan[T]:
    return PaginationManager(inputs).paginate(records)
