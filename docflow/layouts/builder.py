"""Paginated document assembly.

``DocumentLayout`` turns a record list plus a handful of fixed sections into
a :class:`~docflow.engine.document.Document`: the records are split into
per-page chunks by :class:`~docflow.engine.pagination_manager.PaginationManager`
and every chunk becomes one page built from the sections that belong on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from ..engine.columns import ColumnItem, Columns
from ..engine.content import ContentNode, FilledBox, Spacer, measure_height
from ..engine.document import Document
from ..engine.geometry import PageSize, Size
from ..engine.layout_primitives import FLEX, Color, Fixed, TableStyle
from ..engine.page import DEFAULT_MARGIN, Footer, Page
from ..engine.pagination_manager import PaginationInputs, PaginationManager, PaginationPlan
from ..engine.table import Column, Table

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTINUATION_BAR_HEIGHT = 20.0
CONTINUATION_GAP = 10.0


class LayoutStyle(str, Enum):
    CLASSIC = "classic"
    SIDEBAR = "sidebar"
    STACKED = "stacked"
    SUMMARY_FIRST = "summary_first"


@dataclass(frozen=True)
class Section:
    """Fixed content placed around the record table.

    ``height`` is the estimate used for pagination. When it is omitted the
    contents are measured offscreen at the layout's content width.
    """

    contents: Tuple[ContentNode, ...] = ()
    height: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))

    def resolved_height(self, width: float) -> float:
        if self.height is not None:
            return self.height
        return measure_height(self.contents, width)


@dataclass
class DocumentLayout(Generic[T]):
    columns: Sequence[Column]
    records: Sequence[T] = ()
    row_formatter: Optional[Callable[[T], Sequence[str]]] = None
    table_style: TableStyle = field(default_factory=TableStyle)
    header: Section = field(default_factory=Section)
    continuation_header: Optional[Section] = None
    trailing: Section = field(default_factory=Section)
    footer: Optional[Footer] = None
    page_size: Union[str, Size] = field(default_factory=lambda: PageSize.A4)
    margins: float = DEFAULT_MARGIN
    style: LayoutStyle = LayoutStyle.CLASSIC
    accent_color: Color = Color.DARK_GRAY
    sidebar_width: float = 14.0
    sidebar_gap: float = 16.0

    def __post_init__(self) -> None:
        self.page_size = PageSize.resolve(self.page_size)
        self.style = LayoutStyle(self.style)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def footer_height(self) -> float:
        return self.footer.height if self.footer is not None else 0.0

    @property
    def body_height(self) -> float:
        return self.page_size.height - 2 * self.margins - self.footer_height

    @property
    def content_width(self) -> float:
        width = self.page_size.width - 2 * self.margins
        if self.style is LayoutStyle.SIDEBAR:
            width -= self.sidebar_width + self.sidebar_gap
        return width

    def resolved_continuation_header(self) -> Optional[Section]:
        if self.continuation_header is not None:
            return self.continuation_header
        if self.style is LayoutStyle.STACKED:
            return Section(
                contents=[FilledBox(color=self.accent_color, height=CONTINUATION_BAR_HEIGHT), Spacer(CONTINUATION_GAP)],
                height=CONTINUATION_BAR_HEIGHT + CONTINUATION_GAP,
            )
        return None

    def pagination_inputs(self) -> PaginationInputs:
        width = self.content_width
        continuation = self.resolved_continuation_header()
        return PaginationInputs(
            row_height=self.table_style.row_height,
            header_row_height=self.table_style.row_height,
            body_height=self.body_height,
            first_page_overhead=self.header.resolved_height(width),
            continuation_overhead=continuation.resolved_height(width) if continuation else 0.0,
            trailing_height=self.trailing.resolved_height(width),
        )

    def plan(self) -> PaginationPlan[T]:
        manager = PaginationManager(self.pagination_inputs())
        if self.style is LayoutStyle.SUMMARY_FIRST:
            return manager.paginate_summary_first(self.records)
        return manager.paginate(self.records)

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------
    def build(self) -> Document:
        plan = self.plan()
        continuation = self.resolved_continuation_header()
        pages = [self._build_page(index, chunk, plan, continuation) for index, chunk in enumerate(plan.chunks)]
        logger.info(f"Built {self.style.value} layout: {len(self.records)} records on {len(pages)} pages")
        return Document(pages)

    def _row(self, record: T) -> Sequence[str]:
        if self.row_formatter is not None:
            return tuple(self.row_formatter(record))
        return tuple(str(value) for value in record)

    def _table(self, chunk: Sequence[T]) -> Table:
        return Table(
            rows=[self._row(record) for record in chunk],
            columns=self.columns,
            style=self.table_style,
            show_header=True,
        )

    def _build_page(
        self,
        index: int,
        chunk: Sequence[T],
        plan: PaginationPlan[T],
        continuation: Optional[Section],
    ) -> Page:
        body: List[ContentNode] = []
        if index == 0:
            body.extend(self.header.contents)
        elif continuation is not None:
            body.extend(continuation.contents)

        summary_page = self.style is LayoutStyle.SUMMARY_FIRST and index == 0
        if not summary_page:
            body.append(self._table(chunk))
        if plan.carries_trailing(index):
            body.extend(self.trailing.contents)

        if self.style is LayoutStyle.SIDEBAR:
            body = [self._with_sidebar(body)]

        if self.footer is not None:
            body.append(self.footer)
        logger.debug(f"Page {index + 1}/{plan.page_count}: {len(chunk)} rows")
        return Page(body, size=self.page_size, margins=self.margins)

    def _with_sidebar(self, body: Sequence[ContentNode]) -> Columns:
        bar = FilledBox(color=self.accent_color, height=self.page_size.height, padding=0)
        return Columns(
            items=[ColumnItem(Fixed(self.sidebar_width), [bar]), ColumnItem(FLEX, body)],
            spacing=self.sidebar_gap,
        )


def build_document(layout: DocumentLayout) -> Document:
    return layout.build()
