"""Base classes and interfaces for document renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..exceptions import ContextCreationError

if TYPE_CHECKING:
    from ..engine.document import Document
    from ..engine.page import Page


class IRenderer(ABC):
    """Interface for renderer implementations."""

    @abstractmethod
    def render(self, document: "Document") -> bytes:
        """Render every page of ``document`` and return the PDF bytes."""


def first_page(document: "Document") -> "Page":
    """Return the page that sizes the output surface, validating it."""
    if not document.pages:
        raise ContextCreationError("Cannot create output context", "document has no pages")
    page = document.pages[0]
    if page.size.width <= 0 or page.size.height <= 0:
        raise ContextCreationError(
            "Cannot create output context",
            f"invalid page size {page.size.width}x{page.size.height}",
        )
    return page
