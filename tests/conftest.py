"""
Pytest configuration for docflow
"""

import logging
import sys
from pathlib import Path
from typing import List, Tuple
from unittest.mock import Mock

import pytest
from reportlab.pdfgen.canvas import Canvas

from docflow.engine.content import ContentNode, Rendered
from docflow.engine.geometry import Rect


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Temporary directory for output files."""
    return tmp_path


@pytest.fixture
def mock_canvas():
    """Create a mock ReportLab canvas."""
    return Mock(spec=Canvas)


@pytest.fixture
def body_bounds() -> Rect:
    """Body area of an A4 page with 40pt margins and a 40pt footer."""
    return Rect(40, 80, 515, 722)


class RecordingNode(ContentNode):
    """Content node that records the bounds and cursor it receives and advances by a fixed height."""

    def __init__(self, height: float = 10.0, label: str = "node"):
        self.height = height
        self.label = label
        self.draw_calls: List[Tuple[Rect, float]] = []
        self.render_calls: List[Tuple[Rect, float]] = []

    def draw(self, canvas, bounds: Rect, cursor: float) -> float:
        self.draw_calls.append((bounds, cursor))
        return cursor - self.height

    def render(self, bounds: Rect, cursor: float) -> Rendered:
        self.render_calls.append((bounds, cursor))
        return f"<div>{self.label}</div>", cursor - self.height


@pytest.fixture
def recording_node():
    """Factory for RecordingNode instances."""
    return RecordingNode


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    # Ignore logging errors during tests
    logging.raiseExceptions = False
