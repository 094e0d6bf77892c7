"""Pytest configuration and shared fixtures for blockselect tests.

This module provides:
- Page layouts used across selection tests (two columns, full-width
  header/footer around two columns, tightly spaced lines)
- Builders for entities, blocks and pages live in tests/builders.py
- Test configuration and path setup
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is importable when running tests via python -m pytest
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from blockselect.page import TextPage  # noqa: E402
from blockselect.types import LayoutBlock  # noqa: E402
from tests.builders import make_block, make_page, make_words  # noqa: E402


# ==================== Block Layout Fixtures ====================


@pytest.fixture
def two_column_blocks() -> list[LayoutBlock]:
    """Left column (order 0) and right column (order 1) with a gutter at x 0.45-0.55."""
    return [
        make_block("left", (0.0, 0.0, 0.45, 1.0), 0),
        make_block("right", (0.55, 0.0, 1.0, 1.0), 1),
    ]


@pytest.fixture
def header_column_blocks() -> list[LayoutBlock]:
    """Two inset columns plus a running header ranked before all content.

    The header is listed last to check that lookups do not depend on
    collection order.
    """
    return [
        make_block("left_col", (0.05, 0.1, 0.45, 0.9), 0),
        make_block("right_col", (0.55, 0.1, 0.95, 0.9), 1),
        make_block("header", (0.05, 0.02, 0.95, 0.08), -1),
    ]


# ==================== Page Fixtures ====================


@pytest.fixture
def two_column_page(two_column_blocks: list[LayoutBlock]) -> TextPage:
    """Three words per column; "Column" appears in both columns."""
    words = make_words(
        ("Left", (0.1, 0.1, 0.2, 0.15)),
        ("Column", (0.1, 0.2, 0.25, 0.25)),
        ("Text", (0.1, 0.3, 0.2, 0.35)),
        ("Right", (0.6, 0.1, 0.7, 0.15)),
        ("Column", (0.6, 0.2, 0.75, 0.25)),
        ("Content", (0.6, 0.3, 0.75, 0.35)),
    )
    return make_page(words, two_column_blocks)


@pytest.fixture
def full_width_page() -> TextPage:
    """Full-width header, two stacked blocks per column, full-width footer.

    Reading order:
        0: header
        1: left_top    3: right_top
        2: left_bot    4: right_bot
        5: footer
    """
    words = make_words(
        ("Header", (0.1, 0.02, 0.9, 0.08)),
        ("LeftTop", (0.1, 0.15, 0.35, 0.25)),
        ("LeftBot", (0.1, 0.35, 0.35, 0.45)),
        ("RightTop", (0.6, 0.15, 0.85, 0.25)),
        ("RightBot", (0.6, 0.35, 0.85, 0.45)),
        ("Footer", (0.1, 0.55, 0.9, 0.65)),
    )
    blocks = [
        make_block("header", (0.0, 0.0, 1.0, 0.1), 0),
        make_block("left_top", (0.0, 0.1, 0.45, 0.3), 1),
        make_block("left_bot", (0.0, 0.3, 0.45, 0.5), 2),
        make_block("right_top", (0.55, 0.1, 1.0, 0.3), 3),
        make_block("right_bot", (0.55, 0.3, 1.0, 0.5), 4),
        make_block("footer", (0.0, 0.5, 1.0, 0.7), 5),
    ]
    return make_page(words, blocks)


@pytest.fixture
def column_jump_page() -> TextPage:
    """Two three-line columns above a full-width footer."""
    words = make_words(
        ("L1", (0.1, 0.1, 0.2, 0.2)),
        ("L2", (0.1, 0.25, 0.2, 0.35)),
        ("L3", (0.1, 0.4, 0.2, 0.5)),
        ("R1", (0.6, 0.1, 0.7, 0.2)),
        ("R2", (0.6, 0.25, 0.7, 0.35)),
        ("R3", (0.6, 0.4, 0.7, 0.5)),
        ("Footer", (0.1, 0.6, 0.9, 0.7)),
    )
    blocks = [
        make_block("left", (0.0, 0.0, 0.45, 0.55), 0),
        make_block("right", (0.55, 0.0, 1.0, 0.55), 1),
        make_block("footer", (0.0, 0.55, 1.0, 0.75), 2),
    ]
    return make_page(words, blocks)


@pytest.fixture
def tight_lines_page(two_column_blocks: list[LayoutBlock]) -> TextPage:
    """Two lines 0.019 apart in the left column, one line in the right column."""
    words = make_words(
        ("L1", (0.1, 0.100, 0.2, 0.110)),
        ("L2", (0.1, 0.119, 0.2, 0.129)),
        ("R1", (0.6, 0.150, 0.7, 0.160)),
    )
    return make_page(words, two_column_blocks)


@pytest.fixture
def page_dump() -> dict:
    """JSON-compatible page dump of a two-column page."""
    return {
        "page": 0,
        "words": [
            {"text": "Left", "area": [0.1, 0.1, 0.2, 0.15]},
            {"text": "Right", "area": [0.6, 0.1, 0.7, 0.15]},
        ],
        "blocks": [
            {"id": "left", "page": 0, "bbox": [0.0, 0.0, 0.45, 1.0], "block_type": "TEXT", "reading_order": 0},
            {"id": "right", "page": 0, "bbox": [0.55, 0.0, 1.0, 1.0], "block_type": "TEXT", "reading_order": 1},
        ],
    }
