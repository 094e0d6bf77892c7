"""Block-aware selection algorithms.

Provides block lookup, reading-order helpers, the geometry-only stream
selectors used as fallback, and the cross-block selection state machine.
"""

from .cross_block import CrossBlockSelector
from .helper import BlockSelectionHelper
from .lookup import (
    CursorPlacement,
    classify_cursor,
    find_block_containing,
    find_block_containing_rect,
    find_block_for_cursor,
    find_first_content_block,
    get_next_block,
    get_previous_block,
)
from .registry import StreamSelectorRegistry, stream_selector_registry
from .rows import compare_areas, ordered_points, same_row, sort_by_rows
from .stream import DocumentOrderStreamSelector, GeometricStreamSelector

__all__ = [
    "BlockSelectionHelper",
    "CrossBlockSelector",
    "CursorPlacement",
    "DocumentOrderStreamSelector",
    "GeometricStreamSelector",
    "StreamSelectorRegistry",
    "classify_cursor",
    "compare_areas",
    "find_block_containing",
    "find_block_containing_rect",
    "find_block_for_cursor",
    "find_first_content_block",
    "get_next_block",
    "get_previous_block",
    "ordered_points",
    "same_row",
    "sort_by_rows",
    "stream_selector_registry",
]
