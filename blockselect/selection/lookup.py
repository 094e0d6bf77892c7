"""Block lookup and cursor-to-block resolution.

Every lookup iterates the block collection in order and returns the first
match, so overlapping blocks resolve to whichever comes first. Absence is
signalled with None, never with an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import LayoutBlock, NormalizedPoint, NormalizedRect

logger = logging.getLogger(__name__)

__all__ = [
    "CursorPlacement",
    "classify_cursor",
    "find_block_containing",
    "find_block_containing_rect",
    "find_block_for_cursor",
    "find_first_content_block",
    "get_next_block",
    "get_previous_block",
]


class CursorPlacement(Enum):
    """Position of a cursor relative to one block.

    - INSIDE: the block's bbox contains the cursor
    - BELOW: the cursor is strictly below the block's bottom edge
    - RIGHT_ON_ROW: the cursor is within the block's vertical span and
      strictly right of its right edge
    - UNRESOLVED: anything else (above, or left on the same row)

    BELOW and RIGHT_ON_ROW mean the cursor has "passed" the block in
    reading terms.
    """

    INSIDE = "inside"
    BELOW = "below"
    RIGHT_ON_ROW = "right_on_row"
    UNRESOLVED = "unresolved"

    @property
    def passed(self) -> bool:
        return self in (CursorPlacement.BELOW, CursorPlacement.RIGHT_ON_ROW)


def classify_cursor(block: LayoutBlock, point: NormalizedPoint) -> CursorPlacement:
    """Classify a cursor position against a single block."""
    bbox = block.bbox
    if bbox.contains(point.x, point.y):
        return CursorPlacement.INSIDE
    if point.y > bbox.bottom:
        return CursorPlacement.BELOW
    if bbox.top <= point.y <= bbox.bottom and point.x > bbox.right:
        return CursorPlacement.RIGHT_ON_ROW
    return CursorPlacement.UNRESOLVED


def find_block_containing(blocks: Sequence[LayoutBlock], point: NormalizedPoint) -> LayoutBlock | None:
    """First block whose bbox contains the point, or None."""
    for block in blocks:
        if block.contains(point):
            return block
    return None


def find_block_containing_rect(blocks: Sequence[LayoutBlock], rect: NormalizedRect) -> LayoutBlock | None:
    """First block holding the center of ``rect``, or None."""
    for block in blocks:
        if block.contains_rect(rect):
            return block
    return None


def get_next_block(blocks: Sequence[LayoutBlock], current: LayoutBlock | None) -> LayoutBlock | None:
    """Block ranked immediately after ``current``.

    Reading orders need not be contiguous; when no block holds
    ``current.reading_order + 1`` the result is None.
    """
    if current is None:
        return None
    wanted = current.reading_order + 1
    for block in blocks:
        if block.reading_order == wanted:
            return block
    return None


def get_previous_block(blocks: Sequence[LayoutBlock], current: LayoutBlock | None) -> LayoutBlock | None:
    """Block ranked immediately before ``current``, or None."""
    if current is None:
        return None
    wanted = current.reading_order - 1
    for block in blocks:
        if block.reading_order == wanted:
            return block
    return None


def find_first_content_block(blocks: Sequence[LayoutBlock]) -> LayoutBlock | None:
    """Block with the lowest non-negative reading order.

    Negatively ranked blocks (running headers and the like) are skipped.
    """
    first: LayoutBlock | None = None
    for block in blocks:
        if block.reading_order < 0:
            continue
        if first is None or block.reading_order < first.reading_order:
            first = block
    return first


def find_block_for_cursor(blocks: Sequence[LayoutBlock], point: NormalizedPoint) -> LayoutBlock | None:
    """Resolve a cursor to the block that governs it.

    Handles cursors in inter-block whitespace (column gutters, margins):

    1. A block directly containing the cursor wins.
    2. Otherwise find the highest-ranked block the cursor has passed
       (see CursorPlacement). Only non-negative ranks can anchor, and the
       first block reaching the highest rank is kept.
    3. The cursor then belongs to the block after that one, or to the
       passed block itself when it is the last in reading order.
    4. If nothing was passed, the first content block governs.

    Args:
        blocks: Page layout blocks
        point: Cursor position in normalized coordinates

    Returns:
        Governing block, or None for an empty block set (or a set holding
        only negatively ranked blocks that the cursor has not entered)

    Example:
        >>> # Gutter between a left column (order 0) and right column (order 1),
        >>> # level with the left column: the cursor has passed the left column
        >>> find_block_for_cursor(blocks, NormalizedPoint(0.5, 0.5)).id
        'right'
    """
    direct = find_block_containing(blocks, point)
    if direct is not None:
        return direct

    best: LayoutBlock | None = None
    best_order = -1
    for block in blocks:
        if classify_cursor(block, point).passed and block.reading_order > best_order:
            best_order = block.reading_order
            best = block

    if best is not None:
        following = get_next_block(blocks, best)
        resolved = following if following is not None else best
        logger.debug(
            "Cursor (%.3f, %.3f) passed block %r (order %d), resolved to %r",
            point.x,
            point.y,
            best.id,
            best.reading_order,
            resolved.id,
        )
        return resolved

    return find_first_content_block(blocks)
