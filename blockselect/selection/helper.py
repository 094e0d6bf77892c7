"""Reading-order helpers for block-aware selection.

This module provides BlockSelectionHelper, the public entry point for:
- Block lookup (point, rectangle and cursor resolution)
- Reading-order range selection
- Block ids implicated by a selection (for UI highlighting)
- Text extraction in reading order
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ROW_TOLERANCE, UNORDERED_BUCKET
from .lookup import (
    find_block_containing,
    find_block_containing_rect,
    find_block_for_cursor,
    get_next_block,
    get_previous_block,
)
from .rows import sort_by_rows

if TYPE_CHECKING:
    from ..types import LayoutBlock, NormalizedPoint, NormalizedRect, RegularAreaRect, TextEntity

logger = logging.getLogger(__name__)

__all__ = ["BlockSelectionHelper"]

# Group key: (is_unordered, reading_order). Unowned entities sort after every block.
_GroupKey = tuple[bool, int]
_UNORDERED_KEY: _GroupKey = (True, UNORDERED_BUCKET)


class BlockSelectionHelper:
    """Stateless helpers for constraining selection to layout blocks.

    Layout blocks come from an external layout analysis service. These
    helpers use them to keep selection inside columns and to follow the
    blocks' reading order instead of raw page geometry.

    Example:
        >>> ids = BlockSelectionHelper.get_block_ids_for_selection(blocks, start, end)
        >>> text = BlockSelectionHelper.extract_text_in_reading_order(words, blocks, area, False)
    """

    find_block_containing = staticmethod(find_block_containing)
    find_block_containing_rect = staticmethod(find_block_containing_rect)
    find_block_for_cursor = staticmethod(find_block_for_cursor)
    get_next_block = staticmethod(get_next_block)
    get_previous_block = staticmethod(get_previous_block)

    @staticmethod
    def get_blocks_in_reading_order_range(
        blocks: Sequence[LayoutBlock],
        min_order: int,
        max_order: int,
    ) -> list[LayoutBlock]:
        """Collect blocks with ``min_order <= reading_order <= max_order``.

        Collection order is preserved. Callers normalize the bounds:
        ``min_order > max_order`` yields an empty list.

        Args:
            blocks: Page layout blocks
            min_order: Minimum reading order (inclusive)
            max_order: Maximum reading order (inclusive)

        Returns:
            Blocks in the range
        """
        return [block for block in blocks if min_order <= block.reading_order <= max_order]

    @staticmethod
    def get_block_ids_for_selection(
        blocks: Sequence[LayoutBlock],
        selection_start: NormalizedPoint,
        selection_end: NormalizedPoint,
    ) -> list[str]:
        """Get ids of the blocks implicated by a selection.

        Resolves both points exactly like the selection algorithm does, so
        highlighted blocks always match the extracted text.

        Args:
            blocks: Page layout blocks
            selection_start: Where the user started the selection
            selection_end: Where the user currently is

        Returns:
            Block ids sorted by reading order (ties keep collection order),
            empty when either point resolves to no block
        """
        start_block = find_block_for_cursor(blocks, selection_start)
        end_block = find_block_for_cursor(blocks, selection_end)
        if start_block is None or end_block is None:
            return []

        min_order = min(start_block.reading_order, end_block.reading_order)
        max_order = max(start_block.reading_order, end_block.reading_order)

        in_range = BlockSelectionHelper.get_blocks_in_reading_order_range(blocks, min_order, max_order)
        in_range.sort(key=lambda block: block.reading_order)
        return [block.id for block in in_range]

    @staticmethod
    def is_entity_in_any_block(entity_area: NormalizedRect, blocks: Sequence[LayoutBlock]) -> bool:
        """Check whether an entity's center falls within any of ``blocks``.

        An empty block list imposes no constraint and returns True.
        """
        if not blocks:
            return True
        center = entity_area.center
        return any(block.bbox.contains(center.x, center.y) for block in blocks)

    @staticmethod
    def extract_text_in_reading_order(
        words: Sequence[TextEntity],
        blocks: Sequence[LayoutBlock],
        area: RegularAreaRect | NormalizedRect | None,
        use_intersects: bool,
        row_tolerance: float = ROW_TOLERANCE,
    ) -> str:
        """Extract text from entities, respecting block reading order.

        Entities matching ``area`` are grouped by the block holding their
        center, sorted within each block by row then left edge, and
        concatenated in ascending reading order. Entities outside every block
        come last. No separators are inserted between runs.

        Negatively ranked owners (running headers and the like) keep their own
        order and so come before all content, unlike the classic extractor
        that filed them with the unowned entities at the end.

        Args:
            words: Page entities
            blocks: Layout blocks defining reading order (may be empty)
            area: Region to extract from; None extracts the whole page
            use_intersects: Match entities intersecting ``area`` instead of
                entities whose center lies inside it
            row_tolerance: Row band height in normalized units

        Returns:
            Text in reading order
        """
        groups: dict[_GroupKey, list[TextEntity]] = defaultdict(list)

        for entity in words:
            if area is not None:
                if use_intersects:
                    matches = area.intersects(entity.area)
                else:
                    center = entity.area.center
                    matches = area.contains(center.x, center.y)
                if not matches:
                    continue

            owner = find_block_containing_rect(blocks, entity.area)
            key: _GroupKey = (False, owner.reading_order) if owner is not None else _UNORDERED_KEY
            groups[key].append(entity)

        parts: list[str] = []
        for key in sorted(groups):
            ordered = sort_by_rows(groups[key], lambda entity: entity.area, row_tolerance)
            parts.extend(entity.text for entity in ordered)

        logger.debug("Extracted %d entities from %d reading-order groups", len(parts), len(groups))
        return "".join(parts)
