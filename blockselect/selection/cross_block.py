"""Block-aware selection between two page points.

The selector classifies a gesture by the blocks its two points resolve to:

- FALLBACK: the page has no blocks, or a point resolves to no block. The
  stream selector's result is returned untouched.
- SAME_BLOCK: both points resolve to the same reading order. The stream
  selector walks between the points and the result is clipped to the block.
- CROSS_BLOCK: different reading orders. The leading block contributes its
  rows from the leading point onward, every block ranked strictly between
  contributes all of its text, and the trailing block contributes its rows
  up to the trailing point.

Entity ownership always uses the center rule (an entity belongs to the first
block holding the center of its area).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ROW_TOLERANCE
from ..types import SelectionKind, SelectionResult
from .lookup import find_block_containing_rect, find_block_for_cursor
from .rows import sort_by_rows

if TYPE_CHECKING:
    from ..types import LayoutBlock, NormalizedPoint, StreamSelector, TextEntity, TextSelection

logger = logging.getLogger(__name__)

__all__ = ["CrossBlockSelector"]


class CrossBlockSelector:
    """Turn a selection gesture into the selected entities of a page.

    Stateless apart from its collaborators: every call works on the word
    list and block snapshot it is given, and never mutates either.

    Example:
        >>> selector = CrossBlockSelector(GeometricStreamSelector())
        >>> result = selector.select(page.words, page.layout_blocks, selection)
        >>> result.kind
        <SelectionKind.CROSS_BLOCK: 'cross_block'>
    """

    def __init__(self, stream_selector: StreamSelector, row_tolerance: float = ROW_TOLERANCE) -> None:
        self.stream_selector = stream_selector
        self.row_tolerance = row_tolerance

    def select(
        self,
        words: Sequence[TextEntity],
        blocks: Sequence[LayoutBlock],
        selection: TextSelection,
    ) -> SelectionResult:
        """Resolve a selection.

        Args:
            words: Page entities in document order
            blocks: Snapshot of the page's layout blocks
            selection: Gesture points, in either order

        Returns:
            SelectionResult with indices into ``words``
        """
        if not blocks:
            return self._select_fallback(words, selection, "page has no layout blocks")

        start_block = find_block_for_cursor(blocks, selection.start)
        end_block = find_block_for_cursor(blocks, selection.end)
        if start_block is None or end_block is None:
            return self._select_fallback(words, selection, "selection point resolves to no block")

        if start_block.reading_order == end_block.reading_order:
            return self._select_same_block(words, start_block, selection)

        return self._select_cross_block(words, blocks, selection, start_block, end_block)

    # ==================== Branches ====================

    def _select_fallback(self, words: Sequence[TextEntity], selection: TextSelection, reason: str) -> SelectionResult:
        logger.debug("Using %s stream selection: %s", self.stream_selector.name, reason)
        indices = self.stream_selector.select(words, selection.start, selection.end)
        return SelectionResult.from_indices(list(words), indices, SelectionKind.FALLBACK)

    def _select_same_block(
        self,
        words: Sequence[TextEntity],
        block: LayoutBlock,
        selection: TextSelection,
    ) -> SelectionResult:
        indices = self.stream_selector.select(words, selection.start, selection.end)
        kept = [index for index in indices if block.contains_rect(words[index].area)]
        kept = sort_by_rows(kept, lambda index: words[index].area, self.row_tolerance)

        logger.debug(
            "Same-block selection in %r (order %d): %d of %d stream entities kept",
            block.id,
            block.reading_order,
            len(kept),
            len(indices),
        )
        return SelectionResult.from_indices(list(words), kept, SelectionKind.SAME_BLOCK)

    def _select_cross_block(
        self,
        words: Sequence[TextEntity],
        blocks: Sequence[LayoutBlock],
        selection: TextSelection,
        start_block: LayoutBlock,
        end_block: LayoutBlock,
    ) -> SelectionResult:
        # The point in the earlier-ranked block leads, whatever the drag direction
        if start_block.reading_order < end_block.reading_order:
            leading_point, trailing_point = selection.start, selection.end
            min_order, max_order = start_block.reading_order, end_block.reading_order
        else:
            leading_point, trailing_point = selection.end, selection.start
            min_order, max_order = end_block.reading_order, start_block.reading_order

        by_order: dict[int, list[int]] = defaultdict(list)
        for index, entity in enumerate(words):
            owner = find_block_containing_rect(blocks, entity.area)
            if owner is not None and min_order <= owner.reading_order <= max_order:
                by_order[owner.reading_order].append(index)

        leading_row = self._row_anchor(words, by_order.get(min_order, []), leading_point)
        trailing_row = self._row_anchor(words, by_order.get(max_order, []), trailing_point)
        tolerance = self.row_tolerance

        selected: list[int] = []
        for order in sorted(by_order):
            members = by_order[order]
            if order == min_order:
                members = [i for i in members if words[i].area.vertical_center >= leading_row - tolerance]
            elif order == max_order:
                members = [i for i in members if words[i].area.vertical_center <= trailing_row + tolerance]
            selected.extend(sort_by_rows(members, lambda index: words[index].area, tolerance))

        logger.debug(
            "Cross-block selection over orders %d..%d (leading row %.4f, trailing row %.4f): %d entities",
            min_order,
            max_order,
            leading_row,
            trailing_row,
            len(selected),
        )
        return SelectionResult.from_indices(list(words), selected, SelectionKind.CROSS_BLOCK)

    # ==================== Helpers ====================

    def _row_anchor(self, words: Sequence[TextEntity], members: Sequence[int], point: NormalizedPoint) -> float:
        """Vertical position of the row a point sits on, within one block.

        The row of the entity under the point when there is one; otherwise
        the row of the nearest entity within the row tolerance; otherwise the
        point's own height.
        """
        for index in members:
            if words[index].area.contains(point.x, point.y):
                return words[index].area.vertical_center

        nearest: float | None = None
        for index in members:
            center = words[index].area.vertical_center
            if abs(center - point.y) <= self.row_tolerance and (
                nearest is None or abs(center - point.y) < abs(nearest - point.y)
            ):
                nearest = center

        return nearest if nearest is not None else point.y
