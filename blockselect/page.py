"""TextPage - text layer of one page with optional layout blocks."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .config import SelectionConfig
from .selection.cross_block import CrossBlockSelector
from .selection.helper import BlockSelectionHelper
from .selection.lookup import (
    find_block_containing,
    find_block_containing_rect,
    get_next_block,
    get_previous_block,
)
from .selection.registry import stream_selector_registry
from .types import NormalizedPoint, NormalizedRect, SelectionKind, TextEntity

if TYPE_CHECKING:
    from .types import LayoutBlock, RegularAreaRect, SelectionResult, StreamSelector, TextSelection

logger = logging.getLogger(__name__)

__all__ = ["TextPage"]


class TextPage:
    """Text entities of a page plus the page's layout blocks.

    The page owns two sequences: ``words``, the text entities in document
    order, and the layout block set. The block set is held as an immutable
    tuple and replaced as a whole by ``set_layout_blocks``; every selection
    reads it once and works on that snapshot, so a concurrent replacement is
    seen entirely or not at all.

    Without blocks every operation behaves exactly like the configured
    geometry-only stream selector.

    Example:
        >>> page = TextPage()
        >>> page.append("Left", NormalizedRect(0.1, 0.1, 0.2, 0.15))
        >>> page.set_layout_blocks([left_column, right_column])
        >>> area = page.text_area(TextSelection(NormalizedPoint(0.1, 0.1), NormalizedPoint(0.25, 0.25)))
        >>> page.text(area)
        'Left'
    """

    def __init__(
        self,
        words: Iterable[TextEntity] | None = None,
        config: SelectionConfig | None = None,
        stream_selector: StreamSelector | None = None,
    ) -> None:
        """Initialize the page.

        Args:
            words: Initial text entities in document order
            config: Selection configuration (defaults when omitted)
            stream_selector: Geometry-only selector; created from
                ``config.stream_selector`` via the registry when omitted
        """
        self.config = config if config is not None else SelectionConfig()
        self.words: list[TextEntity] = list(words) if words is not None else []
        self._layout_blocks: tuple[LayoutBlock, ...] = ()

        if stream_selector is None:
            stream_selector = stream_selector_registry.create(
                self.config.stream_selector,
                row_tolerance=self.config.row_tolerance,
            )
        self._selector = CrossBlockSelector(stream_selector, self.config.row_tolerance)

    # ==================== Entities ====================

    def append(self, text: str, area: NormalizedRect) -> None:
        """Append a text entity at the end of the document order."""
        self.words.append(TextEntity(text=text, area=area))

    # ==================== Layout Blocks ====================

    @property
    def layout_blocks(self) -> tuple[LayoutBlock, ...]:
        """Current block snapshot."""
        return self._layout_blocks

    def has_layout_blocks(self) -> bool:
        return bool(self._layout_blocks)

    def set_layout_blocks(self, blocks: Iterable[LayoutBlock]) -> None:
        """Replace the page's whole block set.

        Passing an empty iterable clears block-constrained behaviour.
        """
        self._layout_blocks = tuple(blocks)
        logger.debug("Layout blocks replaced: %d block(s)", len(self._layout_blocks))

    def find_block_containing(self, target: NormalizedPoint | NormalizedRect) -> LayoutBlock | None:
        """Find the block holding a point, or the center of a rectangle."""
        blocks = self._layout_blocks
        if isinstance(target, NormalizedRect):
            return find_block_containing_rect(blocks, target)
        return find_block_containing(blocks, target)

    def get_next_block(self, current: LayoutBlock | None) -> LayoutBlock | None:
        return get_next_block(self._layout_blocks, current)

    def get_previous_block(self, current: LayoutBlock | None) -> LayoutBlock | None:
        return get_previous_block(self._layout_blocks, current)

    def should_include_entity(self, entity: TextEntity, block: LayoutBlock | None) -> bool:
        """Check whether an entity belongs to ``block`` (center rule).

        A missing block imposes no constraint.
        """
        if block is None:
            return True
        return block.contains_rect(entity.area)

    def is_last_entity_in_block(self, index: int, block: LayoutBlock) -> bool:
        """Check whether ``words[index]`` is the block's last entity in document order."""
        if not 0 <= index < len(self.words):
            return False
        if not block.contains_rect(self.words[index].area):
            return False
        return not any(block.contains_rect(entity.area) for entity in self.words[index + 1 :])

    # ==================== Selection ====================

    def select(self, selection: TextSelection) -> SelectionResult:
        """Resolve a selection gesture into the selected entities.

        Args:
            selection: Gesture points, in either order

        Returns:
            SelectionResult (indices into ``words``, entities, area, kind)
        """
        blocks = self._layout_blocks
        return self._selector.select(self.words, blocks, selection)

    def text_area(self, selection: TextSelection) -> RegularAreaRect | None:
        """Selection geometry for a gesture.

        Returns:
            One rectangle per selected entity. None only when the page falls
            back to stream selection (no blocks, or a point resolves to no
            block) and that selection is empty; block-constrained selections
            always return an area, possibly empty.
        """
        result = self.select(selection)
        if result.kind is SelectionKind.FALLBACK and result.is_empty:
            return None
        return result.area

    def text(self, area: RegularAreaRect | NormalizedRect | None = None, use_intersects: bool = False) -> str:
        """Extract the text inside ``area`` in reading order.

        Args:
            area: Region to extract; None extracts the whole page
            use_intersects: Match entities intersecting the area instead of
                entities whose center lies inside it

        Returns:
            Concatenated text, grouped by block reading order
        """
        return BlockSelectionHelper.extract_text_in_reading_order(
            self.words,
            self._layout_blocks,
            area,
            use_intersects,
            self.config.row_tolerance,
        )

    def block_ids_for_selection(self, selection: TextSelection) -> list[str]:
        """Ids of the blocks a selection spans, in reading order."""
        return BlockSelectionHelper.get_block_ids_for_selection(self._layout_blocks, selection.start, selection.end)
