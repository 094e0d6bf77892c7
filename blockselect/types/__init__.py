"""Type definitions for block-aware text selection.

This module provides:
- NormalizedPoint, NormalizedRect: Page-relative geometry primitives
- RegularAreaRect: Ordered rectangle set describing a selection's extent
- LayoutBlock, BlockType: Layout analysis regions with reading order
- TextEntity: Smallest selectable text run
- TextSelection, SelectionResult, SelectionKind: Gesture and its resolution
- StreamSelector: Geometry-only selection interface
"""

from .area import RegularAreaRect
from .block import BlockType, LayoutBlock
from .entity import TextEntity
from .geometry import NormalizedPoint, NormalizedRect
from .interfaces import StreamSelector
from .selection import SelectionKind, SelectionResult, TextSelection

__all__ = [
    # Geometry
    "NormalizedPoint",
    "NormalizedRect",
    "RegularAreaRect",
    # Layout
    "BlockType",
    "LayoutBlock",
    # Text
    "TextEntity",
    # Selection
    "TextSelection",
    "SelectionKind",
    "SelectionResult",
    # Component interfaces
    "StreamSelector",
]
