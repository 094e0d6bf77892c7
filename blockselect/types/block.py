"""Layout block definitions.

This module provides:
- BlockType: Common block classification strings
- LayoutBlock: One page region assigned by external layout analysis
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..constants import UNSET_PAGE, UNSET_READING_ORDER
from .geometry import NormalizedPoint, NormalizedRect


class BlockType:
    """Common block classifications emitted by layout analysis services.

    The selection logic never interprets ``LayoutBlock.block_type``; these
    constants only give producers and tests a shared vocabulary.
    """

    # Content
    TEXT = "TEXT"
    TITLE = "TITLE"
    SECTION_HEADER = "SECTION_HEADER"
    LIST = "LIST"
    CAPTION = "CAPTION"

    # Non-text content
    FIGURE = "FIGURE"
    TABLE = "TABLE"
    EQUATION = "EQUATION"

    # Page furniture (usually ranked before or after the content flow)
    HEADER = "HEADER"
    FOOTER = "FOOTER"
    FOOTNOTE = "FOOTNOTE"
    PAGE_NUMBER = "PAGE_NUMBER"


@dataclass(frozen=True)
class LayoutBlock:
    """Rectangular page region with a reading-order rank.

    Blocks are created once per page by the ingestion step and never
    mutated afterwards; a page replaces its whole block set at once.

    Core fields:
    - id: Opaque identifier, unique within a page, may be empty
    - page: Page index (-1 when unset)
    - bbox: Region occupied by the block, normalized coordinates
    - block_type: Free-form classification (see BlockType), not interpreted
    - reading_order: Rank among blocks on the page, lower reads earlier.
      Negative values (e.g. -1 for running headers) mark blocks that precede
      all ranked content; they are never chosen as the first content block.
    - confidence: Provenance metadata in [0, 1]

    Reading orders of content blocks (>= 0) are expected to be unique on a
    page. Duplicates are tolerated: every lookup takes the first match in
    collection order.
    """

    id: str = ""
    page: int = UNSET_PAGE
    bbox: NormalizedRect = field(default_factory=lambda: NormalizedRect(0.0, 0.0, 0.0, 0.0))
    block_type: str = ""
    reading_order: int = UNSET_READING_ORDER
    confidence: float = 0.0

    def contains(self, point: NormalizedPoint) -> bool:
        """Check if a point lies inside the block (inclusive edges)."""
        return self.bbox.contains(point.x, point.y)

    def contains_rect(self, rect: NormalizedRect) -> bool:
        """Check if a rectangle belongs to the block (its center lies inside)."""
        return self.bbox.contains_rect(rect)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict.

        Field order:
            reading_order → id → block_type → bbox → page → confidence

        Example:
            >>> block = LayoutBlock("left", 0, NormalizedRect(0.0, 0.0, 0.45, 1.0), "TEXT", 0, 1.0)
            >>> block.to_dict()
            {'reading_order': 0, 'id': 'left', 'block_type': 'TEXT', 'bbox': [0.0, 0.0, 0.45, 1.0], 'page': 0, 'confidence': 1.0}
        """
        return {
            "reading_order": self.reading_order,
            "id": self.id,
            "block_type": self.block_type,
            "bbox": self.bbox.to_list(),
            "page": self.page,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutBlock:
        """Create LayoutBlock from dict.

        Args:
            data: Dictionary with block data (must have "bbox" field)

        Returns:
            LayoutBlock object

        Raises:
            ValueError: If "bbox" is missing or is not a 4-element list

        Example:
            >>> data = {"id": "left", "bbox": [0.0, 0.0, 0.45, 1.0], "reading_order": 0}
            >>> LayoutBlock.from_dict(data).reading_order
            0
        """
        if "bbox" not in data:
            raise ValueError("Block dict must have 'bbox' field")

        bbox_value = data["bbox"]
        if not isinstance(bbox_value, (list, tuple)):
            raise ValueError(f"Invalid bbox type: {type(bbox_value)}")

        return cls(
            id=str(data.get("id", "")),
            page=int(data.get("page", UNSET_PAGE)),
            bbox=NormalizedRect.from_list(bbox_value),
            block_type=str(data.get("block_type", "")),
            reading_order=int(data.get("reading_order", UNSET_READING_ORDER)),
            confidence=float(data.get("confidence", 0.0)),
        )
