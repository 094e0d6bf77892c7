"""JSON page dump loading.

A page dump holds the text entities and layout blocks of one page:

    {"page": 0,
     "words": [{"text": "Left", "area": [0.1, 0.1, 0.2, 0.15]}],
     "blocks": [{"id": "left", "page": 0, "bbox": [0.0, 0.0, 0.45, 1.0],
                 "block_type": "TEXT", "reading_order": 0, "confidence": 1.0}]}

"blocks" may be omitted, in which case the page has no layout metadata.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..exceptions import FileFormatError, FileLoadError
from ..page import TextPage
from ..types import LayoutBlock, TextEntity

if TYPE_CHECKING:
    from ..config import SelectionConfig

logger = logging.getLogger(__name__)

__all__ = ["load_text_page"]


def load_text_page(path: Path | str, config: SelectionConfig | None = None) -> TextPage:
    """Load a TextPage from a JSON page dump.

    Args:
        path: Dump file path
        config: Selection configuration for the page

    Returns:
        TextPage with words and layout blocks populated

    Raises:
        FileLoadError: If the file does not exist or cannot be read
        FileFormatError: If the file is not valid JSON or has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileLoadError(f"Page dump not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FileFormatError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadError(f"Failed to read page dump {path}: {e}") from e

    words, blocks = _parse_page(data, path)

    page = TextPage(words=words, config=config)
    if blocks:
        page.set_layout_blocks(blocks)

    logger.info("Loaded %s: %d words, %d layout blocks", path, len(words), len(blocks))
    return page


def _parse_page(data: Any, path: Path) -> tuple[list[TextEntity], list[LayoutBlock]]:
    if not isinstance(data, dict):
        raise FileFormatError(f"Page dump {path} must contain a JSON object")

    raw_words = data.get("words")
    if not isinstance(raw_words, list):
        raise FileFormatError(f"Page dump {path} must have a 'words' list")

    raw_blocks = data.get("blocks", [])
    if not isinstance(raw_blocks, list):
        raise FileFormatError(f"'blocks' in {path} must be a list")

    try:
        words = [TextEntity.from_dict(item) for item in raw_words]
    except (ValueError, TypeError, AttributeError) as e:
        raise FileFormatError(f"Invalid word entry in {path}: {e}") from e

    try:
        blocks = [LayoutBlock.from_dict(item) for item in raw_blocks]
    except (ValueError, TypeError, AttributeError) as e:
        raise FileFormatError(f"Invalid block entry in {path}: {e}") from e

    return words, blocks
