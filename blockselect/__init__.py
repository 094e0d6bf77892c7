"""Block-aware text selection for paged documents.

Constrains text selection to the layout blocks of a page (columns,
headers, footers) and follows the blocks' reading order instead of raw
page geometry.
"""

from __future__ import annotations

from .config import SelectionConfig
from .exceptions import (
    BlockSelectError,
    ConfigurationError,
    FileError,
    FileFormatError,
    FileLoadError,
    InvalidConfigError,
    MissingConfigError,
)
from .io import load_text_page
from .page import TextPage
from .selection import BlockSelectionHelper, CrossBlockSelector, stream_selector_registry
from .types import (
    BlockType,
    LayoutBlock,
    NormalizedPoint,
    NormalizedRect,
    RegularAreaRect,
    SelectionKind,
    SelectionResult,
    StreamSelector,
    TextEntity,
    TextSelection,
)

__version__ = "0.1.0"

__all__ = [
    "BlockSelectError",
    "BlockSelectionHelper",
    "BlockType",
    "ConfigurationError",
    "CrossBlockSelector",
    "FileError",
    "FileFormatError",
    "FileLoadError",
    "InvalidConfigError",
    "LayoutBlock",
    "MissingConfigError",
    "NormalizedPoint",
    "NormalizedRect",
    "RegularAreaRect",
    "SelectionConfig",
    "SelectionKind",
    "SelectionResult",
    "StreamSelector",
    "TextEntity",
    "TextPage",
    "TextSelection",
    "load_text_page",
    "stream_selector_registry",
]
