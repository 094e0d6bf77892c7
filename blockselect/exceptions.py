"""Custom exception classes for blockselect.

Selection itself never raises: degenerate input (no blocks, unresolved
cursor, zero-area selection) degrades to the geometry-only fallback or an
empty result. The exceptions below cover the layers around it.

Exception Hierarchy:
    BlockSelectError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   └── MissingConfigError
    └── FileError
        ├── FileLoadError
        └── FileFormatError

Usage:
    try:
        page = load_text_page(path)
    except FileFormatError as e:
        logger.error("Malformed page dump: %s", e)
    except FileError as e:
        logger.error("Could not read page dump: %s", e)
"""

from __future__ import annotations


class BlockSelectError(Exception):
    """Base exception for all blockselect errors."""


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(BlockSelectError):
    """Base exception for configuration-related errors."""


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid or malformed.

    Examples:
        - Row tolerance outside [0, 1)
        - Unknown stream selector name
    """


class MissingConfigError(ConfigurationError):
    """Raised when an explicitly requested configuration file is missing."""


# ============================================================================
# File Errors
# ============================================================================


class FileError(BlockSelectError):
    """Base exception for file operation errors."""


class FileLoadError(FileError):
    """Raised when loading a file fails.

    Examples:
        - File not found
        - Permission denied
    """


class FileFormatError(FileError):
    """Raised when file contents are invalid or unsupported.

    Examples:
        - Malformed JSON
        - Missing "words" list
        - Coordinates that are not four numbers
    """
