"""Shared constants for block-aware text selection."""

# =============================================================================
# Row / Line Grouping
# =============================================================================
ROW_TOLERANCE = 0.01
"""Maximum vertical-center distance (normalized units) for two entities to share a row."""

# =============================================================================
# Reading Order
# =============================================================================
UNSET_READING_ORDER = -1
"""Reading order of a block that has not been ranked (or precedes all content)."""

UNSET_PAGE = -1
"""Page index of a block that has not been assigned to a page."""

UNORDERED_BUCKET = 999999
"""Group key for entities that fall outside every layout block (sorts after all blocks)."""

# =============================================================================
# Selection Defaults
# =============================================================================
DEFAULT_STREAM_SELECTOR = "geometric"
"""Geometry-only selector used when no layout blocks constrain a selection."""

DEFAULT_CONFIG_PATH = "settings/config.yaml"
"""Default YAML configuration file, relative to the working directory."""
