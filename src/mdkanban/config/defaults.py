"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default extraction policy (strict literal prefix, lowercase x)
DEFAULT_ALLOW_INDENTED = False
DEFAULT_CASE_INSENSITIVE_CHECKED = False

# Default CLI output
DEFAULT_OUTPUT_FORMAT = "json"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "allow_indented": DEFAULT_ALLOW_INDENTED,
        "case_insensitive_checked": DEFAULT_CASE_INSENSITIVE_CHECKED,
        "output_format": DEFAULT_OUTPUT_FORMAT,
        "log_level": DEFAULT_LOG_LEVEL,
    }
