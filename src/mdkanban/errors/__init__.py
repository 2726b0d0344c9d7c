"""Error handling — exception hierarchy."""

from mdkanban.errors.exceptions import (
    ConfigError,
    DocumentReadError,
    InvalidInputError,
    MdKanbanError,
)

__all__ = [
    "MdKanbanError",
    "InvalidInputError",
    "DocumentReadError",
    "ConfigError",
]
