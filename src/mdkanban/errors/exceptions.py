"""Custom exception hierarchy for mdkanban."""

from __future__ import annotations

from typing import Any


class MdKanbanError(Exception):
    """Base exception for all mdkanban errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(MdKanbanError):
    """Input is not text — nothing to extract.

    Examples: None, bytes, a number passed where a document was expected.
    """

    def __init__(
        self,
        message: str = "",
        received_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.received_type = received_type


class DocumentReadError(MdKanbanError):
    """A document source could not be read.

    Examples: missing file, permission denied, non-UTF-8 bytes.
    """

    def __init__(
        self,
        message: str = "",
        path: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original


class ConfigError(MdKanbanError):
    """Configuration value cannot be used."""

    def __init__(self, message: str = "", key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
