"""Host adapter — feeds document text to the extractor on demand."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from mdkanban.errors.exceptions import DocumentReadError
from mdkanban.extractor import extract
from mdkanban.types import Board, ExtractionPolicy, Section

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentSource(Protocol):
    """Anything that can hand over the full text of one document."""

    @property
    def name(self) -> str: ...

    def read(self) -> str: ...


class StringDocumentSource:
    """In-memory document, mostly for tests and embedding hosts."""

    def __init__(self, text: str, name: str = "") -> None:
        self._text = text
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def read(self) -> str:
        return self._text


class FileDocumentSource:
    """A markdown file on disk, read as UTF-8 (BOM dropped) on every call."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.stem

    def read(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise DocumentReadError(
                f"Document not found: {self._path}", path=str(self._path), original=e
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(
                f"Cannot read {self._path}: {e}", path=str(self._path), original=e
            ) from e


class BoardAdapter:
    """Re-extracts the board whenever the host reports new document text.

    Holds only the extraction policy; no state carries over between calls,
    and no debouncing is applied.
    """

    def __init__(self, policy: ExtractionPolicy | None = None) -> None:
        self._policy = policy or ExtractionPolicy()

    @property
    def policy(self) -> ExtractionPolicy:
        return self._policy

    def on_document_changed(self, document: str) -> list[Section]:
        return extract(document, self._policy)

    def refresh(self, source: DocumentSource) -> Board:
        """Read the source in full and build a titled board."""
        text = source.read()
        logger.debug("Refreshing board for '%s' (%d chars)", source.name, len(text))
        return Board(title=source.name, sections=self.on_document_changed(text))
