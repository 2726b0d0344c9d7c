"""Top-level entry points: extract_text(), extract_file(), load_document()."""

from __future__ import annotations

import sys
from pathlib import Path

from mdkanban.adapter import BoardAdapter, FileDocumentSource
from mdkanban.errors.exceptions import DocumentReadError
from mdkanban.extractor import extract
from mdkanban.types import Board, ExtractionPolicy, Section

STDIN_PATH = "-"
_BOM = "\ufeff"


def extract_text(document: str, policy: ExtractionPolicy | None = None) -> list[Section]:
    """Extract sections from document text."""
    return extract(document, policy)


def extract_file(path: str | Path, policy: ExtractionPolicy | None = None) -> Board:
    """Read a markdown file and build its board."""
    return BoardAdapter(policy).refresh(FileDocumentSource(path))


def load_document(path: str | Path) -> tuple[str, str]:
    """Read a document from a path, or stdin for ``-``.

    Returns (text, name).
    """
    if str(path) == STDIN_PATH:
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise DocumentReadError(f"Cannot read stdin: {e}", path=STDIN_PATH, original=e) from e
        return text.removeprefix(_BOM), ""
    source = FileDocumentSource(path)
    return source.read(), source.name
