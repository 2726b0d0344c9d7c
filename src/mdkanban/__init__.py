"""mdkanban — turn markdown headings and checklists into a Kanban board."""

from mdkanban.adapter import BoardAdapter, FileDocumentSource, StringDocumentSource
from mdkanban.core import extract_file, extract_text
from mdkanban.errors import InvalidInputError, MdKanbanError
from mdkanban.extractor import extract
from mdkanban.frontmatter import is_kanban_enabled, read_frontmatter
from mdkanban.types import Board, ExtractionPolicy, Section, Task

__all__ = [
    "extract",
    "extract_text",
    "extract_file",
    "read_frontmatter",
    "is_kanban_enabled",
    "BoardAdapter",
    "FileDocumentSource",
    "StringDocumentSource",
    "Board",
    "Section",
    "Task",
    "ExtractionPolicy",
    "MdKanbanError",
    "InvalidInputError",
]
