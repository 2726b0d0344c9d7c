"""Shared Pydantic models for mdkanban."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# Checkbox markers recognized at the start of a task line
UNCHECKED_MARKER = "- [ ]"
CHECKED_MARKER = "- [x]"

# ── Enums ──


class ViewMode(StrEnum):
    KANBAN = "kanban"
    MARKDOWN = "markdown"


class OutputFormat(StrEnum):
    JSON = "json"
    YAML = "yaml"


# ── Config models ──


class ExtractionPolicy(BaseModel):
    """Which checklist lines count as tasks.

    The default is the strict literal-prefix policy: the marker must sit at
    column zero and the checked marker is a lowercase ``x``.
    """

    allow_indented: bool = False
    case_insensitive_checked: bool = False
    model_config = {"frozen": True}


# ── Board models ──


class Task(BaseModel):
    raw: str
    checked: bool = False
    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        """Label after the checkbox marker."""
        return self.raw.lstrip()[len(UNCHECKED_MARKER):].strip()


class Section(BaseModel):
    heading: str = ""
    tasks: tuple[Task, ...] = ()
    model_config = {"frozen": True}

    @property
    def is_implicit(self) -> bool:
        return self.heading == ""

    @property
    def done_count(self) -> int:
        return sum(1 for t in self.tasks if t.checked)


class Board(BaseModel):
    title: str = ""
    sections: list[Section] = Field(default_factory=list)

    @classmethod
    def from_document(
        cls,
        document: str,
        title: str = "",
        policy: ExtractionPolicy | None = None,
    ) -> Board:
        from mdkanban.extractor import extract

        return cls(title=title, sections=extract(document, policy))

    @property
    def task_count(self) -> int:
        return sum(len(s.tasks) for s in self.sections)


class MenuAction(BaseModel):
    """A file-menu entry offered to the host."""

    title: str
    icon: str
    target_mode: ViewMode
    file_path: str
