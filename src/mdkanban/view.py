"""View-mode control for hosts that show a note either as text or as a board."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mdkanban.adapter import BoardAdapter, DocumentSource
from mdkanban.frontmatter import is_kanban_enabled, read_frontmatter
from mdkanban.types import Board, MenuAction, ViewMode

logger = logging.getLogger(__name__)

VIEW_TYPE = "markdown-kanban-view"
MARKDOWN_VIEW_TYPE = "markdown"

OPEN_AS_KANBAN = "Open as Kanban"
BACK_TO_MARKDOWN = "Back to Markdown"


class KanbanView:
    """One note shown as a board, with a fallback to plain markdown."""

    def __init__(
        self,
        source: DocumentSource,
        adapter: BoardAdapter | None = None,
        mode: ViewMode = ViewMode.KANBAN,
    ) -> None:
        self._source = source
        self._adapter = adapter or BoardAdapter()
        self._mode = mode
        self._board: Board | None = None

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def view_type(self) -> str:
        return VIEW_TYPE if self._mode == ViewMode.KANBAN else MARKDOWN_VIEW_TYPE

    @property
    def source(self) -> DocumentSource:
        return self._source

    @property
    def file_path(self) -> str:
        path = getattr(self._source, "path", None)
        return str(path) if path is not None else self._source.name

    @property
    def display_text(self) -> str:
        return f"Kanban: {self._source.name or 'Unknown'}"

    @property
    def board(self) -> Board | None:
        """The last rendered board, if any."""
        return self._board

    def open(self) -> Board:
        return self.render()

    def load(self, source: DocumentSource) -> Board:
        """Point the view at another document and render it."""
        self._source = source
        return self.render()

    def render(self) -> Board:
        self._board = self._adapter.refresh(self._source)
        return self._board

    def set_mode(self, mode: ViewMode) -> None:
        if mode != self._mode:
            logger.info("Switching '%s' to %s view", self.file_path, mode.value)
        self._mode = mode

    def on_active(self, metadata: Mapping[str, Any] | None = None) -> ViewMode:
        """Fall back to markdown when the note no longer opts in.

        Metadata defaults to the note's own frontmatter.
        """
        if self._mode != ViewMode.KANBAN:
            return self._mode
        if metadata is None:
            metadata = read_frontmatter(self._source.read())
        if not is_kanban_enabled(metadata):
            self.set_mode(ViewMode.MARKDOWN)
        return self._mode


def file_menu_actions(
    file_path: str,
    metadata: Mapping[str, Any] | None,
    active_view: KanbanView | None = None,
) -> list[MenuAction]:
    """Menu entries a host should offer for a file.

    "Open as Kanban" needs ``kanban: true`` in the metadata. "Back to Markdown"
    appears when the active view already shows this file as a board.
    """
    actions: list[MenuAction] = []

    if is_kanban_enabled(metadata):
        actions.append(
            MenuAction(
                title=OPEN_AS_KANBAN,
                icon="layout",
                target_mode=ViewMode.KANBAN,
                file_path=file_path,
            )
        )

    if (
        active_view is not None
        and active_view.mode == ViewMode.KANBAN
        and active_view.file_path == file_path
    ):
        actions.append(
            MenuAction(
                title=BACK_TO_MARKDOWN,
                icon="file-text",
                target_mode=ViewMode.MARKDOWN,
                file_path=file_path,
            )
        )

    return actions
