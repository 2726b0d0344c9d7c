"""Board stylesheet registry — each theme is applied once per process."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_THEME = "kanban"

KANBAN_CSS = """\
.kanban-board {
    display: flex;
    gap: 1rem;
    overflow-x: auto;
    padding: 1rem;
}
.kanban-column {
    background: var(--background-secondary);
    border: 1px solid var(--background-modifier-border);
    border-radius: 8px;
    padding: 1rem;
    min-width: 200px;
    flex-shrink: 0;
}
.kanban-task {
    margin: 0.5rem 0;
    padding: 0.5rem;
    background: var(--background-primary);
    border: 1px solid var(--background-modifier-border);
    border-radius: 4px;
}
"""


class ThemeRegistry:
    """Named CSS blocks, registered at most once each."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._themes: dict[str, str] = {}

    def register(self, name: str, css: str) -> bool:
        """Register a theme. Returns False if the name was already taken."""
        with self._lock:
            if name in self._themes:
                logger.debug("Theme '%s' already registered", name)
                return False
            self._themes[name] = css
            return True

    def get(self, name: str) -> str | None:
        with self._lock:
            return self._themes.get(name)

    def stylesheet(self) -> str:
        """All registered CSS, in registration order."""
        with self._lock:
            return "\n".join(self._themes.values())

    def clear(self) -> None:
        with self._lock:
            self._themes.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._themes

    def __len__(self) -> int:
        with self._lock:
            return len(self._themes)


_default_registry = ThemeRegistry()


def get_default_registry() -> ThemeRegistry:
    return _default_registry


def register_theme(registry: ThemeRegistry | None = None) -> bool:
    """Register the built-in board theme (idempotent)."""
    if registry is None:
        registry = _default_registry
    return registry.register(DEFAULT_THEME, KANBAN_CSS)
