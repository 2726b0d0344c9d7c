"""Board renderers: JSON / YAML interchange, HTML, and a terminal view."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import yaml
from jinja2.sandbox import SandboxedEnvironment
from rich.columns import Columns
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from mdkanban.theme import ThemeRegistry, get_default_registry, register_theme
from mdkanban.types import Board, OutputFormat, Section

_jinja_env = SandboxedEnvironment(
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)

_HTML_TEMPLATE = _jinja_env.from_string(
    """\
{% if css %}
<style>
{{ css | safe }}
</style>
{% endif %}
<div class="kanban-board">
{% for section in sections %}
  <div class="kanban-column">
    <h3>{{ section.heading }}</h3>
    <ul class="kanban-tasks">
{% for task in section.tasks %}
      <li class="kanban-task{% if task.checked %} is-done{% endif %}">{{ task.raw }}</li>
{% endfor %}
    </ul>
  </div>
{% endfor %}
</div>
"""
)

_UNTITLED_COLUMN = "(no heading)"


def sections_to_data(sections: Sequence[Section]) -> list[dict[str, Any]]:
    """Plain-data form of the sections: heading plus raw/checked tasks."""
    return [section.model_dump(mode="json") for section in sections]


def to_json(sections: Sequence[Section], indent: int | None = 2) -> str:
    return json.dumps(sections_to_data(sections), indent=indent, ensure_ascii=False)


def to_yaml(sections: Sequence[Section]) -> str:
    return yaml.safe_dump(sections_to_data(sections), sort_keys=False, allow_unicode=True)


def serialize(sections: Sequence[Section], fmt: OutputFormat | str = OutputFormat.JSON) -> str:
    """Serialize sections in one of the interchange formats."""
    fmt = OutputFormat(fmt)
    if fmt == OutputFormat.YAML:
        return to_yaml(sections)
    return to_json(sections)


def to_html(
    board: Board,
    include_css: bool = True,
    registry: ThemeRegistry | None = None,
) -> str:
    """Render the board as HTML columns.

    The stylesheet comes from the theme registry; the built-in theme is
    registered on first use.
    """
    css = ""
    if include_css:
        if registry is None:
            registry = get_default_registry()
        register_theme(registry)
        css = registry.stylesheet()
    return _HTML_TEMPLATE.render(css=css, sections=board.sections)


def to_rich(board: Board) -> Group:
    """Terminal rendering: one panel per column, laid out side by side."""
    panels = [_section_panel(section) for section in board.sections]
    body = Columns(panels, equal=True, expand=True) if panels else Text("No columns", style="dim")
    if board.title:
        return Group(Text(f"Kanban: {board.title}", style="bold"), body)
    return Group(body)


def _section_panel(section: Section) -> Panel:
    lines = Text()
    for i, task in enumerate(section.tasks):
        if i:
            lines.append("\n")
        if task.checked:
            lines.append("☑ ", style="green")
            lines.append(task.text, style="dim strike")
        else:
            lines.append("☐ ", style="yellow")
            lines.append(task.text)
    if not section.tasks:
        lines.append("empty", style="dim italic")

    title = section.heading or _UNTITLED_COLUMN
    subtitle = f"{section.done_count}/{len(section.tasks)}"
    return Panel(lines, title=Text(title), subtitle=Text(subtitle), border_style="cyan")
