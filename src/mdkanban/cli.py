"""Click CLI for mdkanban — show markdown checklists as a Kanban board."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from mdkanban.config.hierarchy import load_config_hierarchy, policy_from_config
from mdkanban.errors.exceptions import MdKanbanError
from mdkanban.types import Board, ExtractionPolicy, OutputFormat

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(str(default_level).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _policy_options(fn: Any) -> Any:
    """Shared extraction-policy and verbosity options."""
    fn = click.option(
        "-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)."
    )(fn)
    fn = click.option(
        "--case-insensitive/--case-sensitive",
        "case_insensitive",
        default=None,
        help="Also accept '- [X]' as a checked task.",
    )(fn)
    fn = click.option(
        "--allow-indented/--strict-indent",
        "allow_indented",
        default=None,
        help="Accept checklist markers after leading whitespace.",
    )(fn)
    return fn


def _prepare(
    allow_indented: bool | None,
    case_insensitive: bool | None,
    verbose: int,
    **overrides: Any,
) -> tuple[dict[str, Any], ExtractionPolicy]:
    config = load_config_hierarchy(
        allow_indented=allow_indented,
        case_insensitive_checked=case_insensitive,
        **overrides,
    )
    _setup_logging(verbose, config.get("log_level", "WARNING"))
    try:
        policy = policy_from_config(config)
    except MdKanbanError as e:
        _fail(e)
    return config, policy


def _load_board(input_path: str, policy: ExtractionPolicy) -> tuple[Board, str]:
    """Read the input and build its board. Returns (board, text)."""
    from mdkanban.core import load_document

    try:
        text, name = load_document(input_path)
        return Board.from_document(text, title=name, policy=policy), text
    except MdKanbanError as e:
        _fail(e)


def _fail(error: Exception) -> NoReturn:
    error_console.print(f"[red]Error:[/red] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.version_option(package_name="mdkanban")
def cli() -> None:
    """mdkanban — markdown headings and checklists as a Kanban board."""


@cli.command("extract-sections")
@click.argument("input_path", type=str)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Serialization format (default: json).",
)
@_policy_options
def extract_sections(
    input_path: str,
    output_format: str | None,
    allow_indented: bool | None,
    case_insensitive: bool | None,
    verbose: int,
) -> None:
    """Print the sections of INPUT_PATH ('-' for stdin) as structured data."""
    from mdkanban.render import serialize

    config, policy = _prepare(
        allow_indented, case_insensitive, verbose, output_format=output_format
    )
    board, _ = _load_board(input_path, policy)

    try:
        fmt = OutputFormat(config.get("output_format", OutputFormat.JSON))
    except ValueError:
        _fail(MdKanbanError(f"Unknown output format: {config.get('output_format')}"))

    click.echo(serialize(board.sections, fmt))


@cli.command()
@click.argument("input_path", type=str)
@click.option(
    "--respect-frontmatter",
    is_flag=True,
    default=False,
    help="Refuse to show notes without 'kanban: true' frontmatter.",
)
@_policy_options
def board(
    input_path: str,
    respect_frontmatter: bool,
    allow_indented: bool | None,
    case_insensitive: bool | None,
    verbose: int,
) -> None:
    """Show INPUT_PATH as a board in the terminal."""
    from mdkanban.frontmatter import is_kanban_enabled, read_frontmatter
    from mdkanban.render import to_rich

    _, policy = _prepare(allow_indented, case_insensitive, verbose)
    kanban_board, text = _load_board(input_path, policy)

    if respect_frontmatter and not is_kanban_enabled(read_frontmatter(text)):
        _fail(MdKanbanError(f"{input_path} does not enable kanban in its frontmatter"))

    console.print(to_rich(kanban_board))


@cli.command()
@click.argument("input_path", type=str)
@click.option("-o", "--output", type=click.Path(), help="Output file path.")
@click.option("--no-css", is_flag=True, default=False, help="Omit the embedded stylesheet.")
@_policy_options
def html(
    input_path: str,
    output: str | None,
    no_css: bool,
    allow_indented: bool | None,
    case_insensitive: bool | None,
    verbose: int,
) -> None:
    """Render INPUT_PATH as an HTML board."""
    from mdkanban.render import to_html

    _, policy = _prepare(allow_indented, case_insensitive, verbose)
    kanban_board, _ = _load_board(input_path, policy)
    rendered = to_html(kanban_board, include_css=not no_css)

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(rendered, encoding="utf-8")
        console.print(f"[green]Written to {out_path}[/green]")
    else:
        click.echo(rendered)


@cli.command()
@click.argument("input_path", type=str)
def check(input_path: str) -> None:
    """Exit 0 if INPUT_PATH opts in with 'kanban: true', else 1."""
    from mdkanban.core import load_document
    from mdkanban.frontmatter import is_kanban_enabled, read_frontmatter

    try:
        text, _ = load_document(input_path)
    except MdKanbanError as e:
        _fail(e)

    if is_kanban_enabled(read_frontmatter(text)):
        console.print("[green]kanban enabled[/green]")
        return
    console.print("[yellow]kanban not enabled[/yellow]")
    sys.exit(1)


@cli.command("config")
def show_config() -> None:
    """Show the resolved configuration."""
    config = load_config_hierarchy()

    table = Table(title="Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key in sorted(config):
        table.add_row(key, str(config[key]))

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
