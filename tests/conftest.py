import pytest

BOARD_MD = """\
# To Do
- [ ] Buy milk
- [x] Pay bills
# Done
- [x] Ship release"""

KANBAN_NOTE = """\
---
kanban: true
tags: [work]
---
# Backlog
- [ ] Write docs
Some notes about the backlog.
## Ideas
- [ ] Sketch the API
# Doing
- [x] Fix login
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep MDKANBAN_* settings from the outer environment out of tests."""
    for key in (
        "MDKANBAN_ALLOW_INDENTED",
        "MDKANBAN_CASE_INSENSITIVE_CHECKED",
        "MDKANBAN_OUTPUT_FORMAT",
        "MDKANBAN_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Run from an empty directory with no global or project config files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "mdkanban.config.hierarchy._GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml"
    )


@pytest.fixture
def board_md():
    return BOARD_MD


@pytest.fixture
def kanban_note():
    return KANBAN_NOTE


@pytest.fixture
def board_file(tmp_path):
    """Write the sample board to a markdown file and return its path."""
    path = tmp_path / "sprint.md"
    path.write_text(BOARD_MD, encoding="utf-8")
    return path


@pytest.fixture
def kanban_file(tmp_path):
    """Write a note with ``kanban: true`` frontmatter and return its path."""
    path = tmp_path / "project.md"
    path.write_text(KANBAN_NOTE, encoding="utf-8")
    return path
