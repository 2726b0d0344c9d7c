"""Tests for top-level entry points."""

import io

import pytest

import mdkanban
from mdkanban.core import extract_file, extract_text, load_document
from mdkanban.errors.exceptions import DocumentReadError
from mdkanban.types import ExtractionPolicy


def test_extract_text(board_md):
    assert extract_text(board_md) == mdkanban.extract(board_md)


def test_extract_file(board_file):
    board = extract_file(board_file)
    assert board.title == "sprint"
    assert [s.heading for s in board.sections] == ["To Do", "Done"]


def test_extract_file_with_policy(tmp_path):
    path = tmp_path / "loose.md"
    path.write_text("# A\n    - [X] nested\n", encoding="utf-8")
    policy = ExtractionPolicy(allow_indented=True, case_insensitive_checked=True)
    board = extract_file(path, policy)
    assert board.sections[0].tasks[0].checked is True


def test_extract_file_missing(tmp_path):
    with pytest.raises(DocumentReadError):
        extract_file(tmp_path / "nope.md")


def test_load_document_file(board_file):
    text, name = load_document(board_file)
    assert name == "sprint"
    assert text.startswith("# To Do")


def test_load_document_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("# From stdin"))
    assert load_document("-") == ("# From stdin", "")


def test_package_exports():
    for name in mdkanban.__all__:
        assert hasattr(mdkanban, name)


def test_load_document_stdin_strips_bom(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\ufeff# To Do\n- [ ] Buy milk"))
    text, _ = load_document("-")
    assert text.startswith("# To Do")
    assert extract_text(text)[0].heading == "To Do"


def test_extract_file_with_bom(tmp_path):
    path = tmp_path / "bom.md"
    path.write_text("# To Do\n- [ ] Buy milk\n# Done\n", encoding="utf-8-sig")
    assert [s.heading for s in extract_file(path).sections] == ["To Do", "Done"]
