"""Tests for frontmatter parsing and the kanban gate."""

import pytest

from mdkanban.frontmatter import is_kanban_enabled, read_frontmatter


class TestReadFrontmatter:
    def test_parses_mapping(self, kanban_note):
        meta = read_frontmatter(kanban_note)
        assert meta["kanban"] is True
        assert meta["tags"] == ["work"]

    def test_no_frontmatter(self, board_md):
        assert read_frontmatter(board_md) == {}

    def test_empty_block(self):
        assert read_frontmatter("---\n---\n# A") == {}

    def test_unclosed_block(self):
        assert read_frontmatter("---\nkanban: true\n# A") == {}

    def test_non_mapping_block(self):
        assert read_frontmatter("---\n- a\n- b\n---\n") == {}

    def test_malformed_yaml(self, caplog):
        meta = read_frontmatter("---\nkanban: [true\n---\n")
        assert meta == {}
        assert "malformed frontmatter" in caplog.text

    def test_must_start_document(self):
        assert read_frontmatter("# A\n---\nkanban: true\n---\n") == {}

    def test_crlf(self):
        assert read_frontmatter("---\r\nkanban: true\r\n---\r\n# A") == {"kanban": True}


class TestIsKanbanEnabled:
    def test_true(self):
        assert is_kanban_enabled({"kanban": True})

    @pytest.mark.parametrize(
        "meta",
        [None, {}, {"kanban": False}, {"kanban": "true"}, {"kanban": 1}, {"other": True}, ["kanban"]],
    )
    def test_not_enabled(self, meta):
        assert not is_kanban_enabled(meta)

    @pytest.mark.parametrize("value", ["yes", "on", "Yes", "ON", "y"])
    def test_yaml11_truthy_words_not_enabled(self, value):
        meta = read_frontmatter(f"---\nkanban: {value}\n---\n# A")
        assert meta["kanban"] == value
        assert not is_kanban_enabled(meta)

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_true_spellings_enabled(self, value):
        assert is_kanban_enabled(read_frontmatter(f"---\nkanban: {value}\n---\n"))

    def test_false_still_boolean(self):
        assert read_frontmatter("---\nkanban: false\n---\n") == {"kanban": False}

    def test_from_document(self, kanban_note, board_md):
        assert is_kanban_enabled(read_frontmatter(kanban_note))
        assert not is_kanban_enabled(read_frontmatter(board_md))
