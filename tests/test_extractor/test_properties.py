"""Structural properties of extraction over a spread of documents."""

import pytest

from mdkanban.extractor import extract

DOCUMENTS = [
    "",
    "plain",
    "# One",
    "# To Do\n- [ ] Buy milk\n- [x] Pay bills\n# Done\n- [x] Ship release",
    "preface\n- [x] early\n# A\n## a1\n- [ ] a\n  - [ ] nested\n# B\n\n# C\n- [ ] c1\n- [ ] c2",
    "\n\n# After blank\n- [ ] t",
    "- [ ] only tasks\n- [x] more tasks\n- [X] upper",
    "#nospace\n# real\n-  [ ] spaced marker\n- [ ] ok",
]


def _heading_lines(doc: str) -> list[str]:
    return [line for line in doc.split("\n") if line.startswith("# ")]


def _has_leading_content(doc: str) -> bool:
    prefix = []
    for line in doc.split("\n"):
        if line.startswith("# "):
            break
        prefix.append(line)
    return bool("\n".join(prefix).strip())


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_deterministic(doc):
    assert extract(doc) == extract(doc)


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_section_count(doc):
    expected = len(_heading_lines(doc)) + (1 if _has_leading_content(doc) else 0)
    assert len(extract(doc)) == expected


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_unindented_markers_always_tasks(doc):
    lines = doc.split("\n")
    expected = [line for line in lines if line.startswith(("- [ ]", "- [x]"))]
    found = [task.raw for section in extract(doc) for task in section.tasks]
    assert found == expected


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_indented_markers_never_tasks(doc):
    found = [task.raw for section in extract(doc) for task in section.tasks]
    assert not any(raw[:1].isspace() for raw in found)


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_output_is_ordered_subsequence_of_lines(doc):
    lines = doc.split("\n")
    heading_lines = {line[2:].strip(): line for line in _heading_lines(doc)}
    emitted: list[str] = []
    for section in extract(doc):
        if not section.is_implicit:
            emitted.append(heading_lines[section.heading])
        emitted.extend(task.raw for task in section.tasks)

    remaining = iter(lines)
    assert all(any(line == item for line in remaining) for item in emitted)
