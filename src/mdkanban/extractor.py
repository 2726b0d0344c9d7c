"""Board extraction — split a note into heading sections and checklist tasks."""

from __future__ import annotations

import logging
import re

from mdkanban.errors.exceptions import InvalidInputError
from mdkanban.types import CHECKED_MARKER, UNCHECKED_MARKER, ExtractionPolicy, Section, Task

logger = logging.getLogger(__name__)

# Zero-width split point before every top-level heading line ("# " only, never "##")
_SECTION_BOUNDARY = re.compile(r"^(?=# )", re.MULTILINE)

_STRICT_POLICY = ExtractionPolicy()


def extract(document: str, policy: ExtractionPolicy | None = None) -> list[Section]:
    """Extract board sections from a markdown document.

    Each top-level heading (``# Title``) opens a section. Lines starting with
    ``- [ ]`` or ``- [x]`` become tasks of the section they appear in; every
    other line is dropped. Content before the first heading forms an implicit
    section with an empty heading, but only if it is not blank.

    Args:
        document: Full note text.
        policy: Task matching rules. Defaults to the strict policy.

    Returns:
        Sections in document order. Empty for an empty or blank document.

    Raises:
        InvalidInputError: If ``document`` is not a ``str``.
    """
    if not isinstance(document, str):
        raise InvalidInputError(
            f"Expected document text, got {type(document).__name__}",
            received_type=type(document).__name__,
        )

    policy = policy or _STRICT_POLICY
    sections: list[Section] = []

    for segment in _SECTION_BOUNDARY.split(document):
        lines = [line.rstrip("\r") for line in segment.split("\n")]
        if lines[0].startswith("# "):
            heading = lines[0].lstrip("#").strip()
            candidates = lines[1:]
        elif segment.strip():
            heading = ""
            candidates = lines
        else:
            # Blank text before the first heading
            continue

        tasks = [task for task in (_parse_task(line, policy) for line in candidates) if task]
        sections.append(Section(heading=heading, tasks=tasks))

    logger.debug(
        "Extracted %d sections, %d tasks",
        len(sections),
        sum(len(s.tasks) for s in sections),
    )
    return sections


def _parse_task(line: str, policy: ExtractionPolicy) -> Task | None:
    """Return a Task if the line carries a checkbox marker, else None."""
    candidate = line.lstrip() if policy.allow_indented else line

    if candidate.startswith(UNCHECKED_MARKER):
        return Task(raw=line, checked=False)

    marker = candidate[: len(CHECKED_MARKER)]
    if policy.case_insensitive_checked:
        marker = marker.lower()
    if marker == CHECKED_MARKER:
        return Task(raw=line, checked=True)

    return None
