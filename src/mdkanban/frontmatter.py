"""YAML frontmatter lookup and the ``kanban: true`` gate."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_FRONTMATTER_KEY = "kanban"

# Opening fence on the first line, closing fence on its own line
_FRONTMATTER_BLOCK = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$", re.DOTALL | re.MULTILINE)


class _StrictBoolLoader(yaml.SafeLoader):
    """Safe loader that reads only true/false as booleans, never yes/no/on/off."""


_BOOL_TAG = "tag:yaml.org,2002:bool"
_StrictBoolLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_StrictBoolLoader.add_implicit_resolver(
    _BOOL_TAG, re.compile(r"^(?:true|false)$", re.IGNORECASE), list("tTfF")
)


def read_frontmatter(document: str) -> dict[str, Any]:
    """Parse the YAML frontmatter block at the top of a document.

    Returns an empty dict when there is no block, when the block is not a
    mapping, or when it cannot be parsed.
    """
    match = _FRONTMATTER_BLOCK.match(document)
    if not match:
        return {}

    try:
        data = yaml.load(match.group(1), Loader=_StrictBoolLoader)
    except yaml.YAMLError as e:
        logger.warning("Ignoring malformed frontmatter: %s", e)
        return {}

    if not isinstance(data, dict):
        return {}
    return data


def is_kanban_enabled(metadata: Mapping[str, Any] | None) -> bool:
    """True only if the metadata has ``kanban`` set to boolean true."""
    if not isinstance(metadata, Mapping):
        return False
    return metadata.get(_FRONTMATTER_KEY) is True
