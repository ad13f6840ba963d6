"""Parse YAML frontmatter from command files."""
import logging
import re
from dataclasses import dataclass, field
from typing import Any

import yaml

logger = logging.getLogger(__name__)

BOM = "﻿"
DELIMITER = "---"

# Closing delimiter on its own line, or at the very end of the document
_CLOSING = re.compile(r"\r?\n---[ \t]*(?:\r?\n|\Z)")


@dataclass
class Frontmatter:
    """Metadata parsed from the frontmatter block."""

    description: str = ""
    argument_hint: str = ""
    allowed_tools: list[str] = field(default_factory=list)


def parse_frontmatter(content: str) -> tuple[Frontmatter, str]:
    """Split a command document into frontmatter and body.

    The block must open on the first line with ``---`` and close with a
    ``---`` line. Anything else, including invalid YAML, yields empty
    frontmatter and the whole document as body. Never raises.

    Args:
        content: Raw file text.

    Returns:
        Tuple of (Frontmatter, body).
    """
    try:
        return _parse(content)
    except Exception:
        logger.exception("Unexpected error parsing frontmatter")
        return Frontmatter(), content if isinstance(content, str) else ""


def _parse(content: str) -> tuple[Frontmatter, str]:
    if not content:
        return Frontmatter(), ""

    content = content.removeprefix(BOM)

    first_line, newline, _ = content.partition("\n")
    if first_line.rstrip() != DELIMITER or not newline:
        return Frontmatter(), content

    match = _CLOSING.search(content, len(first_line))
    if match is None:
        return Frontmatter(), content

    yaml_text = content[len(first_line) + 1:match.start()].strip()
    if not yaml_text:
        return Frontmatter(), content

    body = content[match.end():].strip()

    try:
        data = yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse frontmatter YAML: {e}")
        return Frontmatter(), content

    if not isinstance(data, dict):
        logger.warning(
            f"Frontmatter is not a mapping (got {type(data).__name__}), ignoring"
        )
        return Frontmatter(), content

    return Frontmatter(
        description=_as_text(data.get("description")),
        argument_hint=_as_hint(data.get("argument-hint")),
        allowed_tools=split_tools(data.get("allowed-tools")),
    ), body


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_hint(value: Any) -> str:
    # unquoted "[pr]" parses as a YAML list
    if isinstance(value, list):
        return " ".join(f"[{item}]" for item in value if item is not None)
    return _as_text(value)


def split_tools(value: Any) -> list[str]:
    """Normalize allowed-tools into a list of trimmed, non-empty names.

    Accepts a YAML list or a single comma-separated string.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, (list, tuple)):
        items = [str(v) for v in value if v is not None]
    else:
        items = [str(value)]

    if len(items) == 1 and "," in items[0]:
        items = items[0].split(",")

    return [item.strip() for item in items if item.strip()]
