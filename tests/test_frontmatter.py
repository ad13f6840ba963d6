"""Test frontmatter parsing."""
import logging

import pytest
from slashcmds.commands.frontmatter import Frontmatter, parse_frontmatter, split_tools


def test_no_frontmatter():
    """Documents without frontmatter are returned unchanged."""
    fm, body = parse_frontmatter("Review this code.\n")

    assert fm == Frontmatter()
    assert body == "Review this code.\n"


def test_empty_document():
    """Empty input gives empty frontmatter and body."""
    assert parse_frontmatter("") == (Frontmatter(), "")


def test_full_frontmatter():
    """All recognized keys are parsed and the body is stripped."""
    text = """---
description: Review a pull request
argument-hint: "[pr-number] [priority]"
allowed-tools:
  - Read
  - Grep
---

Review PR $1 with priority $2.
"""
    fm, body = parse_frontmatter(text)

    assert fm.description == "Review a pull request"
    assert fm.argument_hint == "[pr-number] [priority]"
    assert fm.allowed_tools == ["Read", "Grep"]
    assert body == "Review PR $1 with priority $2."


def test_comma_separated_tools():
    """allowed-tools given as one string is split and trimmed."""
    text = "---\nallowed-tools: Bash(git:*), Read ,, Grep\n---\nBody"

    fm, body = parse_frontmatter(text)

    assert fm.allowed_tools == ["Bash(git:*)", "Read", "Grep"]
    assert body == "Body"


def test_unquoted_hint_list():
    """An unquoted bracket hint parsed as a YAML list is restored."""
    fm, _ = parse_frontmatter("---\nargument-hint: [message]\n---\nBody")

    assert fm.argument_hint == "[message]"


def test_bom_is_stripped():
    """A leading byte-order mark does not hide the frontmatter."""
    fm, body = parse_frontmatter("﻿---\ndescription: With BOM\n---\nBody")

    assert fm.description == "With BOM"
    assert body == "Body"


def test_missing_closing_delimiter():
    """Without a closing delimiter the whole document is the body."""
    text = "---\ndescription: Oops\nBody without end"

    fm, body = parse_frontmatter(text)

    assert fm == Frontmatter()
    assert body == text


@pytest.mark.parametrize("text", ["---\n\n---\nBody", "---\n---\nBody", "---\n   \n---\nBody"])
def test_empty_block(text):
    """An empty or whitespace-only block counts as no frontmatter."""
    fm, body = parse_frontmatter(text)

    assert fm == Frontmatter()
    assert body == text


def test_closing_delimiter_at_end():
    """A closing delimiter at end of file leaves an empty body."""
    fm, body = parse_frontmatter("---\ndescription: Only meta\n---")

    assert fm.description == "Only meta"
    assert body == ""


def test_delimiter_must_be_own_line():
    """Dashes inside a line do not close the block."""
    text = "---\ndescription: a --- b\n---\nBody"

    fm, body = parse_frontmatter(text)

    assert fm.description == "a --- b"
    assert body == "Body"


def test_first_line_must_be_delimiter():
    """Four dashes are not a frontmatter opener."""
    text = "----\ndescription: x\n---\nBody"

    fm, body = parse_frontmatter(text)

    assert fm == Frontmatter()
    assert body == text


def test_invalid_yaml_returns_original(caplog):
    """Invalid YAML is logged and the original document is returned."""
    text = "---\ndescription: [unclosed\n---\nBody"

    with caplog.at_level(logging.WARNING):
        fm, body = parse_frontmatter(text)

    assert fm == Frontmatter()
    assert body == text
    assert "Failed to parse frontmatter YAML" in caplog.text


def test_non_mapping_yaml_returns_original():
    """A YAML list is not frontmatter."""
    text = "---\n- a\n- b\n---\nBody"

    fm, body = parse_frontmatter(text)

    assert fm == Frontmatter()
    assert body == text


def test_windows_line_endings():
    """CRLF documents are parsed too."""
    fm, body = parse_frontmatter("---\r\ndescription: CRLF\r\n---\r\nBody\r\n")

    assert fm.description == "CRLF"
    assert body == "Body"


def test_split_tools_shapes():
    """split_tools accepts lists, strings and nothing."""
    assert split_tools(None) == []
    assert split_tools("Read") == ["Read"]
    assert split_tools(["Read", " Grep "]) == ["Read", "Grep"]
    assert split_tools(["Read, Grep"]) == ["Read", "Grep"]
