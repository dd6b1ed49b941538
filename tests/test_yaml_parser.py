"""Tests for the YAML source parser."""

import logging

import pytest

from tip_catalog.core.errors import ParseError
from tip_catalog.input.yaml_parser import parse_yaml


def test_parse_entries_mapping():
    """Entries under an 'entries' key are parsed in order"""
    text = """
entries:
  - id: 2
    title: Guard statement
    link: https://example.com/guard
    tags: [Control-Flow]
    body: |
      Exit early.
  - id: 1
    title: Auto closures
    tags: closures, attributes
"""
    entries = parse_yaml(text, source="tips.yaml")

    assert [e.id for e in entries] == [2, 1]
    assert entries[0].tags == frozenset({"control-flow"})
    assert entries[0].body == "Exit early."
    assert entries[1].tags == frozenset({"closures", "attributes"})
    assert entries[1].link is None
    assert entries[1].source == "tips.yaml"


def test_parse_top_level_list():
    entries = parse_yaml("- id: 5\n  title: Defer\n")

    assert entries[0].id == 5
    assert entries[0].body == ""


def test_string_id_is_accepted():
    assert parse_yaml("- id: '12'\n  title: T\n")[0].id == 12


@pytest.mark.parametrize(
    "text",
    [
        "- title: No id\n",
        "- id: abc\n  title: Bad id\n",
        "- id: true\n  title: Bool id\n",
        "- id: 1\n",
        "- id: 1\n  title: T\n  link: ftp://example.com\n",
        "- just a string\n",
        "entries: {id: 1}\n",
        "title: no entries key\n",
    ],
)
def test_malformed_documents_raise(text):
    with pytest.raises(ParseError):
        parse_yaml(text)


def test_invalid_yaml_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_yaml("- id: 1\n  title: [unclosed\n", source="bad.yaml")

    assert excinfo.value.source == "bad.yaml"


def test_empty_document():
    assert parse_yaml("") == []


@pytest.mark.parametrize(
    "extra",
    [
        "  notes: hello\n",
        "  5: x\n",
        "  5: x\n  notes: hello\n",
    ],
)
def test_unknown_keys_are_ignored_with_warning(extra, caplog):
    """Unknown keys, including non-string ones, only produce a warning"""
    text = "- id: 1\n  title: T\n" + extra

    with caplog.at_level(logging.WARNING, logger="tip_catalog.input.yaml_parser"):
        entries = parse_yaml(text, source="tips.yaml")

    assert entries[0].id == 1
    assert any("Ignoring unknown keys" in r.getMessage() for r in caplog.records)
