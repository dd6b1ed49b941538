"""Tests for EntryStore loading and lookup."""

from pathlib import Path

import pytest

from tip_catalog.core.errors import NotFound, ParseError
from tip_catalog.core.store import EntryStore, load
from tip_catalog.core.types import Entry


def test_load_returns_mapping_in_load_order(corpus_path):
    """load() maps id -> Entry, iterating in document order"""
    mapping = load(corpus_path)

    assert list(mapping) == [1, 2, 3]
    assert mapping[2].title == "Guard statement"


def test_mapping_is_read_only(corpus_path):
    mapping = load(corpus_path)

    with pytest.raises(TypeError):
        mapping[9] = Entry(id=9, title="x")  # type: ignore[index]


def test_get_missing_id_raises_not_found(corpus_path):
    store = EntryStore.load(corpus_path)

    with pytest.raises(NotFound) as excinfo:
        store.get(99)

    assert excinfo.value.entry_id == 99
    assert isinstance(excinfo.value, LookupError)


def test_store_container_protocol(corpus_path):
    store = EntryStore.load(corpus_path)

    assert len(store) == 3
    assert 1 in store
    assert 99 not in store
    assert [e.id for e in store] == [1, 2, 3]
    assert store.entries() == list(store)


def test_duplicate_id_within_document(tmp_path: Path):
    """Repeating an id in one document is a parse error"""
    path = tmp_path / "tips.md"
    path.write_text("## 1. First\n\n## 1. Again\n", encoding="utf-8")

    with pytest.raises(ParseError) as excinfo:
        EntryStore.load(path)

    assert "duplicate id 1" in str(excinfo.value)


def test_duplicate_id_across_documents(tmp_path: Path, corpus_path):
    """Ids must be unique across every loaded document"""
    other = tmp_path / "more.yaml"
    other.write_text("- id: 2\n  title: Another guard\n", encoding="utf-8")

    with pytest.raises(ParseError) as excinfo:
        EntryStore.load([corpus_path, other])

    assert excinfo.value.source == str(other)
    assert str(corpus_path) in str(excinfo.value)


def test_load_directory_reads_supported_files_in_name_order(tmp_path: Path):
    (tmp_path / "b.md").write_text("## 2. Bee\n", encoding="utf-8")
    (tmp_path / "a.yml").write_text("- id: 1\n  title: Ay\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    store = EntryStore.load(tmp_path)

    assert [e.title for e in store] == ["Ay", "Bee"]


def test_missing_source_raises_file_not_found(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        EntryStore.load(tmp_path / "nope.md")


def test_unsupported_file_type(tmp_path: Path):
    path = tmp_path / "tips.txt"
    path.write_text("## 1. T\n", encoding="utf-8")

    with pytest.raises(ParseError):
        EntryStore.load(path)


def test_store_from_entries():
    store = EntryStore([Entry(id=3, title="c"), Entry(id=1, title="a")])

    assert [e.id for e in store] == [3, 1]
    with pytest.raises(ParseError):
        EntryStore([Entry(id=1, title="a"), Entry(id=1, title="b")])


def test_invalid_utf8_raises_parse_error(tmp_path: Path):
    """Undecodable bytes are a malformed document, not a crash"""
    path = tmp_path / "tips.md"
    path.write_bytes(b"\xff\xfe## 1. T\n")

    with pytest.raises(ParseError) as excinfo:
        EntryStore.load(path)

    assert excinfo.value.source == str(path)
    assert "not valid UTF-8" in str(excinfo.value)
