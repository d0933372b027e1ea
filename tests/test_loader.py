"""Tests for entry file loading."""

from datetime import timedelta

import pytest

from tests.conftest import make_entry
from vodcat.catalog.errors import EntryLoadError
from vodcat.catalog.loader import load_entry, read_entry


class TestReadEntry:
    """Tests for read_entry."""

    def test_id_comes_from_file_stem(self, write_entry):
        path = write_entry("stream-42", make_entry(id="ignored"))
        entry = read_entry(path)
        assert entry.entry_id == "stream-42"

    def test_fields_loaded(self, write_entry):
        path = write_entry("a", make_entry(title="Title", duration=3723))
        entry = read_entry(path)
        assert entry.title == "Title"
        assert entry.description == "A stream"
        assert entry.duration == timedelta(seconds=3723)
        assert entry.hidden is None
        assert not entry.is_hidden

    def test_hidden_flag_loaded(self, write_entry):
        entry = read_entry(write_entry("a", make_entry(hidden=True)))
        assert entry.hidden is True
        assert entry.is_hidden

    def test_missing_file(self, catalog_root):
        with pytest.raises(EntryLoadError):
            read_entry(catalog_root / "vods" / "missing.json")

    def test_malformed_json(self, write_entry):
        with pytest.raises(EntryLoadError):
            read_entry(write_entry("broken", "{not json"))

    def test_schema_violation(self, write_entry):
        with pytest.raises(EntryLoadError):
            read_entry(write_entry("bad", {"title": "no timestamp", "duration": 1}))

    def test_invalid_duration(self, write_entry):
        with pytest.raises(EntryLoadError):
            read_entry(write_entry("bad", make_entry(duration="forever")))

    def test_json_array_rejected(self, write_entry):
        with pytest.raises(EntryLoadError):
            read_entry(write_entry("list", "[]"))

    def test_timestamp_out_of_range_in_utc(self, write_entry):
        path = write_entry("early", make_entry(created_at="0001-01-01T00:00:00+01:00"))
        with pytest.raises(EntryLoadError):
            read_entry(path)

    def test_huge_integer_duration(self, write_entry):
        text = '{"title": "T", "created_at": "2024-01-01T00:00:00Z", "duration": ' + "9" * 400 + "}"
        path = write_entry("long", text)
        with pytest.raises(EntryLoadError):
            read_entry(path)

    def test_directory_path(self, catalog_root):
        (catalog_root / "vods" / "dir.json").mkdir()
        with pytest.raises(EntryLoadError):
            read_entry(catalog_root / "vods" / "dir.json")


class TestLoadEntry:
    """Tests for the collapsed load_entry result."""

    def test_returns_entry(self, write_entry):
        assert load_entry(write_entry("ok", make_entry())) is not None

    def test_missing_and_malformed_both_none(self, catalog_root, write_entry):
        assert load_entry(catalog_root / "vods" / "missing.json") is None
        assert load_entry(write_entry("broken", "{")) is None

    def test_out_of_range_values_none(self, write_entry):
        late = write_entry("late", make_entry(created_at="9999-12-31T23:59:59-01:00"))
        assert load_entry(late) is None
        assert load_entry(write_entry("long", make_entry(duration=10**400))) is None
