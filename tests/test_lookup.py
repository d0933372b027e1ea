"""Tests for single-entry lookup.

Missing files are NotFound, present-but-invalid files are LoadError,
and the hidden flag does not apply.
"""

import pytest

from tests.conftest import make_entry
from vodcat.catalog.errors import EntryLoadError, EntryNotFoundError, InvalidSegmentError
from vodcat.catalog.lookup import check_segment, entry_path, get_entry


class TestEntryPath:
    """Tests for path computation."""

    def test_joins_kind_and_id(self, tmp_path):
        assert entry_path(tmp_path, "vods", "abc") == tmp_path / "vods" / "abc.json"

    @pytest.mark.parametrize("segment", ["", ".", "..", "a/b", "a\\b", "a\x00b"])
    def test_unsafe_segments_rejected(self, segment):
        with pytest.raises(InvalidSegmentError):
            check_segment(segment)

    def test_unsafe_id_rejected(self, tmp_path):
        with pytest.raises(InvalidSegmentError):
            entry_path(tmp_path, "vods", "..")


class TestGetEntry:
    """Tests for get_entry."""

    def test_returns_entry(self, catalog_root, write_entry):
        write_entry("one", make_entry(title="One"))
        entry = get_entry(catalog_root, "vods", "one")
        assert entry.entry_id == "one"
        assert entry.title == "One"

    def test_missing_is_not_found(self, catalog_root):
        with pytest.raises(EntryNotFoundError):
            get_entry(catalog_root, "vods", "missing")

    def test_missing_collection_is_not_found(self, catalog_root):
        with pytest.raises(EntryNotFoundError):
            get_entry(catalog_root, "nope", "missing")

    def test_broken_is_load_error(self, catalog_root, write_entry):
        write_entry("broken", "{not json")
        with pytest.raises(EntryLoadError):
            get_entry(catalog_root, "vods", "broken")

    def test_hidden_entry_still_returned(self, catalog_root, write_entry):
        write_entry("hiddenone", make_entry(hidden=True))
        entry = get_entry(catalog_root, "vods", "hiddenone")
        assert entry.hidden is True

    def test_traversal_is_not_found(self, catalog_root, write_entry):
        write_entry("escape", make_entry(), kind="other")
        with pytest.raises(EntryNotFoundError):
            get_entry(catalog_root / "vods", "..", "escape")

    def test_dotted_id_is_not_found(self, catalog_root, write_entry):
        """Sidecar files are not entries, even by direct id."""
        write_entry("x.meta", make_entry())
        with pytest.raises(EntryNotFoundError):
            get_entry(catalog_root, "vods", "x.meta")
