"""Shared pytest fixtures for vodcat tests."""

import json

import pytest


@pytest.fixture
def catalog_root(tmp_path):
    """Create an empty catalog root with the vods collection directory."""
    (tmp_path / "vods").mkdir()
    return tmp_path


@pytest.fixture
def write_entry(catalog_root):
    """Write an entry file; dict payloads are JSON-encoded, strings written raw."""

    def _write(entry_id, payload, kind="vods", suffix=".json"):
        directory = catalog_root / kind
        directory.mkdir(exist_ok=True)
        path = directory / f"{entry_id}{suffix}"
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def make_entry(**overrides):
    """Build a valid entry document, with overrides applied."""
    payload = {
        "title": "Stream",
        "description": "A stream",
        "created_at": "2024-01-01T12:00:00Z",
        "duration": "1h2m3s",
    }
    payload.update(overrides)
    return payload
