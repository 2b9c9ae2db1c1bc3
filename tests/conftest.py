"""Shared fixtures for content_validator tests."""

import json
from pathlib import Path

import pytest


def _make_genre(name: str, *alt_names: str) -> dict:
    """Build a genre entry as it appears in the catalog file."""
    return {"name": name, "altNames": list(alt_names)}


def _write_json(path: Path, payload: object) -> Path:
    """Write a JSON document to a file."""
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def valid_catalog(tmp_path: Path) -> Path:
    """Two clean genres that pass every check."""
    entries = [
        _make_genre("action", "act", "fighting"),
        _make_genre("adventure", "adv"),
    ]
    return _write_json(tmp_path / "genres.json", entries)


@pytest.fixture
def uppercase_catalog(tmp_path: Path) -> Path:
    """Catalog whose only problem is a capitalised name."""
    return _write_json(tmp_path / "uppercase.json", [_make_genre("Action")])


@pytest.fixture
def colliding_catalog(tmp_path: Path) -> Path:
    """Catalog with an uppercase alt-name and a name/alt-name collision."""
    entries = [
        _make_genre("action", "rpg", "Fighting"),
        _make_genre("rpg"),
    ]
    return _write_json(tmp_path / "colliding.json", entries)


@pytest.fixture
def empty_catalog(tmp_path: Path) -> Path:
    """A well-formed but empty JSON array."""
    return _write_json(tmp_path / "empty.json", [])


@pytest.fixture
def malformed_catalog(tmp_path: Path) -> Path:
    """A file that is not JSON at all."""
    path = tmp_path / "broken.json"
    path.write_text("[{name: action", encoding="utf-8")
    return path
