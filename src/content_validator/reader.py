"""Load the genre catalog from a JSON file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from content_validator.models import Genre

logger = logging.getLogger(__name__)

# A null document decodes to no genres, a null entry to an empty genre.
_GENRE_LIST = TypeAdapter(list[Genre | None] | None)


class GenreReadError(Exception):
    """Raised when the genre catalog cannot be loaded."""


class GenreFileError(GenreReadError):
    """Raised when the catalog file cannot be read."""


class InvalidStructureError(GenreReadError):
    """Raised when the file is not a JSON array of genre objects."""


class NoGenresFoundError(GenreReadError):
    """Raised when the catalog decodes to an empty array."""


def read_genres_from_json(path: Path) -> list[Genre]:
    """Read and decode genres from a JSON file.

    The file must hold an array of objects with a ``name`` string and an
    optional ``altNames`` array of strings. Unknown keys are ignored.

    An empty array is rejected here even though every rule accepts an empty
    collection: an empty catalog on disk is always a data error.
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise GenreFileError(f"error reading file: {e}") from e

    try:
        decoded = _GENRE_LIST.validate_json(content)
    except ValidationError as e:
        raise InvalidStructureError(f"invalid structure: {e}") from e

    genres = [genre if genre is not None else Genre() for genre in decoded or []]
    if not genres:
        raise NoGenresFoundError("no game genres found in JSON")

    logger.debug(f"Loaded {len(genres)} genres from {path}")
    return genres
