"""Genre rules: pure checks over the whole catalog.

Every rule takes the full collection and returns a Verdict listing every
violation found. Rules never raise and never depend on each other; an empty
collection passes all of them.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence

from content_validator.models import AltNameCollision, Genre, NameCollision, Verdict


# Unicode White_Space. The \x1c-\x1f separators are not trimmed.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _is_blank(value: str) -> bool:
    return value.strip(WHITESPACE) == ""


def _is_untrimmed(value: str) -> bool:
    return value != value.strip(WHITESPACE)


def _is_not_lowercase(value: str) -> bool:
    return value != value.lower()


def _owners_of_matching_alt_names(
    genres: Sequence[Genre],
    predicate: Callable[[str], bool],
) -> list[str]:
    """Names of genres with at least one alt-name matching predicate, each once."""
    owners: list[str] = []
    for genre in genres:
        if any(predicate(alt) for alt in genre.alt_names) and genre.name not in owners:
            owners.append(genre.name)
    return owners


def validate_name_not_empty(genres: Sequence[Genre]) -> Verdict[str]:
    """Fail if any genre name is empty or whitespace-only. Reports no items."""
    if any(_is_blank(genre.name) for genre in genres):
        return Verdict[str].fail()
    return Verdict[str].ok()


def validate_alt_names_not_empty(genres: Sequence[Genre]) -> Verdict[str]:
    """Report genres owning an empty or whitespace-only alternative name."""
    return Verdict[str].from_violations(_owners_of_matching_alt_names(genres, _is_blank))


def validate_name_trimmed(genres: Sequence[Genre]) -> Verdict[str]:
    """Report names carrying leading or trailing whitespace, as written."""
    return Verdict[str].from_violations([g.name for g in genres if _is_untrimmed(g.name)])


def validate_alt_names_trimmed(genres: Sequence[Genre]) -> Verdict[str]:
    """Report genres owning an alternative name with surrounding whitespace.

    The owning genre's name is reported, not the alternative name itself, and
    each owner appears once however many of its alt-names are untrimmed.
    """
    return Verdict[str].from_violations(_owners_of_matching_alt_names(genres, _is_untrimmed))


def validate_name_case(genres: Sequence[Genre]) -> Verdict[str]:
    """Report names that differ from their lowercased form.

    Digits, symbols and scripts without case never fail this check.
    """
    return Verdict[str].from_violations([g.name for g in genres if _is_not_lowercase(g.name)])


def validate_alt_names_case(genres: Sequence[Genre]) -> Verdict[str]:
    """Report every alternative name that is not lowercase.

    Unlike the other alt-name rules this reports the offending string, and a
    string repeated in the data is reported once per occurrence.
    """
    invalid = [alt for genre in genres for alt in genre.alt_names if _is_not_lowercase(alt)]
    return Verdict[str].from_violations(invalid)


def validate_name_unique(genres: Sequence[Genre]) -> Verdict[str]:
    """Report each name used by more than one genre, once, in sorted order."""
    counts = Counter(genre.name for genre in genres)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    return Verdict[str].from_violations(duplicates)


def validate_alt_names_unique(genres: Sequence[Genre]) -> Verdict[str]:
    """Report genres whose own alternative names repeat.

    Only the owning genre is reported; the scan of a genre stops at its first
    repeated alt-name. Repeats across different genres are handled by
    validate_alt_name_collisions.
    """
    invalid: list[str] = []
    for genre in genres:
        seen: set[str] = set()
        for alt in genre.alt_names:
            if alt in seen:
                invalid.append(genre.name)
                break
            seen.add(alt)
    return Verdict[str].from_violations(invalid)


def validate_name_alt_name_collisions(genres: Sequence[Genre]) -> Verdict[NameCollision]:
    """Report every genre name that appears among any genre's alternative names.

    Each (genre, other) pair is checked, a genre paired with itself included,
    in collection order. A name listed in several genres' alt-names yields one
    collision per listing genre.
    """
    collisions: list[NameCollision] = []
    for genre in genres:
        for other in genres:
            if genre.name in other.alt_names:
                collisions.append(
                    NameCollision(
                        colliding_genre_name=genre.name,
                        genre_with_colliding_alt_name=other.name,
                    )
                )
    return Verdict[NameCollision].from_violations(collisions)


def validate_alt_name_collisions(genres: Sequence[Genre]) -> Verdict[AltNameCollision]:
    """Report alternative names shared between two different genres.

    Matches are directional: a string shared by A and B produces (A finds it in
    B) and (B finds it in A). Genres are told apart by name: a repeat inside one
    genre's list, or a string shared by two genres with the same name, is left
    to the uniqueness rules.
    """
    collisions: list[AltNameCollision] = []
    for genre in genres:
        for alt in genre.alt_names:
            for other in genres:
                if other.name == genre.name:
                    continue
                if alt in other.alt_names:
                    collisions.append(
                        AltNameCollision(
                            alt_name=alt,
                            colliding_genre_name=genre.name,
                            genre_with_colliding_alt_name=other.name,
                        )
                    )
    return Verdict[AltNameCollision].from_violations(collisions)


ALL_RULES = (
    validate_name_not_empty,
    validate_alt_names_not_empty,
    validate_name_trimmed,
    validate_alt_names_trimmed,
    validate_name_case,
    validate_alt_names_case,
    validate_name_unique,
    validate_alt_names_unique,
    validate_name_alt_name_collisions,
    validate_alt_name_collisions,
)
