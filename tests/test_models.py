"""Tests for models.py — Genre, Verdict and collision records."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from content_validator.models import (
    AltNameCollision,
    Genre,
    NameCollision,
    Outcome,
    Verdict,
)

pytestmark = pytest.mark.unit


class TestOutcomeEnum:
    def test_has_two_values(self):
        assert len(Outcome) == 2

    def test_values(self):
        assert Outcome.PASSED == "passed"
        assert Outcome.FAILED == "failed"

    def test_is_str_enum(self):
        from enum import StrEnum

        assert issubclass(Outcome, StrEnum)


class TestGenreModel:
    def test_creation_by_field_name(self):
        genre = Genre(name="action", alt_names=["act"])
        assert genre.name == "action"
        assert genre.alt_names == ["act"]

    def test_creation_by_json_alias(self):
        genre = Genre.model_validate({"name": "action", "altNames": ["act", "fighting"]})
        assert genre.alt_names == ["act", "fighting"]

    def test_alt_names_default_empty(self):
        assert Genre(name="rpg").alt_names == []

    def test_null_alt_names_become_empty(self):
        genre = Genre.model_validate({"name": "rpg", "altNames": None})
        assert genre.alt_names == []

    def test_missing_or_null_name_becomes_empty(self):
        assert Genre.model_validate({}).name == ""
        assert Genre.model_validate({"name": None}).name == ""

    def test_null_alt_name_items_become_empty(self):
        genre = Genre.model_validate({"name": "rpg", "altNames": [None, "crpg"]})
        assert genre.alt_names == ["", "crpg"]

    def test_does_not_normalise(self):
        genre = Genre(name=" Action ", alt_names=["ACT", "ACT"])
        assert genre.name == " Action "
        assert genre.alt_names == ["ACT", "ACT"]

    def test_rejects_non_string_name(self):
        with pytest.raises(ValidationError):
            Genre.model_validate({"name": 5})

    def test_rejects_non_string_alt_name(self):
        with pytest.raises(ValidationError):
            Genre.model_validate({"name": "rpg", "altNames": ["ok", 3]})

    def test_is_frozen(self):
        genre = Genre(name="rpg")
        with pytest.raises(ValidationError):
            genre.name = "fps"  # type: ignore[misc]

    def test_dumps_with_alias(self):
        genre = Genre(name="rpg", alt_names=["crpg"])
        assert genre.model_dump(by_alias=True) == {"name": "rpg", "altNames": ["crpg"]}


class TestVerdictModel:
    def test_ok_has_no_violations(self):
        verdict = Verdict[str].ok()
        assert verdict.outcome == Outcome.PASSED
        assert verdict.passed is True
        assert verdict.failed is False
        assert verdict.violations == []

    def test_fail_without_violations_is_still_failure(self):
        verdict = Verdict[str].fail()
        assert verdict.failed is True
        assert verdict.violations == []

    def test_fail_keeps_order(self):
        verdict = Verdict[str].fail(["b", "a", "b"])
        assert verdict.violations == ["b", "a", "b"]

    def test_from_violations_empty_passes(self):
        assert Verdict[str].from_violations([]).passed is True

    def test_from_violations_non_empty_fails(self):
        verdict = Verdict[str].from_violations(["Action"])
        assert verdict.failed is True
        assert verdict.violations == ["Action"]

    def test_holds_structured_violations(self):
        collision = NameCollision(colliding_genre_name="rpg", genre_with_colliding_alt_name="action")
        verdict = Verdict[NameCollision].fail([collision])
        assert verdict.violations[0].colliding_genre_name == "rpg"

    def test_is_pydantic_model(self):
        assert issubclass(Verdict, BaseModel)


class TestCollisionModels:
    def test_name_collision_fields(self):
        collision = NameCollision(colliding_genre_name="rpg", genre_with_colliding_alt_name="action")
        assert collision.colliding_genre_name == "rpg"
        assert collision.genre_with_colliding_alt_name == "action"

    def test_alt_name_collision_fields(self):
        collision = AltNameCollision(
            alt_name="x",
            colliding_genre_name="a",
            genre_with_colliding_alt_name="b",
        )
        assert collision.alt_name == "x"
        assert collision.colliding_genre_name == "a"
        assert collision.genre_with_colliding_alt_name == "b"

    def test_equality_by_value(self):
        first = AltNameCollision(alt_name="x", colliding_genre_name="a", genre_with_colliding_alt_name="b")
        second = AltNameCollision(alt_name="x", colliding_genre_name="a", genre_with_colliding_alt_name="b")
        assert first == second
