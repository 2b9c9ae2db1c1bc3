"""Pydantic models and enums for the genre rule engine."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

V = TypeVar("V")


class Genre(BaseModel):
    """One catalog entry: a canonical name plus its synonyms.

    Nothing is enforced on construction; the rules report what is wrong.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    alt_names: list[str] = Field(default_factory=list, alias="altNames")

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("alt_names", mode="before")
    @classmethod
    def _null_alt_names(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value


class Outcome(StrEnum):
    PASSED = "passed"
    FAILED = "failed"


class Verdict(BaseModel, Generic[V]):
    """Tagged result of one rule over the whole collection.

    A failed verdict may carry no violations (Name-not-empty reports a
    boolean only), so callers must read ``outcome``, not the list length.
    """

    model_config = ConfigDict(frozen=True)

    outcome: Outcome
    violations: list[V] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASSED

    @property
    def failed(self) -> bool:
        return self.outcome == Outcome.FAILED

    @classmethod
    def ok(cls) -> Verdict[V]:
        return cls(outcome=Outcome.PASSED)

    @classmethod
    def fail(cls, violations: Sequence[V] = ()) -> Verdict[V]:
        return cls(outcome=Outcome.FAILED, violations=list(violations))

    @classmethod
    def from_violations(cls, violations: Sequence[V]) -> Verdict[V]:
        """Fail when any violation was collected, pass otherwise."""
        if violations:
            return cls.fail(violations)
        return cls.ok()


class NameCollision(BaseModel):
    """A genre name that also appears in some genre's alternative names."""

    model_config = ConfigDict(frozen=True)

    colliding_genre_name: str
    genre_with_colliding_alt_name: str


class AltNameCollision(BaseModel):
    """An alternative name found in the alt-name lists of two different genres."""

    model_config = ConfigDict(frozen=True)

    alt_name: str
    colliding_genre_name: str
    genre_with_colliding_alt_name: str
