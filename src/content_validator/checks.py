"""Ordered check battery: which rules run, in what order, and when to stop."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from content_validator import rules
from content_validator.models import Genre, Verdict

logger = logging.getLogger(__name__)


class CheckCategory(StrEnum):
    EMPTINESS = "emptiness"
    TRIMMING = "trimming"
    CASE = "case"
    UNIQUENESS = "uniqueness"
    COLLISIONS = "collisions"


@dataclass(frozen=True)
class Check:
    id: str
    category: CheckCategory
    description: str
    rule: Callable[[Sequence[Genre]], Verdict[Any]]


@dataclass(frozen=True)
class CheckResult:
    check: Check
    verdict: Verdict[Any]

    @property
    def passed(self) -> bool:
        return self.verdict.passed


CHECKS: tuple[Check, ...] = (
    Check(
        id="name-not-empty",
        category=CheckCategory.EMPTINESS,
        description="There are game genres with empty names",
        rule=rules.validate_name_not_empty,
    ),
    Check(
        id="alt-names-not-empty",
        category=CheckCategory.EMPTINESS,
        description="There are game genres with empty alternative names",
        rule=rules.validate_alt_names_not_empty,
    ),
    Check(
        id="name-trimmed",
        category=CheckCategory.TRIMMING,
        description="There are game genres with leading or trailing whitespace in their names",
        rule=rules.validate_name_trimmed,
    ),
    Check(
        id="alt-names-trimmed",
        category=CheckCategory.TRIMMING,
        description=(
            "There are game genres with leading or trailing whitespace"
            " in their alternative names"
        ),
        rule=rules.validate_alt_names_trimmed,
    ),
    Check(
        id="name-case",
        category=CheckCategory.CASE,
        description="There are game genres with names that are not in lowercase",
        rule=rules.validate_name_case,
    ),
    Check(
        id="alt-names-case",
        category=CheckCategory.CASE,
        description="There are game genres with alternative names that are not in lowercase",
        rule=rules.validate_alt_names_case,
    ),
    Check(
        id="name-unique",
        category=CheckCategory.UNIQUENESS,
        description="There are game genres with duplicate names",
        rule=rules.validate_name_unique,
    ),
    Check(
        id="alt-names-unique",
        category=CheckCategory.UNIQUENESS,
        description="There are game genres with duplicate alternative names",
        rule=rules.validate_alt_names_unique,
    ),
    Check(
        id="name-alt-name-collision",
        category=CheckCategory.COLLISIONS,
        description="There are game genres with names that are also alternative names",
        rule=rules.validate_name_alt_name_collisions,
    ),
    Check(
        id="alt-name-collision",
        category=CheckCategory.COLLISIONS,
        description="There are game genres sharing alternative names",
        rule=rules.validate_alt_name_collisions,
    ),
)

CHECK_IDS: tuple[str, ...] = tuple(check.id for check in CHECKS)


def get_check(check_id: str) -> Check | None:
    for check in CHECKS:
        if check.id == check_id:
            return check
    return None


def run_checks(
    genres: Sequence[Genre],
    *,
    fail_fast: bool = True,
    skip: Iterable[str] = (),
) -> list[CheckResult]:
    """Run the battery in precedence order.

    With fail_fast the run stops after the first failing check, so the result
    list ends with that failure. Checks whose id is in skip are not evaluated
    and do not appear in the results.
    """
    skipped = set(skip)
    results: list[CheckResult] = []

    for check in CHECKS:
        if check.id in skipped:
            logger.debug(f"Skipping check {check.id}")
            continue

        verdict = check.rule(genres)
        results.append(CheckResult(check=check, verdict=verdict))

        if verdict.passed:
            logger.debug(f"Check {check.id} passed")
            continue

        logger.info(f"Check {check.id} failed with {len(verdict.violations)} violations")
        if fail_fast:
            break

    return results


def all_passed(results: Iterable[CheckResult]) -> bool:
    return all(result.passed for result in results)


def first_failure(results: Iterable[CheckResult]) -> CheckResult | None:
    for result in results:
        if not result.passed:
            return result
    return None
