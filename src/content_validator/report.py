"""Render check results as plain text or JSON."""

from __future__ import annotations

import json
from collections.abc import Sequence

from pydantic import BaseModel

from content_validator.checks import CheckResult, all_passed
from content_validator.models import AltNameCollision, NameCollision
from content_validator.rules import WHITESPACE


def _show(value: str) -> str:
    # Quote values whose whitespace would otherwise be invisible.
    if value == "" or value != value.strip(WHITESPACE):
        return repr(value)
    return value


def format_violation(violation: object) -> str:
    if isinstance(violation, AltNameCollision):
        return (
            f"{_show(violation.alt_name)}: {_show(violation.colliding_genre_name)}"
            f" - {_show(violation.genre_with_colliding_alt_name)}"
        )
    if isinstance(violation, NameCollision):
        return (
            f"{_show(violation.colliding_genre_name)}"
            f" - {_show(violation.genre_with_colliding_alt_name)}"
        )
    if isinstance(violation, str):
        return _show(violation)
    return str(violation)


def format_text(results: Sequence[CheckResult]) -> str:
    """One block per failed check, then a summary line."""
    lines: list[str] = []
    failed = [r for r in results if not r.passed]

    for result in failed:
        lines.append(f"{result.check.description}:")
        for violation in result.verdict.violations:
            lines.append(f"  {format_violation(violation)}")
        lines.append("")

    lines.append(f"{len(results)} checks run, {len(failed)} failed")
    return "\n".join(lines)


def _dump(violation: object) -> object:
    if isinstance(violation, BaseModel):
        return violation.model_dump(mode="json")
    return violation


def format_json(results: Sequence[CheckResult]) -> str:
    document = {
        "passed": all_passed(results),
        "results": [
            {
                "check": r.check.id,
                "category": str(r.check.category),
                "description": r.check.description,
                "outcome": str(r.verdict.outcome),
                "violations": [_dump(v) for v in r.verdict.violations],
            }
            for r in results
        ],
    }
    return json.dumps(document, indent=2, ensure_ascii=False)
