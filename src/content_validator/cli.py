"""CLI entry point for content-validator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import cast

from content_validator import __version__
from content_validator.checks import CHECK_IDS, CHECKS, first_failure, get_check, run_checks
from content_validator.config import OUTPUT_FORMATS, load_validator_config
from content_validator.reader import GenreReadError, read_genres_from_json
from content_validator.report import format_json, format_text

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    # Without -v, warnings still reach stderr through logging's last-resort handler.
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _cmd_check(args: argparse.Namespace) -> None:
    path = cast(Path, args.path)
    config = load_validator_config(cast("Path | None", args.config))

    fail_fast = config.fail_fast and not cast(bool, args.all)
    output_format = cast("str | None", args.format) or config.output_format

    skip: list[str] = []
    for check_id in config.skip_checks:
        if get_check(check_id) is None:
            logger.warning(f"Ignoring unknown check id in config skip_checks: {check_id!r}")
            continue
        skip.append(check_id)
    skip.extend(cast("list[str] | None", args.skip) or [])

    try:
        genres = read_genres_from_json(path)
    except GenreReadError as e:
        print(f"Error: failed to read game genres: {e}", file=sys.stderr)
        sys.exit(1)

    results = run_checks(genres, fail_fast=fail_fast, skip=skip)

    if output_format == "json":
        print(format_json(results))
    else:
        print(format_text(results))

    failure = first_failure(results)
    if failure is not None:
        logger.debug(f"First failing check: {failure.check.id}")
        sys.exit(1)


def _cmd_rules(_args: argparse.Namespace) -> None:
    width = max(len(check.id) for check in CHECKS)
    for check in CHECKS:
        print(f"{check.id:<{width}}  [{check.category}]  {check.description}")


def _is_json_path(arg: str) -> bool:
    return arg.endswith(".json")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="content-validator",
        description="Validate a game genre catalog against naming and collision rules",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"content-validator {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command")

    # check subcommand
    check_p = subparsers.add_parser("check", help="Validate a genre catalog JSON file")
    _ = check_p.add_argument("path", type=Path, help="Path to the genres JSON file")
    _ = check_p.add_argument(
        "--all",
        action="store_true",
        help="Run every check instead of stopping at the first failure",
    )
    _ = check_p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Report format (default: text, or the config file's output_format)",
    )
    _ = check_p.add_argument(
        "--skip",
        action="append",
        choices=CHECK_IDS,
        metavar="CHECK",
        help="Skip a check by id (repeatable; see 'rules')",
    )
    _ = check_p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ./.content-validator.json)",
    )
    _ = check_p.add_argument(
        "-v", "--verbose", action="store_true", help="Log each check to stderr"
    )

    # rules subcommand
    _ = subparsers.add_parser("rules", help="List the checks in the order they run")

    # Backward compat: a bare .json path runs the check subcommand
    argv = sys.argv[1:]
    if argv and _is_json_path(argv[0]):
        argv = ["check"] + argv

    args = parser.parse_args(argv)
    verbose: bool = hasattr(args, "verbose") and bool(args.verbose)
    _setup_logging(verbose)

    dispatch = {
        "check": _cmd_check,
        "rules": _cmd_rules,
    }
    command = cast("str | None", args.command)
    handler = dispatch.get(command) if command is not None else None
    if handler:
        handler(args)
    else:
        parser.print_help()
        sys.exit(1)
