"""CLI entry point for dvcheck.

Provides ``main()`` for the ``dvcheck`` console script: loads a pre-parsed
match document, validates it and prints one diagnostic per line.

Usage::

    dvcheck match.json                      # default level 2, indoor
    dvcheck match.json.gz --level 3         # include minor issues
    dvcheck beach.json --file-type beach
    dvcheck match.json --setter-tip-code PP --setter-tip-code XY --json

Exit status is 0 when no issues were found, 1 when issues were reported,
and 2 on configuration or file errors.
"""

import argparse
import json
import logging
import sys

from dvcheck.config import FILE_TYPES, INDOOR
from dvcheck.engine import resolve_config, validate
from dvcheck.exceptions import DVCheckError
from dvcheck.logging_config import setup_logging
from dvcheck.match_file import load_match
from dvcheck.models import Diagnostic
from dvcheck.reporter import format_diagnostic
from dvcheck.rules import RULES

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the dvcheck CLI."""
    parser = argparse.ArgumentParser(
        prog="dvcheck",
        description="Check a scouted volleyball match for internal inconsistencies",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Match document (.json or .json.gz)",
    )
    parser.add_argument(
        "--level",
        type=int,
        default=2,
        choices=range(0, 4),
        help="Validation level 0-3 (default: 2)",
    )
    parser.add_argument(
        "--file-type",
        choices=FILE_TYPES,
        default=INDOOR,
        help="indoor or beach (default: indoor)",
    )
    parser.add_argument(
        "--setter-tip-code",
        action="append",
        default=[],
        dest="setter_tip_codes",
        metavar="CODE",
        help="Attack code exempt from the back-row attack check (repeatable)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to run the rules (default: 1)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print diagnostics as a JSON array",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List the rules that would run for the given level and file type, then exit",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Write a DEBUG log file to this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to the console",
    )
    return parser


def _render(diagnostics: list[Diagnostic], as_json: bool) -> str:
    if as_json:
        return json.dumps(
            [d.model_dump(mode="json") for d in diagnostics], indent=2
        )
    return "\n".join(format_diagnostic(d) for d in diagnostics)


def main(argv: list[str] | None = None) -> int:
    """Sync entry point for the dvcheck console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        log_dir=args.log_dir,
        console_level=logging.INFO if args.verbose else logging.WARNING,
    )
    options = {"setter_tip_codes": args.setter_tip_codes}

    try:
        if args.list_rules:
            config = resolve_config(args.level, options, args.file_type, args.workers)
            for rule in RULES:
                if rule.applies(config):
                    print(rule.name)
            return EXIT_CLEAN

        if args.path is None:
            parser.error("path is required unless --list-rules is given")

        slots = 6 if args.file_type == INDOOR else 2
        plays, meta = load_match(args.path, slots=slots)
        diagnostics = validate(
            plays,
            meta,
            validation_level=args.level,
            options=options,
            file_type=args.file_type,
            max_workers=args.workers,
        )
    except DVCheckError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"dvcheck: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if diagnostics or args.json:
        print(_render(diagnostics, args.json))
    return EXIT_ISSUES if diagnostics else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
