import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from vtypes.config import Settings, configure_logging
from vtypes.contract import Type
from vtypes.errors import ConfigError
from vtypes.load import load_type_from_file
from vtypes.report import render_check_report, trial_rows
from vtypes.serialization import dumps

logger = logging.getLogger(__name__)


def _load(path: str) -> Type | None:
    match load_type_from_file(path):
        case str(err):
            print(f"Error loading {path}: {err}", file=sys.stderr)
            return None
        case t:
            return t


def _parse_value(raw: str) -> Any:
    """Decode a command-line value as JSON, or keep it as a bare string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def handle_ast(path: str, *, meta: bool) -> int:
    t = _load(path)
    if t is None:
        return 1
    print(dumps(t, meta=meta))
    return 0


def handle_check(path: str, values: Sequence[str]) -> int:
    """Try every value against the loaded type and print a report."""
    t = _load(path)
    if t is None:
        return 1
    rows = trial_rows(t, [_parse_value(v) for v in values])
    print(render_check_report(t, rows), end="")
    rejected = [r for r in rows if not r.success]
    if rejected:
        logger.info("%d of %d values rejected by %s", len(rejected), len(rows), t.name)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vtypes",
        description="Inspect and try type descriptors defined in Python files",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: ast
    ast_parser = subparsers.add_parser(
        "ast",
        help="Load a type from a .py file and print its AST as JSON.",
    )
    ast_parser.add_argument("file", metavar="FILE", help="Python file defining the type.")
    ast_parser.add_argument(
        "--meta",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include metadata in the AST (default: VTYPES_AST_META, on).",
    )

    # Command: check
    check_parser = subparsers.add_parser(
        "check",
        help="Try one or more values against a type and report the outcome.",
    )
    check_parser.add_argument("file", metavar="FILE", help="Python file defining the type.")
    check_parser.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help="Values to try, as JSON (bare words are taken as strings).",
    )

    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings)

    match args.command:
        case "ast":
            meta = settings.ast_meta if args.meta is None else args.meta
            return handle_ast(args.file, meta=meta)
        case "check":
            return handle_check(args.file, args.values)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


if __name__ == "__main__":
    sys.exit(main())
