#!/usr/bin/env python3
"""Command-line interface for gexpr."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import get_max_steps, get_recursion_limit, setup_logging
from .debug_utils.pprint import format_expr, format_value
from .errors import GexprError
from .interpreter import Interpreter
from .reader.codec import dumps_value, loads

logger = logging.getLogger(__name__)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_run(args: argparse.Namespace) -> int:
    expr = loads(_read_source(args.file))
    max_steps = args.max_steps if args.max_steps is not None else get_max_steps()
    interp = Interpreter(prelude=not args.no_prelude, max_steps=max_steps)
    value = interp.eval(expr)
    print(dumps_value(value) if args.json else format_value(value))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    expr = loads(_read_source(args.file))
    color = not args.no_color and sys.stdout.isatty()
    print(format_expr(expr, {"max_depth": args.depth, "color": color}))
    return 0


def cmd_env(args: argparse.Namespace) -> int:
    interp = Interpreter(prelude=not args.no_prelude)
    for name in interp.env.names():
        print(f"{name:10} {format_value(interp.env.lookup(name))}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gexpr", description="Evaluate JSON G-Expressions")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $GEXPR_LOG_LEVEL or WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Evaluate a G-Expression document and print its value")
    run.add_argument("file", help="JSON file, or - for stdin")
    run.add_argument("--json", action="store_true", help="Print the value as JSON")
    run.add_argument("--no-prelude", action="store_true", help="Only load the genesis context")
    run.add_argument("--max-steps", type=int, default=None, help="Abort after N evaluation steps")
    run.set_defaults(func=cmd_run)

    show = sub.add_parser("show", help="Print the expression tree")
    show.add_argument("file", help="JSON file, or - for stdin")
    show.add_argument("--depth", type=int, default=32, help="Maximum tree depth")
    show.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    show.set_defaults(func=cmd_show)

    env = sub.add_parser("env", help="List the names bound at startup")
    env.add_argument("--no-prelude", action="store_true", help="Only list the genesis context")
    env.set_defaults(func=cmd_env)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        limit = get_recursion_limit()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if limit is not None and limit > sys.getrecursionlimit():
        logger.debug("Raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)

    try:
        return args.func(args)
    except GexprError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: recursion depth exceeded (see GEXPR_RECURSION_LIMIT)", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
