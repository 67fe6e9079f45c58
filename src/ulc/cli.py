"""Command-line driver: ``ulc [FILE] [-e EXPR] ...``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from termcolor import colored

from ulc.core.ast import Expression
from ulc.core.literals import church_to_int
from ulc.core.pretty import debug, pretty
from ulc.errors import UlcError
from ulc.interpreter import bounded_steps, load

logger = logging.getLogger(__name__)

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _int_at_least(minimum: int, text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < minimum:
        raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {value}")
    return value


def _non_negative(text: str) -> int:
    return _int_at_least(0, text)


def _positive(text: str) -> int:
    return _int_at_least(1, text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ulc",
        description="Evaluate an untyped lambda calculus program in normal order.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="program file to evaluate (reads standard input when omitted)",
    )
    parser.add_argument(
        "-e", "--expr", help="evaluate EXPR instead of reading a file"
    )
    parser.add_argument(
        "--prelude",
        action="store_true",
        help="make the standard Church-encoded definitions available",
    )
    parser.add_argument(
        "--max-steps",
        type=_non_negative,
        metavar="N",
        help="stop with an error after N reduction steps",
    )
    parser.add_argument(
        "--trace", action="store_true", help="print every intermediate term"
    )
    parser.add_argument(
        "--numeral",
        action="store_true",
        help="print the result as an integer when it is a Church numeral",
    )
    parser.add_argument(
        "--indices",
        action="store_true",
        help="print bound variables as de Bruijn indices",
    )
    parser.add_argument(
        "--ascii", action="store_true", help="print '\\' instead of 'λ'"
    )
    parser.add_argument(
        "--recursion-limit",
        type=_positive,
        metavar="N",
        help="raise the interpreter recursion limit for deeply nested terms",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress (-v) or every reduction step (-vv) to stderr",
    )
    return parser


def _read_source(args: argparse.Namespace) -> tuple[str, str]:
    if args.expr is not None:
        return args.expr, "<expr>"
    if args.file is None or args.file == "-":
        return sys.stdin.read(), "<stdin>"
    try:
        with open(args.file, encoding="utf-8") as handle:
            return handle.read(), args.file
    except OSError as exc:
        raise SystemExit(_format_error(f"cannot read {args.file!r}: {exc.strerror}"))


def _format_error(message: str) -> str:
    return colored("error: ", "red", attrs=["bold"]) + message


def _render(term: Expression, args: argparse.Namespace) -> str:
    if args.indices:
        return debug(term)
    return pretty(term, ascii=args.ascii)


def _reduce(term: Expression, args: argparse.Namespace) -> Expression:
    if args.trace:
        print(_render(term, args))
    last = term
    for last in bounded_steps(term, args.max_steps):
        if args.trace:
            print(colored("→ ", "cyan") + _render(last, args))
    return last


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = _LOG_LEVELS[min(args.verbose, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.recursion_limit is not None:
        sys.setrecursionlimit(args.recursion_limit)

    source, origin = _read_source(args)
    logger.info("evaluating %s", origin)
    try:
        term = load(source, prelude=args.prelude)
        result = _reduce(term, args)
        value = church_to_int(result) if args.numeral else None
    except UlcError as exc:
        print(f"{origin}: {_format_error(str(exc))}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(_format_error("interrupted"), file=sys.stderr)
        return 130
    if value is not None:
        print(value)
    elif not args.trace:
        print(_render(result, args))
    return 0


__all__ = ["build_parser", "main"]
