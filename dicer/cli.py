from __future__ import annotations

import argparse
import logging
import sys

from dicer import __version__
from dicer.config import settings
from dicer.dice import roll
from dicer.errors import ParseError
from dicer.normalize import normalize

EXIT_OK = 0
EXIT_PARSE_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicer", description="Drop a string and roll the dice."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-d",
        "--dicer",
        dest="expression",
        required=True,
        help='The dice expression to roll, e.g. "2d6+3".',
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print more details.")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose and settings.debug else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        outcome = roll(args.expression)
    except ParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    if args.verbose:
        print(f"dice: {normalize(args.expression)}")
        print(f"rolls: {', '.join(str(r) for r in outcome.rolls) or '-'}")
        print(f"total: {outcome.total}")
        print(f"minimum: {outcome.minimum}")
        print(f"maximum: {outcome.maximum}")
    else:
        print(f"result: {outcome.total}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
