"""
Command-line front end: sort positive integers given as arguments.

    $ fordjohnson 3 5 9 7 4
    Before: 3 5 9 7 4
    After:  3 4 5 7 9
    Time to process a range of 5 elements with list : 4.12300 us
    Time to process a range of 5 elements with deque : 3.87100 us

Every token must be a plain decimal integer in [1, 2147483647]; a single bad
token rejects the whole run with ``Error`` on stderr and exit status 1.
"""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, List, NoReturn, Optional, Sequence, Tuple

from rich.console import Console
from rich.logging import RichHandler

from .algorithms.merge_insert import MAX_VALUE, MIN_VALUE, merge_insert_sort
from .bench.measure import time_once
from .config import SEARCH_MODES
from .containers import container_names
from .errors import FordJohnsonError, InvalidInput

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 5

__all__ = ["format_preview", "main", "parse_arguments", "parse_token", "run"]


def parse_token(token: str) -> int:
    """Convert one argument to an int, raising `InvalidInput` if it is not a positive int32."""
    # str.isdigit() also accepts non-ASCII digits, which int() would happily parse
    if not token or not (token.isascii() and token.isdigit()):
        raise InvalidInput(token, "not a positive decimal integer")
    value = int(token)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise InvalidInput(token, f"outside [{MIN_VALUE}, {MAX_VALUE}]")
    return value


def parse_arguments(tokens: Iterable[str]) -> List[int]:
    """Validate all tokens; the first invalid one aborts with `InvalidInput`."""
    return [parse_token(t) for t in tokens]


def format_preview(values: Sequence[int], limit: int = PREVIEW_LIMIT) -> str:
    """First `limit` values separated by spaces, with ``[...]`` appended if truncated."""
    shown = " ".join(str(values[i]) for i in range(min(limit, len(values))))
    if len(values) > limit:
        shown = f"{shown} [...]" if shown else "[...]"
    return shown


def run(values: List[int], *, search: str = "full", console: Optional[Console] = None) -> List[Tuple[str, float]]:
    """
    Sort `values` once per container, print the report, and return
    ``[(container, elapsed_us), ...]``.
    """
    console = console or Console(highlight=False)
    console.print(f"Before: {format_preview(values)}", markup=False, soft_wrap=True)

    timings: List[Tuple[str, float]] = []
    result: Optional[List[int]] = None
    for kind in container_names():
        out, elapsed_ns = time_once(merge_insert_sort, values, container=kind, search=search)
        logger.debug("%s: %d ns", kind, elapsed_ns)
        if result is None:
            result = list(out)
        elif list(out) != result:
            raise FordJohnsonError(f"{kind} result differs from {timings[0][0]} result")
        timings.append((kind, elapsed_ns / 1e3))

    console.print(f"After:  {format_preview(result or [])}", markup=False, soft_wrap=True)
    for kind, us in timings:
        console.print(
            f"Time to process a range of {len(values)} elements with {kind} : {us:.5f} us",
            markup=False,
            soft_wrap=True,
        )
    return timings


class _ArgumentParser(argparse.ArgumentParser):
    """Turns malformed options (e.g. ``-h1``) into `InvalidInput` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidInput(message, "rejected by the argument parser")


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="fordjohnson",
        description="Sort positive integers with the Ford-Johnson merge-insertion sort.",
    )
    p.add_argument("numbers", nargs="*", help="positive integers to sort")
    p.add_argument("--search", choices=SEARCH_MODES, default="full",
                   help="binary-search window for pend insertion (default: %(default)s)")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    err_console = Console(stderr=True, highlight=False)
    try:
        args, extras = _build_parser().parse_known_args(argv)
    except InvalidInput:
        err_console.print("Error", markup=False)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )

    # unrecognised dash tokens (-x, --foo) are just more bad numbers
    tokens = [*args.numbers, *extras]
    if not tokens:
        err_console.print("Error: no input provided", markup=False)
        return 1
    try:
        values = parse_arguments(tokens)
    except InvalidInput as e:
        logger.debug("%s", e)
        err_console.print("Error", markup=False)
        return 1

    run(values, search=args.search)
    return 0
