"""Longest common substring (contiguous run) of two sequences."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, islice
from pathlib import Path


def _longest_run(pairs: Iterable[tuple]) -> int:
    best = run = 0
    for x, y in pairs:
        run = run + 1 if x == y else 0
        best = max(best, run)
    return best


def longest_common_substring(a: Sequence, b: Sequence) -> int:
    """Return the length of the longest contiguous run shared by ``a`` and ``b``.

    Every diagonal alignment of the two sequences is scanned for its longest
    stretch of equal items.
    """
    diagonals = chain(
        (zip(islice(a, shift, None), b) for shift in range(len(a))),
        (zip(islice(b, shift, None), a) for shift in range(len(b))),
    )
    return max((_longest_run(diagonal) for diagonal in diagonals), default=0)


def longest_common_substring_dp(a: Sequence, b: Sequence) -> int:
    """Return the same length as :func:`longest_common_substring` using suffix lengths."""
    best = 0
    previous = [0] * len(b)
    for x in a:
        current = [0] * len(b)
        for j, y in enumerate(b):
            if x == y:
                current[j] = (previous[j - 1] if j else 0) + 1
                best = max(best, current[j])
        previous = current
    return best


def _parse_cases(tokens: list[str]) -> Iterator[tuple[str, str]]:
    stream = iter(tokens)

    def take() -> str:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def take_count() -> int:
        token = take()
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None
        if value < 0:
            raise ValueError(f"expected a non-negative integer, got {value}")
        return value

    for _ in range(take_count()):
        len1, len2 = take_count(), take_count()
        first, second = take(), take()
        yield first[:len1], second[:len2]


def main(argv: list[str] | None = None) -> int:
    """Read test cases and print the longest common substring length of each."""
    parser = argparse.ArgumentParser(
        prog="longest-common-substring",
        description=(
            "Read a case count, then for each case two lengths and two strings, "
            "and print the longest common substring length."
        ),
    )
    parser.add_argument("input", nargs="?", default="-", help="input file, or - for stdin")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    try:
        cases = list(_parse_cases(text.split()))
    except ValueError as exc:
        parser.error(str(exc))

    for first, second in cases:
        print(f"ans : {longest_common_substring(first, second)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())