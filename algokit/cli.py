"""Command-line drivers for the solvers and sorting/transposition checks."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from typing import Optional, TextIO

from algokit.langford import langford_pairings, langford_pairings_naive
from algokit.matrix import Matrix, cache_oblivious_transpose
from algokit.merge_sort import SortOptions, merge_sort
from algokit.nqueens import count_n_queens
from algokit.words import word_rectangles

WORDS_HEIGHT = 5
WORDS_WIDTH = 6
REPORT_EVERY = 100


class _InputError(Exception):
    """Input could not be understood."""


def _read_int(stream: TextIO) -> int:
    tokens = stream.read().split()
    if not tokens:
        raise _InputError("expected an integer on standard input")
    try:
        return int(tokens[0])
    except ValueError:
        raise _InputError(f"expected an integer, got {tokens[0]!r}") from None


def _run_langford(args: argparse.Namespace) -> int:
    n = _read_int(sys.stdin)
    solver = langford_pairings_naive if args.use_naive_solver else langford_pairings
    count = sum(1 for _ in solver(n))
    print(count)
    return 0


def _run_nqueens(args: argparse.Namespace) -> int:
    n = _read_int(sys.stdin)
    print(count_n_queens(n))
    return 0


def _is_word(word: str) -> bool:
    return word.isascii() and word.isalpha()


def _run_words(args: argparse.Namespace) -> int:
    column_words: list[str] = []
    row_words: list[str] = []
    for word in sys.stdin.read().split():
        word = word.lower()
        if not _is_word(word):
            continue
        if len(word) == WORDS_HEIGHT:
            column_words.append(word)
        if len(word) == WORDS_WIDTH:
            row_words.append(word)

    total = 0
    for columns in word_rectangles(column_words, row_words, WORDS_HEIGHT, WORDS_WIDTH):
        total += 1
        if total % REPORT_EVERY != 0:
            continue
        print(f"Current num of solutions: {total}")
        for index in columns:
            print(column_words[index])
        print()
    print(f"Total num of solutions: {total}")
    return 0


def _run_matrix_transpose(args: argparse.Namespace) -> int:
    height, width = args.height, args.width
    if height < 0 or width < 0:
        raise _InputError("matrix dimensions must be non-negative")
    source = Matrix(height, width, list(range(height * width)))
    target = Matrix(width, height)
    cache_oblivious_transpose(source, target)

    if any(target[0, i] != i * width for i in range(target.width)) if target.height else False:
        print("Matrix transposition error", file=sys.stderr)
        return 1
    return 0


def _run_merge_sort(args: argparse.Namespace) -> int:
    if args.size < 0:
        raise _InputError("size must be non-negative")
    rng = random.Random(0)
    data = [rng.randrange(2**31) for _ in range(args.size)]
    result = merge_sort(data, SortOptions(args.cache_size, args.cache_line_size))
    if result is None:
        result = data
    if any(b < a for a, b in zip(result, result[1:])) or len(result) != args.size:
        print("Merge sort error", file=sys.stderr)
        return 1
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)

    langford = commands.add_parser(
        "langford", help="count Langford pairings of n read from standard input"
    )
    langford.add_argument(
        "--use-naive-solver",
        action="store_true",
        help="use the solver without pruning",
    )
    langford.set_defaults(run=_run_langford)

    nqueens = commands.add_parser(
        "nqueens", help="count n-queens placements for n read from standard input"
    )
    nqueens.set_defaults(run=_run_nqueens)

    words = commands.add_parser(
        "words",
        help=f"count {WORDS_HEIGHT}x{WORDS_WIDTH} word rectangles from words on standard input",
    )
    words.set_defaults(run=_run_words)

    transpose = commands.add_parser("matrix-transpose", help="transpose a matrix and check it")
    transpose.add_argument("--height", type=int, default=1 << 14)
    transpose.add_argument("--width", type=int, default=1 << 14)
    transpose.set_defaults(run=_run_matrix_transpose)

    sort = commands.add_parser("merge-sort", help="sort random numbers and check the order")
    sort.add_argument("--size", type=int, default=512 * 1000000)
    sort.add_argument("--cache-size", type=int, default=6144 * 1024)
    sort.add_argument("--cache-line-size", type=int, default=64)
    sort.set_defaults(run=_run_merge_sort)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the commands; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        return args.run(args)
    except (_InputError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())