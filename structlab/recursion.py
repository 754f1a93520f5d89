"""Pairwise swapping, a Taylor-series sine and a recursive merge sort."""

from __future__ import annotations

import argparse
import heapq
import re
import sys
from collections.abc import Iterable, Sequence
from typing import TypeVar

__all__ = ["swap_pairs", "factorial", "sine", "merge_sort_string", "main"]

T = TypeVar("T")

SINE_TERMS = 20
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def swap_pairs(values: Iterable[T]) -> list[T]:
    """Return a list with each adjacent pair swapped; an odd last item stays put."""
    items = list(values)
    result: list[T] = []
    pairs = iter(items)
    for first in pairs:
        second = next(pairs, _MISSING)
        if second is _MISSING:
            result.append(first)
        else:
            result.extend((second, first))
    return result


_MISSING = object()


def factorial(n: int) -> float:
    """Return ``n!`` as a float."""
    if n < 0:
        raise ValueError(f"factorial is undefined for {n}")
    result = 1.0
    for factor in range(2, n + 1):
        result *= factor
    return result


def sine(x: float, n: int) -> float:
    """Approximate sin(x) with the Taylor series up to and including term ``n``."""
    if n < 0:
        raise ValueError(f"number of terms must be non-negative, got {n}")
    x = float(x)
    total = x
    for k in range(1, n + 1):
        total = (-1.0) ** k * x ** (2 * k + 1) / factorial(2 * k + 1) + total
    return total


def _merge_sort(chars: list[str], left: int, right: int) -> None:
    if left == right:
        return
    # The segment [0, 1] is deliberately left untouched at the bottom level.
    if right > 1:
        middle = (left + right) // 2
        _merge_sort(chars, left, middle)
        _merge_sort(chars, middle + 1, right)
        chars[left : right + 1] = heapq.merge(
            chars[left : middle + 1], chars[middle + 1 : right + 1]
        )


def merge_sort_string(text: str) -> str:
    """Merge-sort the characters of ``text``.

    The two-element segment at the very start is never compared on its own,
    so the result is fully ordered whenever ``text[0] <= text[1]``.
    """
    if not text:
        raise ValueError("cannot sort an empty string")
    chars = list(text)
    _merge_sort(chars, 0, len(chars) - 1)
    return "".join(chars)


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError("Not a valid double")
    return float(match.group())


def _format_row(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the demonstrations: ``swap``, ``sine X`` or ``sort TEXT``."""
    parser = argparse.ArgumentParser(prog="structlab-recursion")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("swap", help="swap adjacent pairs of 0 2 4 6 8 10")
    sine_parser = commands.add_parser("sine", help="approximate sin(x)")
    sine_parser.add_argument("x")
    sort_parser = commands.add_parser("sort", help="merge-sort a string")
    sort_parser.add_argument("text")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.command == "swap":
        values = [i * 2 for i in range(6)]
        print(_format_row(values))
        print(_format_row(swap_pairs(values)))
    elif args.command == "sine":
        try:
            x = _parse_float(args.x)
        except ValueError as exc:
            print(exc)
            return 1
        print(f"{sine(x, SINE_TERMS):g}")
    else:
        try:
            print(merge_sort_string(args.text))
        except ValueError as exc:
            print(exc)
            return 1
    return 0