"""Step-counting and Fibonacci, naive and memoised, plus a counting sort."""

from __future__ import annotations

import re
from collections import Counter

__all__ = [
    "parse_steps",
    "child_steps",
    "child_steps_naive",
    "fib",
    "fib_naive",
    "counting_sort_string",
]

ASCII = 128
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_STEP_BASES = {1: 1, 2: 2, 3: 4}


def parse_steps(text: str) -> int:
    """Read a leading integer from ``text`` and require it to be at least 1."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError("Not a valid integer")
    value = int(match.group())
    if value < 1:
        raise ValueError(f"{value} must be 1 or more")
    return value


def _check_steps(n: int) -> None:
    if n < 1:
        raise ValueError(f"{n} must be 1 or more")


def child_steps(n: int) -> int:
    """Count the ways to climb ``n`` steps taking 1, 2 or 3 at a time, memoised."""
    _check_steps(n)
    memo = dict(_STEP_BASES)
    for k in range(4, n + 1):
        memo[k] = memo[k - 1] + memo[k - 2] + memo[k - 3]
    return memo[n]


def child_steps_naive(n: int) -> int:
    """Count the ways to climb ``n`` steps by plain recursion."""
    _check_steps(n)
    if n in _STEP_BASES:
        return _STEP_BASES[n]
    return child_steps_naive(n - 1) + child_steps_naive(n - 2) + child_steps_naive(n - 3)


def _check_fib(n: int) -> None:
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number with fib(0) == fib(1) == 1, memoised."""
    _check_fib(n)
    memo = {0: 1, 1: 1}
    for k in range(2, n + 1):
        memo[k] = memo[k - 1] + memo[k - 2]
    return memo[n]


def fib_naive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion."""
    _check_fib(n)
    if n < 2:
        return 1
    return fib_naive(n - 1) + fib_naive(n - 2)


def counting_sort_string(text: str) -> str:
    """Sort the ASCII characters of ``text`` by counting occurrences."""
    counts = Counter(text)
    bad = [ch for ch in counts if ord(ch) >= ASCII]
    if bad:
        raise ValueError(f"non-ASCII characters cannot be sorted: {''.join(bad)!r}")
    return "".join(chr(code) * counts[chr(code)] for code in range(ASCII))