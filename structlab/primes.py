"""Primality test and next-prime search used to size hash tables."""

from __future__ import annotations

import itertools
import math

__all__ = ["is_prime", "next_prime"]


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division over odd divisors."""
    _check_non_negative(n)
    if n in (2, 3):
        return True
    if n == 1 or n % 2 == 0:
        return False
    return all(n % divisor for divisor in range(3, math.isqrt(n) + 1, 2))


def next_prime(n: int) -> int:
    """Return the first prime reached by stepping odd numbers upwards from ``n``.

    An even ``n`` is first bumped to the next odd number, so the result is
    always odd (``next_prime(2)`` is 3).
    """
    _check_non_negative(n)
    if n % 2 == 0:
        n += 1
    return next(candidate for candidate in itertools.count(n, 2) if is_prime(candidate))