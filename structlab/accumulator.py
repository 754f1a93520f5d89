"""Accumulate typed command-line values by addition or concatenation."""

from __future__ import annotations

import math
import re
import struct
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional

__all__ = ["Accumulator", "accumulate", "main"]

KINDS = ("int", "float", "double", "std::string")
INT_MIN, INT_MAX = -(2**31), 2**31 - 1

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _to_single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Accumulator:
    """Holds one element that values are added or concatenated onto."""

    def __init__(
        self, element: Any = 0, *, coerce: Optional[Callable[[Any], Any]] = None
    ) -> None:
        self._coerce = coerce
        self.element = coerce(element) if coerce else element

    def add(self, value: Any) -> None:
        """Add ``value`` to the element."""
        result = self.element + value
        self.element = self._coerce(result) if self._coerce else result

    def concatenate(self, value: Any) -> None:
        """Append ``value`` to the element."""
        self.add(value)

    def __str__(self) -> str:
        if isinstance(self.element, float):
            return f"{self.element:g}"
        return str(self.element)

    def __repr__(self) -> str:
        return f"Accumulator({self.element!r})"


def _parse(kind: str, text: str) -> Any:
    invalid = ValueError(f"{text} is not a valid type value")
    if kind == "std::string":
        words = text.split()
        if not words:
            raise invalid
        return words[0]
    if kind == "int":
        match = _INT_PREFIX.match(text)
        if match is None:
            raise invalid
        value = int(match.group())
        if not INT_MIN <= value <= INT_MAX:
            raise invalid
        return value
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise invalid
    number = float(match.group())
    if math.isinf(number):
        raise invalid
    if kind == "float":
        try:
            number = _to_single(number)
        except OverflowError:
            raise invalid from None
    return number


def accumulate(kind: str, values: Iterable[str]) -> Accumulator:
    """Parse each word as ``kind`` and fold it into a fresh accumulator."""
    if kind not in KINDS:
        raise ValueError("Improper type definition")
    if kind == "std::string":
        acc = Accumulator("")
    elif kind == "int":
        acc = Accumulator(0)
    elif kind == "float":
        acc = Accumulator(0.0, coerce=_to_single)
    else:
        acc = Accumulator(0.0)
    for text in values:
        value = _parse(kind, text)
        if kind == "std::string":
            acc.concatenate(value)
        else:
            acc.add(value)
    return acc


def main(argv: Sequence[str] | None = None) -> int:
    """Print the total of ``kind value...`` given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Need 3 or more inputs")
        return 1
    try:
        acc = accumulate(args[0], args[1:])
    except ValueError as exc:
        print(exc)
        return 1
    print(acc)
    return 0