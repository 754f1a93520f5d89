"""Read a square matrix from command-line words and compute its determinant."""

from __future__ import annotations

import itertools
import math
import re
import struct
import sys
from collections.abc import Sequence
from typing import Union

__all__ = [
    "MatrixInputError",
    "check_inputs",
    "parse_matrix",
    "cofactor",
    "determinant",
    "format_matrix",
    "main",
]

Number = Union[int, float]
Matrix = list[list[Number]]

KINDS = ("int", "float", "double")
START_VALUES = 2  # the type name and the size come before the entries
INT_MIN, INT_MAX = -(2**31), 2**31 - 1

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_SIZE_PREFIX = re.compile(r"\s*\+?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class MatrixInputError(ValueError):
    """Raised when the words describing a matrix are malformed."""


def check_inputs(argv: Sequence[str]) -> int:
    """Validate ``[kind, n, v1, ..., vn*n]`` and return the matrix size ``n``."""
    args = list(argv)
    if len(args) < START_VALUES:
        raise MatrixInputError("Need 3 or more inputs")
    if args[0] not in KINDS:
        raise MatrixInputError("Improper type definition")
    match = _SIZE_PREFIX.match(args[1])
    if match is None:
        raise MatrixInputError(f"{args[1]} is not a valid matrix size")
    size = int(match.group())
    if len(args) != size * size + START_VALUES:
        raise MatrixInputError("The matrix requires n*n inputs.")
    return size


def _parse_value(kind: str, text: str) -> Number:
    invalid = MatrixInputError(f"{text} is not valid")
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
            number = struct.unpack("f", struct.pack("f", number))[0]
        except OverflowError:
            raise invalid from None
    return number


def parse_matrix(kind: str, n: int, values: Sequence[str]) -> Matrix:
    """Convert ``n*n`` words, row by row, into an ``n``-by-``n`` matrix of ``kind``."""
    if kind not in KINDS:
        raise MatrixInputError("Improper type definition")
    if n < 0 or len(values) != n * n:
        raise MatrixInputError("The matrix requires n*n inputs.")
    numbers = iter([_parse_value(kind, text) for text in values])
    return [list(itertools.islice(numbers, n)) for _ in range(n)]


def cofactor(matrix: Sequence[Sequence[Number]], p: int, q: int) -> Matrix:
    """Return ``matrix`` with row ``p`` and column ``q`` removed."""
    return [
        [value for col, value in enumerate(row) if col != q]
        for r, row in enumerate(matrix)
        if r != p
    ]


def _check_square(matrix: Sequence[Sequence[Number]]) -> None:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")


def determinant(matrix: Sequence[Sequence[Number]]) -> Number:
    """Return the determinant by cofactor expansion along the first row.

    An empty matrix gives 0.
    """
    _check_square(matrix)
    if not matrix:
        return 0
    if len(matrix) == 1:
        return matrix[0][0]
    total: Number = 0
    for col, value in enumerate(matrix[0]):
        sign = -1 if col % 2 else 1
        total += sign * value * determinant(cofactor(matrix, 0, col))
    return total


def _format_number(value: Number) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def format_matrix(matrix: Sequence[Sequence[Number]]) -> str:
    """Render each row as its values followed by a space, one row per line."""
    return "\n".join(
        "".join(f"{_format_number(value)} " for value in row) for row in matrix
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print a matrix given as ``kind n values...`` and its determinant."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        size = check_inputs(args)
        print(f"Matrix is {size}x{size}")
        matrix = parse_matrix(args[0], size, args[START_VALUES:])
    except MatrixInputError as exc:
        print(exc)
        return 1
    print("Initial Matrix:")
    if matrix:
        print(format_matrix(matrix))
    print(f"The Determinant is: {_format_number(determinant(matrix))}")
    return 0