"""Time a sorted dynamic array against a sorted linked list."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from structlab.dynarray import SortedDynArr
from structlab.sllist import SortedSLL

__all__ = ["Timing", "time_sorted_structures", "run_experiment", "main"]

DEFAULT_RUNS = 100


@dataclass(frozen=True)
class Timing:
    """Seconds spent filling and emptying each structure."""

    dynarr_seconds: float
    sllist_seconds: float

    @property
    def ratio(self) -> float:
        """Linked-list time divided by dynamic-array time (inf if the latter is 0)."""
        if self.dynarr_seconds == 0:
            return math.inf
        return self.sllist_seconds / self.dynarr_seconds


def time_sorted_structures(length: int, rng: Optional[random.Random] = None) -> Timing:
    """Insert ``length`` random values in ``[0, length)`` into both structures, then empty them.

    The array is emptied by erasing random positions, the list by deleting
    each inserted value in insertion order.
    """
    if length < 1:
        raise ValueError(f"length must be at least 1, got {length}")
    rng = rng if rng is not None else random.Random()
    values = [rng.randrange(length) for _ in range(length)]
    array: SortedDynArr[int] = SortedDynArr()
    linked: SortedSLL[int] = SortedSLL()

    start = time.perf_counter()
    for value in values:
        array.insert(value)
    dynarr_seconds = time.perf_counter() - start

    start = time.perf_counter()
    for value in values:
        linked.insert(value)
    sllist_seconds = time.perf_counter() - start

    start = time.perf_counter()
    while len(array):
        array.erase(rng.randrange(len(array)))
    dynarr_seconds += time.perf_counter() - start

    start = time.perf_counter()
    for value in values:
        linked.delete(value)
    sllist_seconds += time.perf_counter() - start

    return Timing(dynarr_seconds, sllist_seconds)


def run_experiment(
    length: int, runs: int = DEFAULT_RUNS, rng: Optional[random.Random] = None
) -> Timing:
    """Average :func:`time_sorted_structures` over ``runs`` runs."""
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")
    rng = rng if rng is not None else random.Random()
    timings = [time_sorted_structures(length, rng) for _ in range(runs)]
    return Timing(
        sum(t.dynarr_seconds for t in timings) / runs,
        sum(t.sllist_seconds for t in timings) / runs,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``length,array,list,ratio`` average timings as one CSV line."""
    parser = argparse.ArgumentParser(prog="structlab-benchmark")
    parser.add_argument("length", type=int)
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    try:
        timing = run_experiment(args.length, args.runs, random.Random(args.seed))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(
        f"{args.length},{timing.dynarr_seconds:g},"
        f"{timing.sllist_seconds:g},{timing.ratio:g}"
    )
    return 0