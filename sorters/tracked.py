"""
tracked.py — Instrumented Array & Cursor State
===============================================
Every step rule works on two mutable objects owned by one StepEngine:

    • SortArray  – the values being sorted, plus helpers that bump the
                   Metrics counters on every read / write / comparison
    • StepCursor – the integer scratch-pad that replaces the loop
                   variables and call stack of the textbook algorithm

Design decisions:
  - Rules never touch `SortArray.values` directly for algorithmic work;
    they go through read / write / swap / out_of_order so the counters
    stay honest.  Renderers read `values` freely (that is not an access).
  - StepCursor is a plain dataclass with one field per role.  Which role
    a field plays depends on the algorithm (see each sorter module).
  - Metrics are plain counters.  They never influence control flow.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


BYTE_MAX = 255


# ---------------------------------------------------------------------------
# Metrics — what the renderer shows next to the bars
# ---------------------------------------------------------------------------
@dataclass
class Metrics:
    steps:       int = 0
    comparisons: int = 0
    accesses:    int = 0     # reads + writes; a swap counts as two writes

    def reset(self) -> None:
        self.steps = 0
        self.comparisons = 0
        self.accesses = 0

    def copy(self) -> "Metrics":
        return Metrics(self.steps, self.comparisons, self.accesses)


# ---------------------------------------------------------------------------
# StepCursor — resumable loop state
# ---------------------------------------------------------------------------
@dataclass
class StepCursor:
    """
    Attributes:
        i, j, k : position cursors (outer / inner / third, per algorithm).
        pivot   : Quick pivot index, Shell gap, Selection running minimum,
                  Merge run width, Radix bit shift, Cocktail high bound.
        phase   : sub-phase flag (Cocktail direction, Merge open/merging,
                  Heap build/extract, Radix distribute/collect).
        stack   : pending (low, high) sub-problems.
        buffer  : scratch copy of a Merge left run.
        buckets : Radix digit buckets.
    """

    i:       int                   = 0
    j:       int                   = 0
    k:       int                   = 0
    pivot:   int                   = 0
    phase:   int                   = 0
    stack:   List[Tuple[int, int]] = field(default_factory=list)
    buffer:  List[int]             = field(default_factory=list)
    buckets: List[List[int]]       = field(default_factory=list)

    def reset(self) -> None:
        self.i = 0
        self.j = 0
        self.k = 0
        self.pivot = 0
        self.phase = 0
        self.stack.clear()
        self.buffer.clear()
        self.buckets.clear()


# ---------------------------------------------------------------------------
# SortArray
# ---------------------------------------------------------------------------
class SortArray:
    """
    Fixed-length list of byte values with access accounting.

    The length never changes after construction; restarts only permute
    the existing values.
    """

    __slots__ = ("values", "metrics")

    def __init__(self, values: List[int], metrics: Metrics):
        for v in values:
            if not isinstance(v, int) or not 0 <= v <= BYTE_MAX:
                raise ValueError(f"Array values must be ints in 0..{BYTE_MAX}, got {v!r}")
        self.values:  List[int] = list(values)
        self.metrics: Metrics   = metrics

    @classmethod
    def cyclic(cls, size: int, metrics: Metrics) -> "SortArray":
        """1..size, wrapped into a byte.  Still unshuffled."""
        if size < 0:
            raise ValueError(f"Array size must be >= 0, got {size}")
        return cls([k % (BYTE_MAX + 1) for k in range(1, size + 1)], metrics)

    def __len__(self) -> int:
        return len(self.values)

    # -- counted operations --
    def read(self, idx: int) -> int:
        self.metrics.accesses += 1
        return self.values[idx]

    def write(self, idx: int, value: int) -> None:
        self.metrics.accesses += 1
        self.values[idx] = value

    def swap(self, a: int, b: int) -> None:
        v = self.values
        v[a], v[b] = v[b], v[a]
        self.metrics.accesses += 2

    def compared(self) -> None:
        """Count one ordering test made on values already read."""
        self.metrics.comparisons += 1

    def out_of_order(self, a: int, b: int) -> bool:
        """Read both positions and test values[a] > values[b]."""
        left = self.read(a)
        right = self.read(b)
        self.compared()
        return left > right

    def shuffle(self, rng) -> None:
        rng.shuffle(self.values)
        self.metrics.accesses += 2 * len(self.values)

    # -- uncounted views (renderer side) --
    def is_sorted(self) -> bool:
        v = self.values
        return all(v[n - 1] <= v[n] for n in range(1, len(v)))

    def sorted_fraction(self) -> float:
        v = self.values
        if len(v) < 2:
            return 1.0
        in_order = sum(1 for n in range(1, len(v)) if v[n - 1] <= v[n])
        return in_order / (len(v) - 1)
