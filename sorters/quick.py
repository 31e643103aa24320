"""
quick.py — Quick Sort (explicit stack)
=======================================
The recursion tree lives in `cur.stack` as (low, high) ranges, so the
sort can stop between any two partitions.

One step = pop one range and run a full Lomuto partition around
`a[high]`.  A partition is not split across steps: it would need its own
resumable state and the work is already bounded by the range size.

Cursor roles:
    stack : pending (low, high) ranges, all non-degenerate
    pivot : final index of the last pivot placed

The larger sub-range is pushed first, so the smaller one is handled
first and the stack never grows past log2(N) + 1 frames.  The step that
leaves the stack empty is the completing step.
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def QUICK(a):",                             # 0
    "    stack ← [(0, n-1)]",                    # 1
    "    while stack is not empty:",             # 2
    "        (lo, hi) ← stack.pop()",            # 3
    "        p ← partition(a, lo, hi)",          # 4
    "        push larger of (lo, p-1), (p+1, hi)",  # 5
    "        push smaller of the two",           # 6
]


def init_quick(arr: SortArray, cur: StepCursor) -> None:
    if len(arr) > 1:
        cur.stack.append((0, len(arr) - 1))


def step_quick(arr: SortArray, cur: StepCursor, rng) -> bool:
    if not cur.stack:
        return True

    low, high = cur.stack.pop()
    if low < high:
        p = _partition(arr, low, high)
        cur.pivot = p

        ranges = []
        if p > low + 1:
            ranges.append((low, p - 1))
        if p + 1 < high:
            ranges.append((p + 1, high))
        # larger first, so the smaller range is popped next
        ranges.sort(key=lambda r: r[1] - r[0], reverse=True)
        cur.stack.extend(ranges)

    return not cur.stack


def _partition(arr: SortArray, low: int, high: int) -> int:
    pivot = arr.read(high)
    store = low
    for j in range(low, high):
        value = arr.read(j)
        arr.compared()
        if value <= pivot:
            arr.swap(store, j)
            store += 1
    arr.swap(store, high)
    return store
