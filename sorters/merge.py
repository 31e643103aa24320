"""
merge.py — Merge Sort (bottom-up, stepwise)
============================================
Runs of width 1, 2, 4, … are merged pairwise.  The merges of one width
are queued on `cur.stack` as (low, high) ranges; the range on top of the
stack is the one being merged.

A step does exactly one of:
  1. schedule   – stack empty: queue every merge for the current width
                  (or finish when width >= n)
  2. copy       – move one element of the top range's left run into
                  `cur.buffer`
  3. merge      – write one output element into a[i]

Cursor roles:
    pivot  : run width
    phase  : IDLE between merges, COPYING while filling the buffer,
             MERGING while writing the top range
    i      : next read position (COPYING) or write position (MERGING)
    j      : head of the left run inside `buffer`
    k      : head of the right run inside the array

The right run is read in place: the write position never overtakes `k`.
Once the buffer is drained the rest of the right run is already where
it belongs, so the range is popped.
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def MERGE(a):",                                     # 0
    "    width ← 1",                                     # 1
    "    while width < n:",                              # 2
    "        for lo in 0, 2·width, 4·width, …:",         # 3
    "            left ← copy(a[lo : lo+width])",         # 4
    "            merge left with a[lo+width : hi] into a[lo : hi]",  # 5
    "        width ← 2·width",                           # 6
]

IDLE    = 0
COPYING = 1
MERGING = 2


def init_merge(arr: SortArray, cur: StepCursor) -> None:
    cur.pivot = 1
    cur.phase = IDLE


def step_merge(arr: SortArray, cur: StepCursor, rng) -> bool:
    n = len(arr)
    width = cur.pivot

    if not cur.stack:
        if width >= n:
            return True
        _schedule(cur, n, width)
        return False

    low, high = cur.stack[-1]
    mid = low + width

    if cur.phase == IDLE:
        cur.buffer.clear()
        cur.i = low
        cur.phase = COPYING

    if cur.phase == COPYING:
        cur.buffer.append(arr.read(cur.i))
        cur.i += 1
        if cur.i >= mid:
            cur.i = low
            cur.j = 0
            cur.k = mid
            cur.phase = MERGING
        return False

    take_left = True
    if cur.k <= high:
        right = arr.read(cur.k)
        arr.compared()
        take_left = cur.buffer[cur.j] <= right
    if take_left:
        arr.write(cur.i, cur.buffer[cur.j])
        cur.j += 1
    else:
        arr.write(cur.i, right)
        cur.k += 1
    cur.i += 1

    if cur.j >= len(cur.buffer):
        cur.stack.pop()
        cur.buffer.clear()
        cur.phase = IDLE
        cur.i = cur.j = cur.k = 0
        if not cur.stack:
            cur.pivot = width * 2
            return cur.pivot >= n
    return False


def _schedule(cur: StepCursor, n: int, width: int) -> None:
    # pushed in reverse so the leftmost merge is on top
    for low in reversed(range(0, n - width, 2 * width)):
        cur.stack.append((low, min(low + 2 * width, n) - 1))
