"""
radix.py — LSD Radix Sort (stepwise)
=====================================
Byte values are sorted by two 4-bit digits, least significant first.
Each pass distributes into 16 buckets, then collects them back in order.
Both halves move one element per step.

Cursor roles:
    pivot   : bit shift of the current digit (0, then 4)
    phase   : 0 distribute, 1 collect
    i       : read position (distribute) / write position (collect)
    j, k    : bucket index and index inside that bucket (collect)
    buckets : the 16 digit buckets
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def RADIX(a):",                                     # 0
    "    for shift in 0, 4:",                            # 1
    "        buckets ← 16 empty lists",                  # 2
    "        for x in a:",                               # 3
    "            buckets[(x >> shift) & 15].append(x)",  # 4
    "        a ← concat(buckets)",                       # 5
]

DIGIT_BITS = 4
BASE       = 1 << DIGIT_BITS
VALUE_BITS = 8

DISTRIBUTE = 0
COLLECT    = 1


def init_radix(arr: SortArray, cur: StepCursor) -> None:
    cur.pivot = 0
    cur.phase = DISTRIBUTE
    cur.buckets[:] = [[] for _ in range(BASE)]


def step_radix(arr: SortArray, cur: StepCursor, rng) -> bool:
    if cur.pivot >= VALUE_BITS:
        return True

    if cur.phase == DISTRIBUTE:
        value = arr.read(cur.i)
        cur.buckets[(value >> cur.pivot) & (BASE - 1)].append(value)
        cur.i += 1
        if cur.i >= len(arr):
            cur.phase = COLLECT
            cur.i = 0
            cur.j = 0
            cur.k = 0
            _skip_empty(cur)
        return False

    arr.write(cur.i, cur.buckets[cur.j][cur.k])
    cur.i += 1
    cur.k += 1
    _skip_empty(cur)

    if cur.i >= len(arr):
        cur.pivot += DIGIT_BITS
        cur.phase = DISTRIBUTE
        cur.i = cur.j = cur.k = 0
        for bucket in cur.buckets:
            bucket.clear()
    return cur.pivot >= VALUE_BITS


def _skip_empty(cur: StepCursor) -> None:
    while cur.j < BASE and cur.k >= len(cur.buckets[cur.j]):
        cur.j += 1
        cur.k = 0
