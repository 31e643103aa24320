"""
cocktail.py — Cocktail Shaker Sort
===================================
Bubble sort that alternates direction.  The forward sub-pass carries the
largest unsorted value up to `high`; the backward sub-pass carries the
smallest down to `low`.  Each finished sub-pass shrinks its boundary by
one, and the sort is done when the boundaries meet.

Cursor roles:
    i     : position of the current compare
    j     : low boundary
    pivot : high boundary
    phase : 0 forward, 1 backward
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def COCKTAIL(a):",                              # 0
    "    low ← 0; high ← n-1",                       # 1
    "    while low < high:",                         # 2
    "        for i in low .. high-1:",               # 3
    "            if a[i] > a[i+1]: swap",            # 4
    "        high ← high - 1",                       # 5
    "        for i in high .. low+1 step -1:",       # 6
    "            if a[i-1] > a[i]: swap",            # 7
    "        low ← low + 1",                         # 8
]

FORWARD  = 0
BACKWARD = 1


def init_cocktail(arr: SortArray, cur: StepCursor) -> None:
    cur.phase = FORWARD
    cur.i = 0
    cur.j = 0
    cur.pivot = max(len(arr) - 1, 0)


def step_cocktail(arr: SortArray, cur: StepCursor, rng) -> bool:
    if cur.j >= cur.pivot:
        return True

    if cur.phase == FORWARD:
        if arr.out_of_order(cur.i, cur.i + 1):
            arr.swap(cur.i, cur.i + 1)
        cur.i += 1
        if cur.i >= cur.pivot:
            cur.pivot -= 1
            cur.phase = BACKWARD
            cur.i = cur.pivot
    else:
        if arr.out_of_order(cur.i - 1, cur.i):
            arr.swap(cur.i - 1, cur.i)
        cur.i -= 1
        if cur.i <= cur.j:
            cur.j += 1
            cur.phase = FORWARD
            cur.i = cur.j

    return cur.j >= cur.pivot
