"""
shell.py — Shell Sort
======================
Gapped insertion sort with the gap halving from n/2 down to 1.

One step = one compare of a[j-gap] and a[j] (and a swap if out of order).
A single compare-exchange sweep per gap is not enough to sort, so the
inner cursor walks an element back by `gap` until it is in place, just
like insertion sort does with gap 1.

Cursor roles:
    pivot : current gap; 0 means done
    i     : outer position, from gap to n-1
    j     : current position of the element being inserted
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def SHELL(a):",                                 # 0
    "    gap ← n / 2",                               # 1
    "    while gap > 0:",                            # 2
    "        for i in gap .. n-1:",                  # 3
    "            j ← i",                             # 4
    "            while j >= gap and a[j-gap] > a[j]:",  # 5
    "                swap(a[j-gap], a[j])",          # 6
    "                j ← j - gap",                   # 7
    "        gap ← gap / 2",                         # 8
]


def init_shell(arr: SortArray, cur: StepCursor) -> None:
    cur.pivot = len(arr) // 2
    cur.i = cur.pivot
    cur.j = cur.pivot


def step_shell(arr: SortArray, cur: StepCursor, rng) -> bool:
    gap = cur.pivot
    if gap == 0:
        return True

    if arr.out_of_order(cur.j - gap, cur.j):
        arr.swap(cur.j - gap, cur.j)
        cur.j -= gap
        if cur.j < gap:
            _next_outer(cur)
    else:
        _next_outer(cur)

    if cur.i >= len(arr):
        cur.pivot = gap // 2
        cur.i = cur.pivot
        cur.j = cur.pivot
    return cur.pivot == 0


def _next_outer(cur: StepCursor) -> None:
    cur.i += 1
    cur.j = cur.i
