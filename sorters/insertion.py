"""
insertion.py — Insertion Sort
==============================
One step = one compare of a[j-1] and a[j] (and a swap if out of order).

Cursor roles:
    i : index of the element being inserted (starts at 1)
    j : its current position; 0 means "begin the next outer pass"
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def INSERTION(a):",                         # 0
    "    for i in 1 .. n-1:",                    # 1
    "        j ← i",                             # 2
    "        while j > 0 and a[j-1] > a[j]:",    # 3
    "            swap(a[j-1], a[j])",            # 4
    "            j ← j - 1",                     # 5
]


def init_insertion(arr: SortArray, cur: StepCursor) -> None:
    cur.i = 1
    cur.j = 0


def step_insertion(arr: SortArray, cur: StepCursor, rng) -> bool:
    if cur.i >= len(arr):
        return True
    if cur.j == 0:
        cur.j = cur.i

    if arr.out_of_order(cur.j - 1, cur.j):
        arr.swap(cur.j - 1, cur.j)
        cur.j -= 1
        if cur.j == 0:
            # reached the front, element is in place
            cur.i += 1
    else:
        cur.i += 1
        cur.j = 0

    return cur.i >= len(arr)
