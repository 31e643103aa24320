"""
selection.py — Selection Sort
==============================
One step = one compare of a[j] against the running minimum.

Cursor roles:
    i     : first unsorted position
    j     : scan position; 0 means "begin the next scan"
    pivot : index of the smallest value seen in this scan

When the scan reaches the end, a[i] and a[pivot] are swapped (if they
differ) and the sorted prefix grows by one.
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def SELECTION(a):",                         # 0
    "    for i in 0 .. n-2:",                    # 1
    "        m ← i",                             # 2
    "        for j in i+1 .. n-1:",              # 3
    "            if a[j] < a[m]: m ← j",         # 4
    "        swap(a[i], a[m])",                  # 5
]


def init_selection(arr: SortArray, cur: StepCursor) -> None:
    cur.i = 0
    cur.j = 0
    cur.pivot = 0


def step_selection(arr: SortArray, cur: StepCursor, rng) -> bool:
    n = len(arr)
    if cur.i >= n - 1:
        return True
    if cur.j == 0:
        cur.pivot = cur.i
        cur.j = cur.i + 1

    if arr.out_of_order(cur.pivot, cur.j):
        cur.pivot = cur.j
    cur.j += 1

    if cur.j >= n:
        if cur.pivot != cur.i:
            arr.swap(cur.i, cur.pivot)
        cur.i += 1
        cur.j = 0
    return cur.i >= n - 1
