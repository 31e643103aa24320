"""
bubble.py — Bubble Sort
========================
One step = one adjacent compare (and swap if needed).

Cursor roles:
    i : left index of the pair being compared
    j : swaps made so far in the current pass

When `i` reaches the last pair the pass ends.  A pass with zero swaps
means the array is sorted (early exit); otherwise the next pass starts
from the front.
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def BUBBLE(a):",                            # 0
    "    repeat:",                               # 1
    "        swaps ← 0",                         # 2
    "        for i in 0 .. n-2:",                # 3
    "            if a[i] > a[i+1]:",             # 4
    "                swap(a[i], a[i+1])",        # 5
    "                swaps ← swaps + 1",         # 6
    "    until swaps == 0",                      # 7
]


def init_bubble(arr: SortArray, cur: StepCursor) -> None:
    cur.i = 0
    cur.j = 0


def step_bubble(arr: SortArray, cur: StepCursor, rng) -> bool:
    if arr.out_of_order(cur.i, cur.i + 1):
        arr.swap(cur.i, cur.i + 1)
        cur.j += 1
    cur.i += 1

    if cur.i >= len(arr) - 1:
        if cur.j == 0:
            return True
        cur.i = 0
        cur.j = 0
    return False
