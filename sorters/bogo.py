"""
bogo.py — Bogo Sort
====================
One step = one full ascending check; if the check fails, one full
shuffle.  There is no finer grain worth suspending at, so a Bogo step
costs O(N) by construction.
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def BOGO(a):",                          # 0
    "    while not sorted(a):",              # 1
    "        shuffle(a)",                    # 2
]


def init_bogo(arr: SortArray, cur: StepCursor) -> None:
    pass


def step_bogo(arr: SortArray, cur: StepCursor, rng) -> bool:
    for n in range(1, len(arr)):
        if arr.out_of_order(n - 1, n):
            arr.shuffle(rng)
            return False
    return True
