"""
heap.py — Heap Sort (stepwise sift-down)
=========================================
Phase 0 builds a max-heap bottom-up, phase 1 repeatedly swaps the root
to the end of the heap and restores the heap.

A pending sift-down is a single (node, heap_size) frame on `cur.stack`.
One step processes one level of it: compare the node with its children,
swap with the larger child if needed and push the child's frame.  When
no sift is pending the step advances the outer loop instead.

Cursor roles:
    phase : 0 build, 1 extract
    i     : build cursor (counts down from n/2), then heap end
    stack : the pending sift frame, if any
"""

from typing import List

from sorters.tracked import SortArray, StepCursor


PSEUDOCODE: List[str] = [
    "def HEAP(a):",                                  # 0
    "    for i in n/2-1 .. 0:",                      # 1
    "        sift_down(a, i, n)",                    # 2
    "    for end in n-1 .. 1:",                      # 3
    "        swap(a[0], a[end])",                    # 4
    "        sift_down(a, 0, end)",                  # 5
]

BUILD   = 0
EXTRACT = 1


def init_heap(arr: SortArray, cur: StepCursor) -> None:
    cur.phase = BUILD
    cur.i = len(arr) // 2


def step_heap(arr: SortArray, cur: StepCursor, rng) -> bool:
    if cur.stack:
        _sift_level(arr, cur)
        return False

    if cur.phase == BUILD:
        if cur.i > 0:
            cur.i -= 1
            cur.stack.append((cur.i, len(arr)))
            return False
        cur.phase = EXTRACT
        cur.i = len(arr) - 1

    if cur.i > 0:
        arr.swap(0, cur.i)
        cur.stack.append((0, cur.i))
        cur.i -= 1
        return False
    return True


def _sift_level(arr: SortArray, cur: StepCursor) -> None:
    node, size = cur.stack.pop()
    largest = node
    for child in (2 * node + 1, 2 * node + 2):
        if child < size and arr.out_of_order(child, largest):
            largest = child
    if largest != node:
        arr.swap(node, largest)
        cur.stack.append((largest, size))
