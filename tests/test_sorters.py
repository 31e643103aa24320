"""Step rules: every algorithm sorts, under any interruption pattern."""

import math
import random
from collections import Counter

import pytest

from sorters import (
    AlgorithmKind, REGISTRY, SortArray, Metrics, StepCursor, check_registry,
    get_sorter, list_sorters, sorter_for_name,
)
from engine import StepEngine, ExecutionState


NON_BOGO = [k for k in AlgorithmKind if k is not AlgorithmKind.BOGO]


def _permutation(size, seed):
    values = [k % 256 for k in range(1, size + 1)]
    random.Random(seed).shuffle(values)
    return values


FIXED_INPUTS = {
    "reversed":   list(range(40, 0, -1)),
    "sorted":     list(range(1, 41)),
    "duplicates": [3, 3, 1, 2, 2, 0, 255, 0, 3, 1],
    "all_equal":  [7] * 12,
    "pair":       [2, 1],
    "random_60":  _permutation(60, 1),
    "wrapping":   _permutation(300, 2),    # 1..300 mod 256, repeats 0..44
}


class TestRegistry:

    def test_registry_covers_every_kind(self):
        assert set(REGISTRY) == set(AlgorithmKind)
        assert [info.kind for info in list_sorters()] == list(AlgorithmKind)

    def test_incomplete_registry_is_rejected(self):
        check_registry(REGISTRY)
        partial = {k: v for k, v in REGISTRY.items() if k is not AlgorithmKind.SHELL}
        with pytest.raises(RuntimeError, match="shell"):
            check_registry(partial)

    def test_labels(self):
        assert AlgorithmKind.QUICK.label == "Quick Sort"
        assert AlgorithmKind.COCKTAIL.label == "Cocktail Sort"
        assert get_sorter(AlgorithmKind.BOGO).label == "Bogo Sort"

    def test_lookup_by_name(self):
        assert sorter_for_name("quick").kind is AlgorithmKind.QUICK
        assert sorter_for_name("Heap Sort").kind is AlgorithmKind.HEAP
        assert sorter_for_name(" RADIX ").kind is AlgorithmKind.RADIX
        assert sorter_for_name("stooge") is None

    def test_get_sorter_rejects_strings(self):
        with pytest.raises(TypeError):
            get_sorter("quick")

    def test_every_card_has_pseudocode(self):
        for info in list_sorters():
            assert info.pseudocode
            assert info.complexity_time


class TestSortArray:

    def test_counting(self):
        m = Metrics()
        arr = SortArray([3, 1, 2], m)
        assert arr.read(0) == 3
        arr.write(1, 5)
        arr.swap(0, 2)
        assert arr.values == [2, 5, 3]
        assert m.accesses == 4
        assert m.comparisons == 0

        assert arr.out_of_order(1, 2) is True
        assert m.comparisons == 1
        assert m.accesses == 6

    def test_cyclic_values_wrap_into_a_byte(self):
        arr = SortArray.cyclic(300, Metrics())
        assert len(arr) == 300
        assert arr.values[0] == 1
        assert arr.values[254] == 255
        assert arr.values[255] == 0
        assert arr.values[-1] == 300 % 256

    def test_rejects_non_byte_values(self):
        with pytest.raises(ValueError):
            SortArray([1, 256], Metrics())
        with pytest.raises(ValueError):
            SortArray([-1], Metrics())
        with pytest.raises(ValueError):
            SortArray.cyclic(-3, Metrics())

    def test_sorted_fraction(self):
        assert SortArray([1, 2, 3, 4, 5], Metrics()).sorted_fraction() == 1.0
        assert SortArray([5, 4, 3, 2, 1], Metrics()).sorted_fraction() == 0.0
        assert SortArray([1, 3, 2], Metrics()).sorted_fraction() == 0.5
        assert SortArray([9], Metrics()).sorted_fraction() == 1.0

    def test_cursor_reset(self):
        cur = StepCursor(i=3, j=4, k=5, pivot=6, phase=1, stack=[(0, 1)], buffer=[1], buckets=[[1]])
        cur.reset()
        assert cur == StepCursor()


class TestSortCorrectness:

    @pytest.mark.parametrize("kind", NON_BOGO, ids=lambda k: k.value)
    @pytest.mark.parametrize("name", sorted(FIXED_INPUTS))
    def test_fixed_inputs(self, kind, name):
        values = FIXED_INPUTS[name]
        engine = StepEngine(kind, values=values, rng=random.Random(0))

        assert engine.run_to_completion(max_steps=500_000)
        assert engine.values == sorted(values)
        assert Counter(engine.values) == Counter(values)

    @pytest.mark.parametrize("kind", NON_BOGO, ids=lambda k: k.value)
    @pytest.mark.parametrize("seed", [3, 17, 99])
    def test_default_shuffled_array(self, kind, seed):
        engine = StepEngine(kind, rng=random.Random(seed))
        start = engine.values
        assert len(start) == 200

        assert engine.run_to_completion(max_steps=500_000)
        assert engine.values == sorted(start)

    @pytest.mark.parametrize("kind", list(AlgorithmKind), ids=lambda k: k.value)
    @pytest.mark.parametrize("values", [[], [42]])
    def test_short_arrays_complete_on_first_step(self, kind, values):
        engine = StepEngine(kind, values=values)
        engine.step()
        assert engine.state == ExecutionState.COMPLETED
        assert engine.values == values

    def test_bogo_small_array(self):
        values = [3, 1, 2, 5, 4]
        engine = StepEngine(AlgorithmKind.BOGO, values=values, rng=random.Random(7))
        assert engine.run_to_completion(max_steps=100_000)
        assert engine.values == [1, 2, 3, 4, 5]


class TestBoundedSteps:
    """Index-stepping algorithms make at most one comparison per step."""

    @pytest.mark.parametrize(
        "kind, limit",
        [
            (AlgorithmKind.BUBBLE, 1),
            (AlgorithmKind.INSERTION, 1),
            (AlgorithmKind.SELECTION, 1),
            (AlgorithmKind.SHELL, 1),
            (AlgorithmKind.COCKTAIL, 1),
            (AlgorithmKind.MERGE, 1),
            (AlgorithmKind.HEAP, 2),
            (AlgorithmKind.RADIX, 0),
        ],
        ids=lambda v: getattr(v, "value", str(v)),
    )
    def test_comparisons_per_step(self, kind, limit):
        engine = StepEngine(kind, size=64, rng=random.Random(5))
        while engine.state == ExecutionState.RUNNING:
            before = engine.metrics.comparisons
            engine.step()
            assert engine.metrics.comparisons - before <= limit

    def test_radix_moves_one_element_per_step(self):
        engine = StepEngine(AlgorithmKind.RADIX, size=64, rng=random.Random(5))
        while engine.state == ExecutionState.RUNNING:
            before = engine.metrics.accesses
            engine.step()
            assert engine.metrics.accesses - before <= 1

    def test_merge_touches_at_most_two_cells_per_step(self):
        engine = StepEngine(AlgorithmKind.MERGE, size=64, rng=random.Random(5))
        while engine.state == ExecutionState.RUNNING:
            before = engine.metrics.accesses
            engine.step()
            # copy: one read; merge: one read of the right run plus one write
            assert engine.metrics.accesses - before <= 2

    def test_quick_partition_bounded_by_range(self):
        engine = StepEngine(AlgorithmKind.QUICK, size=64, rng=random.Random(5))
        while engine.state == ExecutionState.RUNNING:
            stack = list(engine.cursor.stack)
            low, high = stack[-1]
            before = engine.metrics.comparisons
            engine.step()
            assert engine.metrics.comparisons - before == high - low


class TestQuickStack:

    @pytest.mark.parametrize("seed", range(5))
    def test_depth_and_emptiness(self, seed):
        n = 200
        engine = StepEngine(AlgorithmKind.QUICK, size=n, rng=random.Random(seed))
        bound = math.log2(n) + 2
        assert engine.cursor.stack == [(0, n - 1)]

        while engine.state == ExecutionState.RUNNING:
            engine.step()
            depth = len(engine.cursor.stack)
            assert depth <= bound
            assert (depth == 0) == (engine.state == ExecutionState.COMPLETED)

    def test_sorted_input_still_shallow(self):
        n = 128
        engine = StepEngine(AlgorithmKind.QUICK, values=list(range(n)))
        while engine.state == ExecutionState.RUNNING:
            engine.step()
            assert len(engine.cursor.stack) <= 1
        assert engine.values == list(range(n))


class TestCursorRules:

    def test_insertion_starts_at_one(self):
        engine = StepEngine(AlgorithmKind.INSERTION, values=[2, 1, 3])
        assert engine.cursor.i == 1
        engine.step()                     # swap 2,1 and reach the front
        assert engine.values == [1, 2, 3]
        assert engine.cursor.i == 2
        assert engine.cursor.j == 0

    def test_shell_gap_halves(self):
        engine = StepEngine(AlgorithmKind.SHELL, size=16, rng=random.Random(1))
        gaps = [engine.cursor.pivot]
        while engine.state == ExecutionState.RUNNING:
            engine.step()
            if engine.cursor.pivot != gaps[-1]:
                gaps.append(engine.cursor.pivot)
        assert gaps == [8, 4, 2, 1, 0]

    def test_selection_places_minimum_after_one_scan(self):
        engine = StepEngine(AlgorithmKind.SELECTION, values=[4, 3, 1, 2])
        for _ in range(3):
            engine.step()
        assert engine.values[0] == 1
        assert engine.cursor.i == 1

    def test_cocktail_boundaries_meet(self):
        engine = StepEngine(AlgorithmKind.COCKTAIL, values=[3, 2, 1])
        engine.run_to_completion()
        assert engine.cursor.j >= engine.cursor.pivot
        assert engine.values == [1, 2, 3]

    def test_merge_width_doubles(self):
        engine = StepEngine(AlgorithmKind.MERGE, size=16, rng=random.Random(2))
        widths = [engine.cursor.pivot]
        while engine.state == ExecutionState.RUNNING:
            engine.step()
            if engine.cursor.pivot != widths[-1]:
                widths.append(engine.cursor.pivot)
        assert widths == [1, 2, 4, 8, 16]

    def test_radix_uses_no_comparisons(self):
        engine = StepEngine(AlgorithmKind.RADIX, size=50, rng=random.Random(3))
        engine.run_to_completion()
        assert engine.metrics.comparisons == 0
        # two passes, each reads n and writes n
        assert engine.metrics.accesses == 4 * 50


class TestIndexBounds:
    """No rule ever touches an index outside the array or walks a cursor below zero."""

    @pytest.fixture
    def checked_array(self, monkeypatch):
        read, write, swap = SortArray.read, SortArray.write, SortArray.swap

        def in_range(arr, *indices):
            for idx in indices:
                assert 0 <= idx < len(arr.values), f"index {idx} outside [0, {len(arr.values)})"

        def checked_read(self, idx):
            in_range(self, idx)
            return read(self, idx)

        def checked_write(self, idx, value):
            in_range(self, idx)
            write(self, idx, value)

        def checked_swap(self, a, b):
            in_range(self, a, b)
            swap(self, a, b)

        monkeypatch.setattr(SortArray, "read", checked_read)
        monkeypatch.setattr(SortArray, "write", checked_write)
        monkeypatch.setattr(SortArray, "swap", checked_swap)

    @staticmethod
    def _assert_cursor_in_bounds(engine):
        n = engine.length
        cur = engine.cursor
        if n < 2:
            return
        assert 0 <= cur.i <= n
        # radix keeps a bucket index in j
        j_limit = 16 if engine.kind is AlgorithmKind.RADIX else n
        assert 0 <= cur.j <= j_limit
        assert cur.pivot >= 0

    @pytest.mark.parametrize("kind", NON_BOGO, ids=lambda k: k.value)
    def test_indices_stay_in_range(self, checked_array, kind):
        for size in range(70):
            for seed in range(3):
                engine = StepEngine(kind, size=size, rng=random.Random(seed))
                for _ in range(2):
                    while engine.state != ExecutionState.COMPLETED:
                        engine.step()
                        self._assert_cursor_in_bounds(engine)
                    assert engine.values == sorted(engine.values)
                    engine.restart()

    def test_insertion_never_walks_past_front(self, checked_array):
        engine = StepEngine(AlgorithmKind.INSERTION, values=list(range(30, 0, -1)))
        while engine.state == ExecutionState.RUNNING:
            engine.step()
            assert engine.cursor.j >= 0
        assert engine.values == list(range(1, 31))
