"""
sorters/__init__.py — Sorter Registry
======================================
Single source of truth for every sorting algorithm the engine can step.

    from sorters import REGISTRY, get_sorter

REGISTRY is a dict keyed by AlgorithmKind:
    {
        AlgorithmKind.QUICK: SorterInfo(kind, label, init, step, pseudocode, …),
        …
    }

Every step rule has the same shape:

    init_x(arr, cur)             – set up the cursor for a fresh run
    step_x(arr, cur, rng) -> bool – one bounded unit of work; True once sorted

The set of kinds is closed, so dispatch is a plain dict lookup and the
registry must cover every AlgorithmKind.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from sorters.kinds     import AlgorithmKind
from sorters.tracked   import SortArray, StepCursor, Metrics, BYTE_MAX
from sorters.bogo      import init_bogo,      step_bogo,      PSEUDOCODE as _bogo_pc
from sorters.bubble    import init_bubble,    step_bubble,    PSEUDOCODE as _bubble_pc
from sorters.quick     import init_quick,     step_quick,     PSEUDOCODE as _quick_pc
from sorters.merge     import init_merge,     step_merge,     PSEUDOCODE as _merge_pc
from sorters.insertion import init_insertion, step_insertion, PSEUDOCODE as _ins_pc
from sorters.selection import init_selection, step_selection, PSEUDOCODE as _sel_pc
from sorters.heap      import init_heap,      step_heap,      PSEUDOCODE as _heap_pc
from sorters.radix     import init_radix,     step_radix,     PSEUDOCODE as _radix_pc
from sorters.shell     import init_shell,     step_shell,     PSEUDOCODE as _shell_pc
from sorters.cocktail  import init_cocktail,  step_cocktail,  PSEUDOCODE as _cocktail_pc


# ---------------------------------------------------------------------------
# SorterInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SorterInfo:
    kind:             AlgorithmKind
    init:             Callable[[SortArray, StepCursor], None]
    step:             Callable[..., bool]
    pseudocode:       List[str]
    complexity_time:  str  = ""       # e.g. "O(n log n)"
    complexity_space: str  = ""
    stable:           bool = False
    description:      str  = ""       # one-liner for the UI card

    @property
    def label(self) -> str:
        return self.kind.label


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[AlgorithmKind, SorterInfo] = {

    AlgorithmKind.BOGO: SorterInfo(
        kind=AlgorithmKind.BOGO, init=init_bogo, step=step_bogo, pseudocode=_bogo_pc,
        complexity_time="O(n · n!)", complexity_space="O(1)",
        description="Checks, shuffles, hopes. One step is a whole check-and-shuffle.",
    ),

    AlgorithmKind.BUBBLE: SorterInfo(
        kind=AlgorithmKind.BUBBLE, init=init_bubble, step=step_bubble, pseudocode=_bubble_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        description="Adjacent swaps; stops after a pass with no swaps.",
    ),

    AlgorithmKind.QUICK: SorterInfo(
        kind=AlgorithmKind.QUICK, init=init_quick, step=step_quick, pseudocode=_quick_pc,
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Lomuto partition per step; recursion kept on an explicit stack.",
    ),

    AlgorithmKind.MERGE: SorterInfo(
        kind=AlgorithmKind.MERGE, init=init_merge, step=step_merge, pseudocode=_merge_pc,
        complexity_time="O(n log n)", complexity_space="O(n)", stable=True,
        description="Bottom-up merges, one element written per step.",
    ),

    AlgorithmKind.INSERTION: SorterInfo(
        kind=AlgorithmKind.INSERTION, init=init_insertion, step=step_insertion, pseudocode=_ins_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        description="Walks each element left until it is in place.",
    ),

    AlgorithmKind.SELECTION: SorterInfo(
        kind=AlgorithmKind.SELECTION, init=init_selection, step=step_selection, pseudocode=_sel_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Scans for the minimum, then swaps it to the front.",
    ),

    AlgorithmKind.HEAP: SorterInfo(
        kind=AlgorithmKind.HEAP, init=init_heap, step=step_heap, pseudocode=_heap_pc,
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Max-heap build then extraction, one sift level per step.",
    ),

    AlgorithmKind.RADIX: SorterInfo(
        kind=AlgorithmKind.RADIX, init=init_radix, step=step_radix, pseudocode=_radix_pc,
        complexity_time="O(n · w)", complexity_space="O(n + b)", stable=True,
        description="Two 4-bit LSD passes; no comparisons at all.",
    ),

    AlgorithmKind.SHELL: SorterInfo(
        kind=AlgorithmKind.SHELL, init=init_shell, step=step_shell, pseudocode=_shell_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Gapped insertion sort, gap halving from n/2.",
    ),

    AlgorithmKind.COCKTAIL: SorterInfo(
        kind=AlgorithmKind.COCKTAIL, init=init_cocktail, step=step_cocktail, pseudocode=_cocktail_pc,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        description="Bubble sort in both directions; the unsorted window shrinks from both ends.",
    ),
}


def check_registry(registry: Dict[AlgorithmKind, SorterInfo]) -> None:
    """Raise RuntimeError if any AlgorithmKind has no step rule."""
    missing = [kind.value for kind in AlgorithmKind if kind not in registry]
    if missing:
        raise RuntimeError(f"No step rule registered for: {', '.join(missing)}")


check_registry(REGISTRY)


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_sorter(kind: AlgorithmKind) -> SorterInfo:
    """Return the SorterInfo for a kind.  Raises TypeError for non-kinds."""
    if not isinstance(kind, AlgorithmKind):
        raise TypeError(f"Expected AlgorithmKind, got {kind!r}")
    return REGISTRY[kind]


def list_sorters() -> List[SorterInfo]:
    """Return all registered sorters in enumeration order."""
    return [REGISTRY[kind] for kind in AlgorithmKind]


def sorter_for_name(name: str) -> Optional[SorterInfo]:
    """Look up by enum value ("quick") or label ("Quick Sort"), or None."""
    kind = AlgorithmKind.parse(name)
    return REGISTRY[kind] if kind is not None else None


__all__ = [
    "AlgorithmKind",
    "SorterInfo",
    "SortArray",
    "StepCursor",
    "Metrics",
    "BYTE_MAX",
    "REGISTRY",
    "check_registry",
    "get_sorter",
    "list_sorters",
    "sorter_for_name",
]
