"""
kinds.py — Algorithm Kinds
===========================
The closed set of sorting algorithms an engine can run, with the display
labels shown on the leaderboard and a lenient name parser used by the
config layer and the HTTP API.
"""

from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# AlgorithmKind — closed set of sorting variants the engine can step.
# Declaration order matters: it breaks leaderboard ties.
# ---------------------------------------------------------------------------
class AlgorithmKind(Enum):
    BOGO      = "bogo"        # shuffle until sorted
    BUBBLE    = "bubble"
    QUICK     = "quick"       # explicit (low, high) stack
    MERGE     = "merge"       # bottom-up, one copy or write per step
    INSERTION = "insertion"
    SELECTION = "selection"
    HEAP      = "heap"        # one sift level per step
    RADIX     = "radix"       # LSD, 4-bit digits
    SHELL     = "shell"       # gapped insertion, gap halves
    COCKTAIL  = "cocktail"    # bidirectional bubble

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Quick Sort"."""
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> Optional["AlgorithmKind"]:
        """Resolve "quick", "QUICK" or "Quick Sort".  None if unknown."""
        key = name.strip().lower()
        for kind in cls:
            if key == kind.value or key == kind.label.lower():
                return kind
        return None


_LABELS = {
    AlgorithmKind.BOGO:      "Bogo Sort",
    AlgorithmKind.BUBBLE:    "Bubble Sort",
    AlgorithmKind.QUICK:     "Quick Sort",
    AlgorithmKind.MERGE:     "Merge Sort",
    AlgorithmKind.INSERTION: "Insertion Sort",
    AlgorithmKind.SELECTION: "Selection Sort",
    AlgorithmKind.HEAP:      "Heap Sort",
    AlgorithmKind.RADIX:     "Radix Sort",
    AlgorithmKind.SHELL:     "Shell Sort",
    AlgorithmKind.COCKTAIL:  "Cocktail Sort",
}
