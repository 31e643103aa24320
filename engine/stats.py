"""
stats.py — Completion Leaderboard
==================================
One StatsAggregator is shared by every engine the host creates.  Each
engine reports a finished run with record_completion(kind); anyone can
ask for the leader or the full ranking.

Usage:
    stats = StatsAggregator()
    engine = StepEngine(AlgorithmKind.QUICK, stats=stats)
    …
    kind, count = stats.leading_algorithm()

Ties are broken by AlgorithmKind declaration order (first declared wins),
which is also the order of the underlying table.

Every read and write goes through one lock, so engines stepped from
different threads never lose an increment.
"""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from sorters import AlgorithmKind


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# LeaderboardEntry — one row of the on-screen ranking
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class LeaderboardEntry:
    kind:        AlgorithmKind
    completions: int

    @property
    def label(self) -> str:
        return self.kind.label

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "label": self.label, "completions": self.completions}


# ---------------------------------------------------------------------------
# StatsAggregator
# ---------------------------------------------------------------------------
class StatsAggregator:

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: "OrderedDict[AlgorithmKind, int]" = OrderedDict(
            (kind, 0) for kind in AlgorithmKind
        )

    def record_completion(self, kind: AlgorithmKind) -> None:
        with self._lock:
            self._counts[kind] += 1
            count = self._counts[kind]
        logger.debug("%s completions: %d", kind.label, count)

    def leading_algorithm(self) -> Tuple[AlgorithmKind, int]:
        """Kind with the most completions; first-declared kind on ties."""
        with self._lock:
            leader, best = next(iter(self._counts.items()))
            for kind, count in self._counts.items():
                if count > best:
                    leader, best = kind, count
        return leader, best

    def count(self, kind: AlgorithmKind) -> int:
        with self._lock:
            return self._counts[kind]

    def counts(self) -> Dict[AlgorithmKind, int]:
        """Snapshot of the whole table, in enumeration order."""
        with self._lock:
            return OrderedDict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def ranking(self, limit: Optional[int] = None) -> List[LeaderboardEntry]:
        """Most completions first.  sorted() is stable, so ties keep enum order."""
        with self._lock:
            rows = [LeaderboardEntry(kind, count) for kind, count in self._counts.items()]
        rows = sorted(rows, key=lambda e: e.completions, reverse=True)
        return rows if limit is None else rows[:limit]

    def reset(self) -> None:
        with self._lock:
            for kind in self._counts:
                self._counts[kind] = 0
