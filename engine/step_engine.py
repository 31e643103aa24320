"""
step_engine.py — Resumable Sorting Engine
==========================================
A StepEngine owns one array and the cursor state of one sorting
algorithm.  The host polls step() once per frame; every call does one
small, bounded piece of work and leaves the array in a consistent,
inspectable state.

State machine:
    RUNNING     →  (algorithm finishes)   →  COMPLETED   (stats +1, once)
    COMPLETED   →  restart()              →  RESTARTING
    RESTARTING  →  step()                 →  RUNNING     (reshuffle, zero metrics)
    COMPLETED   →  step()                 →  COMPLETED   (no-op)

restart() only sets a flag; the reshuffle happens on the next step(), so
a restart request is safe at any time.

Thread safety:
  The engine is single-owner.  Only the StatsAggregator it reports to is
  shared, and that object does its own locking.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from sorters import AlgorithmKind, Metrics, SortArray, StepCursor, get_sorter
from engine.config import SORT_ARRAY_SIZE
from engine.stats import StatsAggregator


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class ExecutionState(Enum):
    RUNNING    = "running"
    COMPLETED  = "completed"
    RESTARTING = "restarting"


# ---------------------------------------------------------------------------
# Snapshot — the read-only picture a renderer gets
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class EngineSnapshot:
    """
    Attributes:
        name            : Slot name in the owning pool ("" for a bare engine).
        kind / label    : Algorithm being run.
        values          : Current array contents.
        state           : Current ExecutionState.
        steps, comparisons, accesses : Metrics since the last restart.
        sorted_fraction : Share of adjacent pairs already in order (0..1).
        cursor          : {"i", "j", "pivot", "phase", "stack_depth"} for overlays.
    """

    name:            str
    kind:            AlgorithmKind
    label:           str
    values:          Tuple[int, ...]
    state:           ExecutionState
    steps:           int
    comparisons:     int
    accesses:        int
    sorted_fraction: float
    cursor:          dict

    def to_dict(self) -> dict:
        return {
            "name":            self.name,
            "kind":            self.kind.value,
            "label":           self.label,
            "values":          list(self.values),
            "state":           self.state.value,
            "steps":           self.steps,
            "comparisons":     self.comparisons,
            "accesses":        self.accesses,
            "sorted_fraction": round(self.sorted_fraction, 4),
            "cursor":          dict(self.cursor),
        }


# ---------------------------------------------------------------------------
# StepEngine
# ---------------------------------------------------------------------------
class StepEngine:
    """
    Attributes:
        kind   : AlgorithmKind, fixed for the engine's lifetime.
        state  : Current ExecutionState.
        name   : Optional slot name (set by the pool, used in logs/snapshots).

    Args:
        kind   : Which algorithm to run.
        size   : Array length when `values` is not given (values 1..size, mod 256).
        values : Explicit starting values.  Used as-is, NOT shuffled.
        rng    : Anything with shuffle() / randrange(), e.g. random.Random(seed).
        stats  : Aggregator notified once per completed run.
    """

    def __init__(
        self,
        kind: AlgorithmKind,
        size: int = SORT_ARRAY_SIZE,
        values: Optional[Sequence[int]] = None,
        rng: Optional[random.Random] = None,
        stats: Optional[StatsAggregator] = None,
        name: str = "",
    ):
        self._sorter             = get_sorter(kind)
        self.kind:  AlgorithmKind = kind
        self.name:  str           = name
        self.state: ExecutionState = ExecutionState.RUNNING

        self._rng     = rng if rng is not None else random.Random()
        self._stats   = stats
        self._metrics = Metrics()
        self._cursor  = StepCursor()

        if values is None:
            self._array = SortArray.cyclic(size, self._metrics)
            self._rng.shuffle(self._array.values)
        else:
            self._array = SortArray(list(values), self._metrics)

        self._sorter.init(self._array, self._cursor)

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def step(self) -> bool:
        """
        Advance by one bounded unit of work.  Returns True if the engine
        did anything (False while parked in COMPLETED).
        """
        if self.state == ExecutionState.COMPLETED:
            return False

        if self.state == ExecutionState.RESTARTING:
            self._reset_run()
            return True

        if len(self._array) < 2:
            done = True
        else:
            done = self._sorter.step(self._array, self._cursor, self._rng)
        self._metrics.steps += 1

        if done:
            self._complete()
        return True

    def restart(self) -> None:
        """Request a fresh run; applied on the next step()."""
        if self.state == ExecutionState.RESTARTING:
            return
        logger.debug("%s restart requested (was %s)", self._tag(), self.state.value)
        self.state = ExecutionState.RESTARTING

    def run_to_completion(self, max_steps: Optional[int] = None) -> bool:
        """
        Step until COMPLETED.  Returns False if `max_steps` ran out first.
        A pending restart is applied first and does not count as a step.
        """
        if self.state == ExecutionState.RESTARTING:
            self._reset_run()
        taken = 0
        while self.state == ExecutionState.RUNNING:
            if max_steps is not None and taken >= max_steps:
                return False
            self.step()
            taken += 1
        return True

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def label(self) -> str:
        return self.kind.label

    @property
    def values(self) -> List[int]:
        """Copy of the current array contents."""
        return list(self._array.values)

    @property
    def metrics(self) -> Metrics:
        """Copy of the counters."""
        return self._metrics.copy()

    @property
    def cursor(self) -> StepCursor:
        """The live cursor.  Read it, do not write it."""
        return self._cursor

    @property
    def length(self) -> int:
        return len(self._array)

    @property
    def sorted_fraction(self) -> float:
        return self._array.sorted_fraction()

    @property
    def is_completed(self) -> bool:
        return self.state == ExecutionState.COMPLETED

    def snapshot(self) -> EngineSnapshot:
        cur = self._cursor
        return EngineSnapshot(
            name=self.name,
            kind=self.kind,
            label=self.label,
            values=tuple(self._array.values),
            state=self.state,
            steps=self._metrics.steps,
            comparisons=self._metrics.comparisons,
            accesses=self._metrics.accesses,
            sorted_fraction=self._array.sorted_fraction(),
            cursor={
                "i": cur.i,
                "j": cur.j,
                "pivot": cur.pivot,
                "phase": cur.phase,
                "stack_depth": len(cur.stack),
            },
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _complete(self) -> None:
        # only reachable from RUNNING, so the stats bump happens once per run
        self.state = ExecutionState.COMPLETED
        logger.info(
            "%s completed: %d steps, %d comparisons, %d accesses",
            self._tag(), self._metrics.steps, self._metrics.comparisons, self._metrics.accesses,
        )
        if self._stats is not None:
            self._stats.record_completion(self.kind)

    def _reset_run(self) -> None:
        self._rng.shuffle(self._array.values)
        self._metrics.reset()
        self._cursor.reset()
        self._sorter.init(self._array, self._cursor)
        self.state = ExecutionState.RUNNING
        logger.debug("%s reshuffled and running", self._tag())

    def _tag(self) -> str:
        return f"{self.name}:{self.kind.value}" if self.name else self.kind.value

    def __repr__(self) -> str:
        return f"StepEngine({self._tag()}, n={len(self._array)}, state={self.state.value})"
