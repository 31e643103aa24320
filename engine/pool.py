"""
pool.py — Named Engine Pool
============================
The host builds one VisualizerPool and calls tick() once per frame.
The pool steps every engine once, then asks its RestartPolicy whether
completed engines should start over.  Restarts go through
StepEngine.restart(), so the next tick reshuffles them.

Usage:
    stats = StatsAggregator()
    pool = VisualizerPool.from_config(PoolConfig(), stats=stats)
    while True:
        pool.tick()
        draw(pool.snapshots())

The pool has no rendering logic.  tick(), restart_all() and the snapshot
readers share one lock so request handlers on different threads can use
the same pool.
"""

import logging
import random
import threading
import time
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from sorters import AlgorithmKind
from engine.config import DEFAULT_LAYOUT, POOL_ARRAY_SIZE, RESTART_PRESETS, PoolConfig
from engine.stats import StatsAggregator
from engine.step_engine import EngineSnapshot, ExecutionState, StepEngine


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# RestartPolicy
# ---------------------------------------------------------------------------
class RestartPolicy:
    """A completed engine restarts when `time % period < window`."""

    def __init__(self, period: float = 1.0, window: float = 0.1):
        if period <= 0 or window <= 0:
            raise ValueError("period and window must be positive")
        self.period = period
        self.window = window

    @classmethod
    def preset(cls, name: str) -> "RestartPolicy":
        if name not in RESTART_PRESETS:
            raise ValueError(f"Unknown restart preset: {name}")
        return cls(*RESTART_PRESETS[name])

    def should_restart(self, now: float) -> bool:
        return now % self.period < self.window

    def __repr__(self) -> str:
        return f"RestartPolicy(period={self.period}, window={self.window})"


# ---------------------------------------------------------------------------
# VisualizerPool
# ---------------------------------------------------------------------------
class VisualizerPool:
    """
    Attributes:
        stats  : Shared StatsAggregator every engine reports to.
        policy : RestartPolicy for completed engines.
    """

    def __init__(
        self,
        layout: Optional[Mapping[str, AlgorithmKind]] = None,
        size: int = POOL_ARRAY_SIZE,
        stats: Optional[StatsAggregator] = None,
        policy: Optional[RestartPolicy] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        layout = dict(DEFAULT_LAYOUT if layout is None else layout)
        if not layout:
            raise ValueError("A pool needs at least one slot")

        self.stats:  StatsAggregator = stats if stats is not None else StatsAggregator()
        self.policy: RestartPolicy   = policy or RestartPolicy()
        self._clock  = clock
        self._lock   = threading.Lock()
        rng = rng if rng is not None else random.Random()

        self._engines: Dict[str, StepEngine] = {
            name: StepEngine(kind, size=size, rng=rng, stats=self.stats, name=name)
            for name, kind in layout.items()
        }
        logger.info(
            "pool ready: %s (n=%d, %r)",
            ", ".join(f"{n}={e.kind.value}" for n, e in self._engines.items()), size, self.policy,
        )

    @classmethod
    def from_config(
        cls,
        config: PoolConfig,
        stats: Optional[StatsAggregator] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "VisualizerPool":
        if rng is None:
            rng = random.Random(config.seed)
        return cls(
            layout=config.layout,
            size=config.array_size,
            stats=stats,
            policy=RestartPolicy(*config.restart_timing),
            rng=rng,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Tick  (call this once per frame)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> int:
        """
        Step every engine once, then restart completed engines if the
        policy allows it at `now`.  Returns how many were restarted.
        """
        if now is None:
            now = self._clock()
        restarted = 0
        with self._lock:
            for name, engine in self._engines.items():
                engine.step()
                if engine.state == ExecutionState.COMPLETED and self.policy.should_restart(now):
                    engine.restart()
                    restarted += 1
                    logger.debug("auto-restart %s at t=%.3f", name, now)
        return restarted

    def restart(self, name: str) -> None:
        with self._lock:
            self._engines[name].restart()

    def restart_all(self) -> None:
        with self._lock:
            for engine in self._engines.values():
                engine.restart()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def names(self) -> List[str]:
        return list(self._engines)

    def snapshot(self, name: str) -> EngineSnapshot:
        """Raises KeyError for an unknown slot."""
        with self._lock:
            return self._engines[name].snapshot()

    def snapshots(self) -> Dict[str, EngineSnapshot]:
        with self._lock:
            return {name: e.snapshot() for name, e in self._engines.items()}

    def __getitem__(self, name: str) -> StepEngine:
        return self._engines[name]

    def __contains__(self, name: object) -> bool:
        return name in self._engines

    def __iter__(self) -> Iterator[str]:
        return iter(self._engines)

    def __len__(self) -> int:
        return len(self._engines)
