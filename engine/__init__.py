"""
engine/
-------
Runtime layer: stepping, leaderboard, pool.

    from engine import StepEngine, StatsAggregator, VisualizerPool
"""

from engine.config      import PoolConfig, DEFAULT_LAYOUT, RESTART_PRESETS, SORT_ARRAY_SIZE, POOL_ARRAY_SIZE
from engine.stats       import StatsAggregator, LeaderboardEntry
from engine.step_engine import StepEngine, ExecutionState, EngineSnapshot
from engine.pool        import VisualizerPool, RestartPolicy
from engine.logsetup    import setup_logging

__all__ = [
    "PoolConfig",
    "DEFAULT_LAYOUT",
    "RESTART_PRESETS",
    "SORT_ARRAY_SIZE",
    "POOL_ARRAY_SIZE",
    "StatsAggregator",
    "LeaderboardEntry",
    "StepEngine",
    "ExecutionState",
    "EngineSnapshot",
    "VisualizerPool",
    "RestartPolicy",
    "setup_logging",
]
