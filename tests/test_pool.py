"""VisualizerPool ticking and the auto-restart policy."""

import random

import pytest

from sorters import AlgorithmKind
from engine import (
    VisualizerPool, RestartPolicy, ExecutionState, PoolConfig, DEFAULT_LAYOUT,
)


def small_pool(stats, size=1, **kwargs):
    layout = {"a": AlgorithmKind.BUBBLE, "b": AlgorithmKind.QUICK}
    return VisualizerPool(layout=layout, size=size, stats=stats, rng=random.Random(0), **kwargs)


class TestRestartPolicy:

    def test_original_window(self):
        policy = RestartPolicy()
        assert policy.should_restart(0.0)
        assert policy.should_restart(3.05)
        assert not policy.should_restart(3.15)
        assert not policy.should_restart(0.99)

    def test_presets(self):
        assert RestartPolicy.preset("eager").should_restart(0.73)
        relaxed = RestartPolicy.preset("relaxed")
        assert relaxed.should_restart(10.2)
        assert not relaxed.should_restart(12.0)
        with pytest.raises(ValueError):
            RestartPolicy.preset("never")

    def test_rejects_non_positive(self):
        with pytest.raises(ValueError):
            RestartPolicy(period=0)


class TestPool:

    def test_reference_layout(self, stats):
        pool = VisualizerPool(stats=stats, rng=random.Random(0))
        assert pool.names == ["top", "bottom", "left", "right"]
        assert pool["top"].kind is AlgorithmKind.SHELL
        assert pool["bottom"].kind is AlgorithmKind.QUICK
        assert pool["left"].kind is AlgorithmKind.INSERTION
        assert pool["right"].kind is AlgorithmKind.SELECTION
        assert all(pool[name].length == 100 for name in pool)

    def test_tick_steps_each_engine_once(self, stats):
        pool = VisualizerPool(stats=stats, rng=random.Random(0))
        pool.tick(0.5)
        for snap in pool.snapshots().values():
            assert snap.steps == 1

    def test_completed_engine_waits_for_window(self, stats):
        pool = small_pool(stats)
        assert pool.tick(0.5) == 0
        assert all(pool[n].state == ExecutionState.COMPLETED for n in pool)
        assert stats.total() == 2

        # still outside the window: stays completed, no double count
        pool.tick(0.6)
        assert stats.total() == 2

        assert pool.tick(1.02) == 2
        assert all(pool[n].state == ExecutionState.RESTARTING for n in pool)

        pool.tick(1.5)
        for snap in pool.snapshots().values():
            assert snap.state == ExecutionState.RUNNING
            assert snap.steps == 0

    def test_clock_used_when_time_omitted(self, stats):
        times = iter([0.5, 2.0])
        pool = small_pool(stats, clock=lambda: next(times))
        assert pool.tick() == 0
        assert pool.tick() == 2

    def test_restart_all(self, stats):
        pool = small_pool(stats, size=10)
        pool.tick(0.5)
        pool.restart_all()
        assert all(pool[n].state == ExecutionState.RESTARTING for n in pool)

    def test_restart_one(self, stats):
        pool = small_pool(stats, size=10)
        pool.restart("b")
        assert pool["b"].state == ExecutionState.RESTARTING
        assert pool["a"].state == ExecutionState.RUNNING

    def test_unknown_slot(self, stats):
        pool = small_pool(stats)
        with pytest.raises(KeyError):
            pool.snapshot("middle")
        assert "middle" not in pool
        assert len(pool) == 2

    def test_empty_layout_rejected(self, stats):
        with pytest.raises(ValueError):
            VisualizerPool(layout={}, stats=stats)

    def test_pool_cycles_forever(self, stats):
        pool = VisualizerPool(size=20, stats=stats, rng=random.Random(3),
                              policy=RestartPolicy.preset("eager"))
        for frame in range(3000):
            pool.tick(frame / 60)
        assert stats.total() >= len(DEFAULT_LAYOUT) * 2
        for name in pool:
            values = pool[name].values
            assert sorted(values) == list(range(1, 21))


class TestFromConfig:

    def test_seed_makes_pools_identical(self, stats):
        config = PoolConfig(array_size=16, seed=5)
        a = VisualizerPool.from_config(config, stats=stats)
        b = VisualizerPool.from_config(config)
        assert [a[n].values for n in a] == [b[n].values for n in b]

    def test_restart_preset_applied(self):
        pool = VisualizerPool.from_config(PoolConfig(restart_preset="relaxed"))
        assert (pool.policy.period, pool.policy.window) == (5.0, 0.5)
