"""
config.py — Defaults & Host Configuration
==========================================
Module constants for the engine plus a PoolConfig the host builds once
(from code or from SORTVIS_* environment variables).
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from sorters import AlgorithmKind


# ---------------------------------------------------------------------------
# Sizes
# ---------------------------------------------------------------------------
SORT_ARRAY_SIZE = 200     # default for a bare StepEngine
POOL_ARRAY_SIZE = 100     # every pool slot sorts the same amount of work


# ---------------------------------------------------------------------------
# Reference layout — one engine per screen edge
# ---------------------------------------------------------------------------
DEFAULT_LAYOUT: Dict[str, AlgorithmKind] = {
    "top":    AlgorithmKind.SHELL,
    "bottom": AlgorithmKind.QUICK,
    "left":   AlgorithmKind.INSERTION,
    "right":  AlgorithmKind.SELECTION,
}


# ---------------------------------------------------------------------------
# Auto-restart presets: (period seconds, window seconds)
# A completed engine restarts when time % period < window.
# ---------------------------------------------------------------------------
RESTART_PRESETS: Dict[str, Tuple[float, float]] = {
    "original": (1.0, 0.1),    # first tenth of every second
    "eager":    (1.0, 1.0),    # next tick after completion
    "relaxed":  (5.0, 0.5),    # linger on the sorted array
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# PoolConfig
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PoolConfig:
    array_size:     int                      = POOL_ARRAY_SIZE
    layout:         Dict[str, AlgorithmKind] = field(default_factory=lambda: dict(DEFAULT_LAYOUT))
    restart_preset: str                      = "original"
    seed:           Optional[int]            = None
    log_level:      str                      = "INFO"

    def __post_init__(self):
        if self.array_size < 0:
            raise ValueError(f"array_size must be >= 0, got {self.array_size}")
        if not self.layout:
            raise ValueError("layout needs at least one slot")
        if self.restart_preset not in RESTART_PRESETS:
            raise ValueError(
                f"Unknown restart preset {self.restart_preset!r}; "
                f"choose from {sorted(RESTART_PRESETS)}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"SORTVIS_LOG_LEVEL: unknown level {self.log_level!r}; "
                f"choose from {', '.join(LOG_LEVELS)}"
            )

    @property
    def restart_timing(self) -> Tuple[float, float]:
        return RESTART_PRESETS[self.restart_preset]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PoolConfig":
        """
        Read SORTVIS_ARRAY_SIZE, SORTVIS_RESTART, SORTVIS_SEED,
        SORTVIS_LOG_LEVEL and SORTVIS_LAYOUT ("top=shell,bottom=quick").
        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        if env.get("SORTVIS_ARRAY_SIZE"):
            kwargs["array_size"] = _parse_int(env, "SORTVIS_ARRAY_SIZE")
        if env.get("SORTVIS_SEED"):
            kwargs["seed"] = _parse_int(env, "SORTVIS_SEED")
        if env.get("SORTVIS_RESTART"):
            kwargs["restart_preset"] = env["SORTVIS_RESTART"].strip().lower()
        if env.get("SORTVIS_LOG_LEVEL"):
            kwargs["log_level"] = env["SORTVIS_LOG_LEVEL"].strip().upper()
        if env.get("SORTVIS_LAYOUT"):
            kwargs["layout"] = parse_layout(env["SORTVIS_LAYOUT"])

        return cls(**kwargs)


def parse_layout(text: str) -> Dict[str, AlgorithmKind]:
    """"top=shell, bottom=Quick Sort" → {"top": SHELL, "bottom": QUICK}."""
    layout: Dict[str, AlgorithmKind] = {}
    for item in text.split(","):
        if not item.strip():
            continue
        slot, sep, name = item.partition("=")
        kind = AlgorithmKind.parse(name) if sep else None
        if not slot.strip() or kind is None:
            raise ValueError(f"SORTVIS_LAYOUT: bad entry {item.strip()!r}")
        layout[slot.strip()] = kind
    return layout


def _parse_int(env: Mapping[str, str], key: str) -> int:
    try:
        return int(env[key])
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {env[key]!r}") from None
