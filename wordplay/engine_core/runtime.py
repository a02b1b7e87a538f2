"""
Runtime utilities injected into the engine.

The engine never reads the wall clock or global randomness directly.
Tests pass a fixed clock and a seeded Random for reproducible bots,
key letter draws and timestamps.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import logging
import random
import time


logger = logging.getLogger("wordplay")


def _now_ms() -> float:
    return time.time() * 1000.0


@dataclass
class Utilities:
    """
    Clock, randomness and logging hooks.

    Usage:
        utils = Utilities(rng=random.Random(42), clock=lambda: 0.0)
    """
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], float] = _now_ms

    def get_timestamp(self) -> float:
        """Current time in milliseconds."""
        return self.clock()

    def random(self) -> float:
        """Random float in [0, 1)."""
        return self.rng.random()

    def log(self, message: str):
        logger.debug(message)

    @classmethod
    def seeded(cls, seed: int, start_ms: float = 0.0, step_ms: float = 0.0) -> Utilities:
        """
        Deterministic utilities.

        The clock starts at `start_ms` and advances by `step_ms` per call.
        """
        ticks = {"now": start_ms - step_ms}

        def clock() -> float:
            ticks["now"] += step_ms
            return ticks["now"]

        return cls(rng=random.Random(seed), clock=clock)
