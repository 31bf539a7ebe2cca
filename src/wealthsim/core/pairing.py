"""
PairSelector: draws the two agents that trade in a round.

Both indices are uniform over [0, n) and always distinct. The receiver
is redrawn until it differs from the sender (rejection sampling), so
each draw consumes a variable amount of entropy.

The generator is injected. Without one, a generator seeded from the
wall clock is created, so default runs are not reproducible.
"""

from __future__ import annotations
import itertools
import logging
import time

import numpy as np

from wealthsim.core.errors import InvalidPopulationSize

logger = logging.getLogger(__name__)

# Keeps selectors created within one clock tick apart
_seed_counter = itertools.count()


def time_seeded_rng() -> np.random.Generator:
    """Create a generator seeded once from the current time."""
    seed = [time.time_ns(), next(_seed_counter)]
    logger.debug("Seeding random generator with %s", seed)
    return np.random.default_rng(seed)


class PairSelector:
    """Uniform sampler of (sender, receiver) pairs."""

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng = rng if rng is not None else time_seeded_rng()

    def pick_two_distinct(self, n: int) -> tuple[int, int]:
        """
        Pick two different agents out of n.

        Args:
            n: Population size, at least 2

        Returns:
            (sender, receiver), both in [0, n), sender != receiver
        """
        if n < 2:
            raise InvalidPopulationSize(f"need at least 2 agents to trade, got {n}")

        sender = int(self.rng.integers(n))
        receiver = sender

        # Agents do not trade with themselves
        while receiver == sender:
            receiver = int(self.rng.integers(n))

        return sender, receiver
