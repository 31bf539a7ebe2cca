"""
WealthLedger: the wealth vector of the economy.

The ledger stores ONLY the per-agent wealth values.
An agent IS its index: there is no separate agent object.

The length never changes after construction. The total is not
conserved across many trades, so the ledger does not track or
enforce one.
"""

from __future__ import annotations
from typing import Iterator

import numpy as np

from wealthsim.core.errors import IndexOutOfRange, InvalidPopulationSize


class WealthLedger:
    """
    Fixed-length vector of agent wealth values.

    Owned and mutated by the simulation thread only.
    """

    def __init__(self, population_size: int, initial_wealth: float = 100.0):
        if population_size < 1:
            raise InvalidPopulationSize(
                f"population_size must be positive, got {population_size}"
            )
        # Pre-allocated once, mutated in place every round
        self.wealth = np.full(population_size, initial_wealth, dtype=np.float64)

    @classmethod
    def initialize(cls, population_size: int, initial_wealth: float) -> WealthLedger:
        """Create a ledger with every agent holding `initial_wealth`."""
        return cls(population_size, initial_wealth)

    @classmethod
    def from_values(cls, values) -> WealthLedger:
        """Create a ledger from explicit per-agent values (mainly for tests)."""
        values = np.asarray(values, dtype=np.float64)
        ledger = cls(len(values))
        np.copyto(ledger.wealth, values)
        return ledger

    @property
    def size(self) -> int:
        """Number of agents."""
        return self.wealth.shape[0]

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return iter(self.wealth.tolist())

    def _check_index(self, i: int) -> int:
        # Negative indices are errors here, not numpy-style wraparound
        if not 0 <= i < self.size:
            raise IndexOutOfRange(f"agent index {i} outside [0, {self.size})")
        return i

    def get(self, i: int) -> float:
        """Wealth of agent i."""
        return float(self.wealth[self._check_index(i)])

    def set(self, i: int, value: float) -> None:
        """Overwrite the wealth of agent i."""
        self.wealth[self._check_index(i)] = value

    def snapshot(self) -> np.ndarray:
        """Independent copy of the current wealth vector."""
        return self.wealth.copy()

    def total(self) -> float:
        """Aggregate wealth across all agents."""
        return float(self.wealth.sum())

    def max(self) -> float:
        """Wealth of the richest agent."""
        return float(self.wealth.max())

    def min(self) -> float:
        """Wealth of the poorest agent."""
        return float(self.wealth.min())
