"""
SimulationConfig: load-time constants for one simulation run.

Values are validated once, at construction. Nothing here changes while
the loop runs.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

from wealthsim.core.errors import InvalidConfiguration, InvalidPopulationSize


def check_percentage(name: str, value: float) -> float:
    """Reject a trade percentage outside [0, 1]."""
    if not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(f"{name} must be in [0, 1], got {value!r}")
    return float(value)


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for a wealth-exchange run."""

    population_size: int = 10  # Number of agents in the market
    initial_wealth: float = 100.0  # Wealth every agent starts with
    round_limit: int = 10000  # Trades to simulate
    percent_gain: float = 0.20  # Share of the receiver's wealth moved when the sender is not poorer
    percent_loss: float = 0.17  # Share of the sender's wealth moved when the sender is poorer

    def __post_init__(self):
        if self.population_size < 2:
            raise InvalidPopulationSize(
                f"population_size must be at least 2, got {self.population_size}"
            )
        if self.round_limit < 0:
            raise InvalidConfiguration(
                f"round_limit must be non-negative, got {self.round_limit}"
            )
        if not math.isfinite(self.initial_wealth) or self.initial_wealth < 0:
            raise InvalidConfiguration(
                f"initial_wealth must be a finite non-negative number, got {self.initial_wealth!r}"
            )
        check_percentage("percent_gain", self.percent_gain)
        check_percentage("percent_loss", self.percent_loss)

    @property
    def max_possible_wealth(self) -> float:
        """Wealth held by one agent if it owned everything at the start."""
        return self.population_size * self.initial_wealth
