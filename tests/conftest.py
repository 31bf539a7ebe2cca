"""
Pytest configuration and shared fixtures.
"""

import matplotlib
matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def default_config():
    """Default 10-agent, 10000-round configuration."""
    from wealthsim.core import SimulationConfig
    return SimulationConfig()


@pytest.fixture
def two_agent_config():
    """Smallest valid market: two agents with 100.0 each."""
    from wealthsim.core import SimulationConfig
    return SimulationConfig(population_size=2, initial_wealth=100.0, round_limit=1)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


class RecordingRenderer:
    """RenderPort that keeps a copy of every frame."""

    def __init__(self):
        self.frames = []

    def render(self, wealth):
        self.frames.append(np.array(wealth, copy=True))


class ScriptedSelector:
    """PairSelector stand-in returning a fixed sequence of pairs."""

    def __init__(self, pairs):
        self.pairs = list(pairs)
        self.calls = 0

    def pick_two_distinct(self, n):
        pair = self.pairs[self.calls % len(self.pairs)]
        self.calls += 1
        return pair


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def scripted_selector():
    """Factory for selectors that replay given pairs."""
    return ScriptedSelector
