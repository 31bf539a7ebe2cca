"""
SimulationLoop: the round-based driver of the economy.

Each round, in this order:
1. PairSelector draws (sender, receiver)
2. TradeRule moves wealth between them
3. RenderPort receives the full wealth vector
4. Round counter advances
5. CancelPort is polled (non-blocking)

The stop signal is only checked after a round has been rendered, so
the frame on screen when the loop exits always includes the round in
which the stop was observed. There is no mid-round preemption and no
extra render on exit.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
import logging

import numpy as np

from wealthsim.core.config import SimulationConfig
from wealthsim.core.errors import (
    InvalidConfiguration,
    InvalidPopulationSize,
    RenderFailure,
    SetupFailure,
)
from wealthsim.core.ledger import WealthLedger
from wealthsim.core.pairing import PairSelector
from wealthsim.core.ports import CancelToken, NullRenderer
from wealthsim.core.trade import TradeRule

if TYPE_CHECKING:
    from wealthsim.core.ports import CancelPort, RenderPort

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """Lifecycle of a SimulationLoop. STOPPED is terminal."""

    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class SimulationLoop:
    """
    Drives `round_limit` trades over a ledger.

    The loop owns the round counter and is the only writer of the ledger.
    """

    ledger: WealthLedger
    selector: PairSelector
    rule: TradeRule
    renderer: "RenderPort"
    cancel: "CancelPort"
    round_limit: int = 10000

    current_round: int = field(default=0, init=False)
    state: LoopState = field(default=LoopState.RUNNING, init=False)
    cancelled: bool = field(default=False, init=False)

    def __post_init__(self):
        if self.ledger.size < 2:
            raise InvalidPopulationSize(
                f"need at least 2 agents to trade, got {self.ledger.size}"
            )
        if self.round_limit < 0:
            raise InvalidConfiguration(
                f"round_limit must be non-negative, got {self.round_limit}"
            )

    def run(self) -> dict:
        """
        Run until the round budget is exhausted or a stop is observed.

        Returns:
            Statistics dictionary
        """
        if self.state is LoopState.STOPPED:
            raise RuntimeError("simulation already stopped; create a new loop to run again")

        logger.info(
            "Starting simulation: %d agents, %d rounds",
            self.ledger.size, self.round_limit,
        )

        try:
            while self.current_round < self.round_limit:
                self._round()
                self.current_round += 1

                if self.cancel.is_set():
                    self.cancelled = True
                    logger.info("Stop signal observed after round %d", self.current_round)
                    break
        finally:
            # Aborted runs are terminal too
            self.state = LoopState.STOPPED

        logger.info("Simulation stopped after %d rounds", self.current_round)

        return {
            "rounds": self.current_round,
            "round_limit": self.round_limit,
            "cancelled": self.cancelled,
            "total_wealth": self.ledger.total(),
            "min_wealth": self.ledger.min(),
            "max_wealth": self.ledger.max(),
        }

    def _round(self):
        """Execute one round: select, trade, render."""
        sender, receiver = self.selector.pick_two_distinct(self.ledger.size)
        self.rule.apply(self.ledger, sender, receiver)
        logger.debug(
            "Round %d: %d -> %d", self.current_round, sender, receiver
        )
        self._render(self.ledger.wealth)

    def _render(self, wealth: np.ndarray):
        try:
            self.renderer.render(wealth)
        except SetupFailure:
            raise
        except Exception as exc:
            raise RenderFailure(f"renderer failed in round {self.current_round}") from exc

    @property
    def is_running(self) -> bool:
        return self.state is LoopState.RUNNING


def create_simulation(
    config: SimulationConfig | None = None,
    renderer: "RenderPort | None" = None,
    cancel: "CancelPort | None" = None,
    rng: np.random.Generator | None = None,
) -> SimulationLoop:
    """
    Factory wiring a ledger, selector and rule from a config.

    Args:
        config: Run constants (defaults if None)
        renderer: Frame sink; a renderer that draws nothing if None
        cancel: Stop signal; a fresh, never-set CancelToken if None
        rng: Generator for pair selection; time-seeded if None
    """
    if config is None:
        config = SimulationConfig()

    return SimulationLoop(
        ledger=WealthLedger.initialize(config.population_size, config.initial_wealth),
        selector=PairSelector(rng),
        rule=TradeRule(config.percent_gain, config.percent_loss),
        renderer=renderer if renderer is not None else NullRenderer(),
        cancel=cancel if cancel is not None else CancelToken(),
        round_limit=config.round_limit,
    )
