"""
Core engine primitives.

This layer knows NOTHING about charts, keyboards or terminals.
It only knows:
- A wealth vector indexed by agent
- How to pick two distinct agents
- How much wealth a trade moves
- How to run rounds and poll a stop signal

Rendering and input are reached through RenderPort and CancelPort.
"""

from wealthsim.core.config import SimulationConfig
from wealthsim.core.errors import (
    WealthSimError,
    SetupFailure,
    RenderFailure,
    InvalidConfiguration,
    InvalidPopulationSize,
    IndexOutOfRange,
)
from wealthsim.core.ledger import WealthLedger
from wealthsim.core.pairing import PairSelector, time_seeded_rng
from wealthsim.core.trade import TradeRule
from wealthsim.core.ports import RenderPort, CancelPort, CancelToken, NullRenderer
from wealthsim.core.simulation import LoopState, SimulationLoop, create_simulation

__all__ = [
    "SimulationConfig",
    "WealthSimError",
    "SetupFailure",
    "RenderFailure",
    "InvalidConfiguration",
    "InvalidPopulationSize",
    "IndexOutOfRange",
    "WealthLedger",
    "PairSelector",
    "time_seeded_rng",
    "TradeRule",
    "RenderPort",
    "CancelPort",
    "CancelToken",
    "NullRenderer",
    "LoopState",
    "SimulationLoop",
    "create_simulation",
]
