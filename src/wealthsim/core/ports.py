"""
Ports: the two narrow interfaces between the core and the outside world.

The core knows NOTHING about charts, terminals or keyboards. It only:
- hands the full wealth vector to a RenderPort after each round
- polls a CancelPort once per round, without blocking

CancelToken is the concrete one-shot signal shared between the
simulation thread and whichever watcher sets it.
"""

from __future__ import annotations
import threading
from typing import Protocol

import numpy as np


class RenderPort(Protocol):
    """Protocol for anything that displays the wealth distribution."""

    def render(self, wealth: np.ndarray) -> None:
        """
        Show the current state.

        Args:
            wealth: Full, ordered wealth vector after the latest round.
                    This is the ledger's live array; copy it to keep it.
        """
        ...


class CancelPort(Protocol):
    """Protocol for the stop signal polled by the simulation loop."""

    def is_set(self) -> bool:
        """Non-blocking check whether a stop was requested."""
        ...


class CancelToken:
    """
    One-shot, thread-safe stop signal.

    Starts unset, may be set any number of times with the same effect,
    and never resets.
    """

    def __init__(self):
        self._event = threading.Event()

    def set(self) -> None:
        """Request a stop. Idempotent."""
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until set (or timeout). Returns whether the token is set."""
        return self._event.wait(timeout)


class NullRenderer:
    """RenderPort that draws nothing."""

    def render(self, wealth: np.ndarray) -> None:
        pass
