"""
Error taxonomy for the simulator.

Every failure is fatal: nothing here is retried or recovered mid-run.
- SetupFailure: a collaborator (renderer, backend) could not start
- InvalidConfiguration: rejected before the loop runs
- IndexOutOfRange: an agent index outside [0, N)
"""


class WealthSimError(Exception):
    """Base class for all simulator errors."""


class SetupFailure(WealthSimError, RuntimeError):
    """A collaborator could not be initialized."""


class RenderFailure(SetupFailure):
    """A renderer raised while drawing a frame."""


class InvalidConfiguration(WealthSimError, ValueError):
    """Configuration values outside their allowed ranges."""


class InvalidPopulationSize(InvalidConfiguration):
    """Fewer than two agents: no trade pair can be drawn."""


class IndexOutOfRange(WealthSimError, IndexError):
    """Agent index outside [0, N)."""
