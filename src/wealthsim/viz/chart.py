"""
Live bar chart of agent wealth.

One bar per agent, with its wealth printed above it. The y-axis is
rescaled every frame to the current maximum plus a small headroom
toward the theoretical maximum (one agent owning everything), so the
distribution stays readable long before anyone gets close to that.

All plots use matplotlib. In interactive mode every frame pumps the GUI
event loop via plt.pause, which is also when key presses are delivered.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
import logging
import time

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from wealthsim.core.errors import SetupFailure

if TYPE_CHECKING:
    from wealthsim.core.ports import CancelPort

logger = logging.getLogger(__name__)

# Backends that never open a window, so never deliver key presses
NON_INTERACTIVE_BACKENDS = {"agg", "cairo", "pdf", "pgf", "ps", "svg", "template"}


def has_interactive_backend() -> bool:
    """Whether pyplot resolved to a GUI backend (False after a no-display fallback)."""
    backend = plt.get_backend().lower()
    return backend not in NON_INTERACTIVE_BACKENDS and "inline" not in backend


@dataclass
class ChartConfig:
    """Presentation settings for the wealth bar chart."""

    title: str = "Agents' Wealth"
    headroom: float = 0.05  # Fraction of the gap to the theoretical max kept above the tallest bar
    number_format: str = "{:3.1f}"
    bar_color: str = "tab:blue"
    label_color: str = "black"
    figsize: tuple[float, float] = (8, 5)
    interactive: bool = True  # Pump the GUI event loop on each frame
    pause_interval: float = 0.001  # Seconds given to the GUI per frame
    redraw_every: int = 1  # Flush the canvas every N frames


def display_max(wealth: np.ndarray, max_possible_wealth: float, headroom: float = 0.05) -> float:
    """
    Upper y-limit for the current frame.

    current_max + (max_possible - current_max) × headroom
    """
    current_max = float(np.max(wealth))
    return current_max + (max_possible_wealth - current_max) * headroom


class BarChartRenderer:
    """
    RenderPort drawing the wealth vector as a matplotlib bar chart.

    Raises SetupFailure if the figure cannot be created (e.g. no display
    for an interactive backend).
    """

    def __init__(
        self,
        n_agents: int,
        max_possible_wealth: float,
        config: ChartConfig | None = None,
    ):
        self.config = config or ChartConfig()
        self.n_agents = n_agents
        self.max_possible_wealth = max_possible_wealth
        self.frames = 0

        if self.config.interactive and not has_interactive_backend():
            raise SetupFailure(
                f"interactive chart needs a GUI backend, got {plt.get_backend()!r} "
                "(no display?); run headless instead"
            )

        try:
            if self.config.interactive:
                plt.ion()
            self.fig, self.ax = plt.subplots(figsize=self.config.figsize)
        except Exception as exc:
            raise SetupFailure(f"could not initialize chart: {exc}") from exc

        positions = np.arange(n_agents)
        self.bars = self.ax.bar(positions, np.zeros(n_agents), color=self.config.bar_color)
        self.labels = [
            self.ax.text(x, 0.0, "", ha="center", va="bottom",
                         color=self.config.label_color, fontsize=8)
            for x in positions
        ]

        self.ax.set_title(self.config.title)
        self.ax.set_xlabel("Agent")
        self.ax.set_ylabel("Wealth")
        self.ax.set_xticks(positions)
        self.ax.grid(True, axis="y", alpha=0.3)

        logger.debug("Chart initialized for %d agents", n_agents)

    @property
    def figure(self) -> Figure:
        return self.fig

    def render(self, wealth: np.ndarray) -> None:
        """Draw one frame per simulation round."""
        self._update_artists(wealth)
        self.frames += 1
        if self.frames % max(1, self.config.redraw_every) == 0:
            self._flush()

    def _update_artists(self, wealth: np.ndarray):
        """Update bars, labels and y-scale."""
        wealth = np.asarray(wealth, dtype=np.float64)
        fmt = self.config.number_format

        for bar, label, value in zip(self.bars, self.labels, wealth):
            bar.set_height(value)
            label.set_y(value)
            label.set_text(fmt.format(value))

        top = display_max(wealth, self.max_possible_wealth, self.config.headroom)
        if top <= 0:
            top = 1.0
        self.ax.set_ylim(0, top)

    def draw_initial(self, wealth: np.ndarray) -> None:
        """Show the starting distribution before any trade happens."""
        self._update_artists(wealth)
        self._flush()

    def _flush(self):
        if self.config.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(self.config.pause_interval)
        else:
            self.fig.canvas.draw()

    def wait_until(self, token: "CancelPort", poll_interval: float = 0.1) -> None:
        """Keep the final frame on screen until the token is set."""
        self._flush()
        while not token.is_set():
            if self.config.interactive:
                plt.pause(poll_interval)
            else:
                time.sleep(poll_interval)

    def save(self, path: str | Path, dpi: int = 150, **kwargs) -> None:
        """Save the current frame to file."""
        self.fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)

    def close(self) -> None:
        plt.close(self.fig)
