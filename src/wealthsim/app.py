"""
Application wiring: chart + watchers + simulation.

run_app() is the whole program:
1. Configure logging
2. Create the chart (exit code 1 if that fails)
3. Start watching for a stop request
4. Run the simulation, one frame per round
5. Keep the final frame up until a stop is requested
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import TextIO
import logging
import sys

import numpy as np
import matplotlib.pyplot as plt

from wealthsim.analysis import summarize_distribution
from wealthsim.core import (
    CancelToken,
    SetupFailure,
    SimulationConfig,
    create_simulation,
)
from wealthsim.viz import BarChartRenderer, ChartConfig, FigureKeyWatcher, StreamWatcher

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class AppConfig:
    """Top-level configuration for the interactive program."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    headless: bool = False  # Agg backend; stop requests come from a text stream
    log_level: str = "INFO"
    seed: int | None = None  # Fixed seed for pair selection; time-seeded if None


def run_app(config: AppConfig | None = None, stream: TextIO | None = None) -> int:
    """
    Run the wealth-exchange program.

    Args:
        config: Application configuration (defaults if None)
        stream: Text stream watched for a stop request in headless mode
                (stdin if None)

    Returns:
        Process exit code: 0 on normal completion, 1 on setup failure
    """
    if config is None:
        config = AppConfig()

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    chart_config = config.chart
    if config.headless:
        plt.switch_backend("Agg")
        chart_config = replace(chart_config, interactive=False)

    sim_config = config.simulation
    token = CancelToken()

    try:
        renderer = BarChartRenderer(
            sim_config.population_size,
            sim_config.max_possible_wealth,
            chart_config,
        )
    except SetupFailure as exc:
        logger.error("Setup failed: %s", exc)
        return 1

    key_watcher = None
    try:
        if config.headless:
            StreamWatcher(token, stream).start()
        else:
            key_watcher = FigureKeyWatcher(renderer.figure, token)

        rng = np.random.default_rng(config.seed) if config.seed is not None else None
        loop = create_simulation(sim_config, renderer, token, rng)

        renderer.draw_initial(loop.ledger.wealth)
        stats = loop.run()

        summary = summarize_distribution(loop.ledger.wealth)
        logger.info(
            "Finished %d/%d rounds (cancelled=%s): gini=%.3f, top share=%.3f, total=%.1f",
            stats["rounds"], stats["round_limit"], stats["cancelled"],
            summary.gini, summary.top_share, summary.total,
        )

        if not token.is_set():
            prompt = "Enter" if config.headless else "any key"
            print(f"Simulation finished. Press {prompt} to exit.")
        renderer.wait_until(token)
    except SetupFailure as exc:
        logger.error("Simulation aborted: %s", exc)
        return 1
    finally:
        if key_watcher is not None:
            key_watcher.disconnect()
        renderer.close()

    return 0


def main() -> None:
    """Console entry point."""
    sys.exit(run_app())
