"""
Visualization and input collaborators.

- Live wealth bar chart (RenderPort)
- Key-press / stream watchers that set the stop signal
"""

from wealthsim.viz.chart import (
    ChartConfig,
    BarChartRenderer,
    display_max,
    has_interactive_backend,
)

from wealthsim.viz.input import (
    FigureKeyWatcher,
    StreamWatcher,
)

__all__ = [
    "ChartConfig",
    "BarChartRenderer",
    "display_max",
    "has_interactive_backend",
    "FigureKeyWatcher",
    "StreamWatcher",
]
