"""Unit tests for the bar chart renderer and input watchers."""

import gc
import io

import numpy as np
import pytest
import matplotlib.pyplot as plt
from matplotlib.backend_bases import CloseEvent, KeyEvent

from wealthsim.core import CancelToken, SetupFailure, SimulationConfig, create_simulation
from wealthsim.viz import (
    BarChartRenderer,
    ChartConfig,
    FigureKeyWatcher,
    StreamWatcher,
    display_max,
    has_interactive_backend,
)


@pytest.fixture
def chart():
    renderer = BarChartRenderer(4, 400.0, ChartConfig(interactive=False))
    yield renderer
    renderer.close()


class TestDisplayMax:
    """Tests for dynamic y-axis scaling."""

    def test_initial_state(self):
        # 100 + (1000 - 100) × 0.05
        assert display_max(np.full(10, 100.0), 1000.0) == pytest.approx(145.0)

    def test_uses_current_maximum(self):
        assert display_max(np.array([10.0, 300.0]), 1000.0, 0.1) == pytest.approx(370.0)

    def test_no_headroom(self):
        assert display_max(np.array([1.0, 2.0]), 100.0, 0.0) == 2.0


class TestBarChartRenderer:
    """Tests for BarChartRenderer on the Agg backend."""

    def test_creation(self, chart):
        assert len(chart.bars) == 4
        assert len(chart.labels) == 4
        assert chart.ax.get_title() == "Agents' Wealth"
        assert chart.frames == 0

    def test_render_updates_bars_and_labels(self, chart):
        chart.render(np.array([80.0, 120.0, 100.0, 100.0]))

        heights = [bar.get_height() for bar in chart.bars]
        assert heights == [80.0, 120.0, 100.0, 100.0]
        assert [label.get_text() for label in chart.labels] == ["80.0", "120.0", "100.0", "100.0"]
        assert chart.frames == 1

    def test_render_rescales_y_axis(self, chart):
        chart.render(np.array([80.0, 120.0, 100.0, 100.0]))
        _, top = chart.ax.get_ylim()
        assert top == pytest.approx(120.0 + (400.0 - 120.0) * 0.05)

    def test_zero_wealth_keeps_valid_axis(self):
        renderer = BarChartRenderer(2, 0.0, ChartConfig(interactive=False))
        renderer.render(np.zeros(2))
        assert renderer.ax.get_ylim() == (0.0, 1.0)
        renderer.close()

    def test_draw_initial_does_not_count_frame(self, chart):
        chart.draw_initial(np.full(4, 100.0))
        assert chart.frames == 0
        assert chart.bars[0].get_height() == 100.0

    def test_custom_title_and_format(self):
        cfg = ChartConfig(title="Market", number_format="{:.0f}", interactive=False)
        renderer = BarChartRenderer(2, 200.0, cfg)
        renderer.render(np.array([80.4, 119.6]))
        assert renderer.ax.get_title() == "Market"
        assert renderer.labels[1].get_text() == "120"
        renderer.close()

    def test_wait_until_returns_when_set(self, chart):
        token = CancelToken()
        token.set()
        chart.wait_until(token, poll_interval=0.01)

    def test_save(self, chart, tmp_path):
        chart.render(np.full(4, 100.0))
        path = tmp_path / "chart.png"
        chart.save(path)
        assert path.exists()

    def test_figure_failure_raises_setup_failure(self, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("no display")

        monkeypatch.setattr(plt, "subplots", broken)
        with pytest.raises(SetupFailure, match="no display"):
            BarChartRenderer(3, 300.0, ChartConfig(interactive=False))

    def test_interactive_without_gui_backend_raises(self):
        assert not has_interactive_backend()
        with pytest.raises(SetupFailure, match="GUI backend"):
            BarChartRenderer(3, 300.0, ChartConfig(interactive=True))

    def test_drives_full_simulation(self, rng):
        cfg = SimulationConfig(population_size=5, round_limit=50)
        renderer = BarChartRenderer(5, cfg.max_possible_wealth,
                                    ChartConfig(interactive=False, redraw_every=10))
        loop = create_simulation(cfg, renderer, rng=rng)
        loop.run()

        assert renderer.frames == 50
        heights = np.array([bar.get_height() for bar in renderer.bars])
        np.testing.assert_allclose(heights, loop.ledger.wealth)
        renderer.close()


class TestFigureKeyWatcher:
    """Key press and window close set the token."""

    def test_key_press_sets_token(self, chart):
        token = CancelToken()
        watcher = FigureKeyWatcher(chart.figure, token)
        canvas = chart.figure.canvas

        canvas.callbacks.process("key_press_event", KeyEvent("key_press_event", canvas, "q"))

        assert token.is_set()
        watcher.disconnect()

    def test_close_sets_token(self, chart):
        token = CancelToken()
        watcher = FigureKeyWatcher(chart.figure, token)
        canvas = chart.figure.canvas

        canvas.callbacks.process("close_event", CloseEvent("close_event", canvas))

        assert token.is_set()
        watcher.disconnect()

    def test_handlers_survive_unreferenced_watcher(self, chart):
        token = CancelToken()
        FigureKeyWatcher(chart.figure, token)
        gc.collect()
        canvas = chart.figure.canvas

        canvas.callbacks.process("key_press_event", KeyEvent("key_press_event", canvas, "q"))

        assert token.is_set()

    def test_disconnect(self, chart):
        token = CancelToken()
        watcher = FigureKeyWatcher(chart.figure, token)
        watcher.disconnect()
        canvas = chart.figure.canvas

        canvas.callbacks.process("key_press_event", KeyEvent("key_press_event", canvas, "q"))

        assert not token.is_set()


class TestStreamWatcher:
    """Background thread watching a text stream."""

    def test_line_sets_token(self):
        token = CancelToken()
        watcher = StreamWatcher(token, io.StringIO("\n"))
        watcher.start()
        watcher.join(timeout=2.0)

        assert not watcher.is_alive()
        assert token.is_set()
        assert watcher.daemon

    def test_end_of_input_sets_token(self):
        token = CancelToken()
        watcher = StreamWatcher(token, io.StringIO(""))
        watcher.start()
        watcher.join(timeout=2.0)
        assert token.is_set()
