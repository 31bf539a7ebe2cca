"""
Input watchers: the collaborators that set the stop signal.

Each watcher sets a CancelToken once when it sees an external trigger,
then does nothing more:
- FigureKeyWatcher: any key press in the chart window, or closing it
- StreamWatcher: a line (or end-of-file) on a text stream, in its own thread
"""

from __future__ import annotations
from functools import partial
from typing import TYPE_CHECKING, TextIO
import logging
import sys
import threading

if TYPE_CHECKING:
    from matplotlib.figure import Figure
    from wealthsim.core.ports import CancelToken

logger = logging.getLogger(__name__)


def request_stop(token: "CancelToken", event) -> None:
    """Figure event handler: set the token."""
    if not token.is_set():
        logger.info("Stop requested (%s)", event.name)
    token.set()


class FigureKeyWatcher:
    """
    Sets the token on key press or window close.

    The canvas holds the handlers strongly, so the connection lives as long
    as the figure does, whether or not the watcher is kept.
    """

    def __init__(self, figure: "Figure", token: "CancelToken"):
        self.figure = figure
        self.token = token
        # Bound methods would only be held weakly by the canvas
        handler = partial(request_stop, token)
        canvas = figure.canvas
        self._cids = [
            canvas.mpl_connect("key_press_event", handler),
            canvas.mpl_connect("close_event", handler),
        ]

    def disconnect(self) -> None:
        for cid in self._cids:
            self.figure.canvas.mpl_disconnect(cid)
        self._cids = []


class StreamWatcher(threading.Thread):
    """
    Background thread that sets the token after one line of input.

    End-of-file also sets the token: a closed stream can never deliver
    a stop request otherwise.
    """

    def __init__(self, token: "CancelToken", stream: TextIO | None = None):
        super().__init__(name="wealthsim-stream-watcher", daemon=True)
        self.token = token
        self.stream = stream

    def run(self) -> None:
        stream = self.stream if self.stream is not None else sys.stdin
        line = stream.readline()
        logger.info("Stop requested (%s)", "input" if line else "end of input")
        self.token.set()
