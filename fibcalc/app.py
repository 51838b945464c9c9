"""Main Textual application for fibcalc."""

import asyncio
import logging
import re
import time
from typing import Optional, Tuple

from textual.app import App, ComposeResult
from textual.widgets import Header, Footer, Input
from textual.containers import Container, Vertical
from textual.binding import Binding

from .config import Config
from .core import Fib
from .render import format_range, format_value
from .widgets import ComputeStatus, ResultsView

logger = logging.getLogger(__name__)

INVALID_NUMBER = "Please enter a valid number"
INVALID_RANGE = "Invalid range: end < start"

_RANGE_RE = re.compile(r"^\s*(\d+)\s*(?:\.\.|-|\s)\s*(\d+)\s*$")


def parse_query(text: str) -> Tuple[int, Optional[int]]:
    """Parse ``"n"`` or ``"start end"`` (also ``start..end``, ``start-end``).

    Returns ``(n, None)`` for a single index and ``(start, end)`` for a range.
    Raises ValueError when the text is not one or two non-negative integers.
    """
    text = text.strip()
    if text.isdigit():
        return int(text), None
    match = _RANGE_RE.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1)), int(match.group(2))


class FibApp(App):
    """Interactive calculator for single Fibonacci numbers and ranges."""

    CSS = """
    Screen {
        background: #0d0d0d;
    }

    #main-container {
        height: 100%;
        background: #0d0d0d;
    }

    #input-container {
        dock: bottom;
        height: auto;
        background: #121212;
        padding: 1 2;
        border-top: solid #2a2a2a;
    }

    Input {
        width: 100%;
        background: #121212;
        border: none;
        padding: 0 0;
    }

    Input:focus {
        border: none;
    }

    Header {
        background: #0d0d0d;
        color: #888888;
        height: 1;
        padding: 0 2;
    }

    Footer {
        background: #0d0d0d;
        color: #666666;
        height: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
        Binding("ctrl+l", "clear", "Clear", show=True),
        Binding("ctrl+h", "help", "Help", show=True),
    ]

    TITLE = "fibonacci calculator"

    def __init__(self, range_workers: int = None):
        super().__init__()
        # App.workers is taken by Textual's worker manager.
        self.range_workers = range_workers or Config.worker_count()
        self.is_processing = False
        self.sub_title = f"{self.range_workers} worker(s)"

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()

        with Vertical(id="main-container"):
            yield ResultsView()

            with Container(id="input-container"):
                yield Input(
                    placeholder="n  or  start end",
                    id="query-input"
                )

        yield ComputeStatus(range_workers=self.range_workers)
        yield Footer()

    async def on_mount(self) -> None:
        """Called when app starts."""
        view = self.query_one(ResultsView)
        view.add_message("info", "Enter `n` for F(n), or `start end` for a range.")
        self.query_one("#query-input", Input).focus()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle a submitted query."""
        if self.is_processing:
            return

        query = event.value.strip()
        if not query:
            return

        event.input.value = ""

        view = self.query_one(ResultsView)
        status = self.query_one(ComputeStatus)
        view.add_message("query", query)

        try:
            start, end = parse_query(query)
        except ValueError:
            view.add_message("error", INVALID_NUMBER)
            return

        if end is not None and end < start:
            view.add_message("error", INVALID_RANGE)
            return

        view.set_busy(True)
        status.computing(start, end)
        self.is_processing = True
        started = time.perf_counter()

        try:
            if end is None:
                value = await asyncio.to_thread(Fib.single, start)
                text = format_value(start, value)
            else:
                values = await asyncio.to_thread(Fib.range, start, end, self.range_workers)
                text = "\n".join(format_range(start, values))
        except Exception as e:
            logger.exception("computation failed for %r", query)
            view.add_message("error", f"error: {e}")
            status.set_failed(f"failed: {e}")
        else:
            view.add_message("result", text)
            status.done(start, end, time.perf_counter() - started)
        finally:
            view.set_busy(False)
            self.is_processing = False
            self.query_one("#query-input", Input).focus()

    def action_clear(self) -> None:
        """Clear the results."""
        view = self.query_one(ResultsView)
        view.clear_messages()
        view.add_message("info", "cleared")

    def action_help(self) -> None:
        """Show help message."""
        view = self.query_one(ResultsView)

        help_msg = """**fibcalc help**

- `100` computes F(100)
- `3 10`, `3..10` or `3-10` lists F(3) through F(10)

Keys: `ctrl+c` quit, `ctrl+l` clear, `ctrl+h` help."""
        view.add_message("info", help_msg)


def run(range_workers: int = None):
    """Run the fibcalc terminal UI."""
    app = FibApp(range_workers)
    app.run()
