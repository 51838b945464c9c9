"""Custom Textual widgets for the fibcalc terminal UI."""

from typing import Optional

from textual.widgets import LoadingIndicator, Static
from textual.containers import VerticalScroll
from rich.markdown import Markdown
from rich.text import Text

from .ranges import plan_chunks


class MessageWidget(Static):
    """One entry in the results list: a query, a result, help text or an error."""

    DEFAULT_CSS = """
    MessageWidget {
        margin: 0 0 1 0;
        padding: 1 2;
        background: #0d0d0d;
    }

    MessageWidget.query-message {
        background: #121212;
        border-left: solid #3a3a3a;
    }

    MessageWidget.result-message {
        border-left: solid #5a7a5a;
    }

    MessageWidget.error-message {
        background: #1a0a0a;
        border-left: solid #4a2a2a;
    }
    """

    def __init__(self, role: str, content: str, **kwargs):
        super().__init__(**kwargs)
        self.role = role
        self.message_content = content
        self.add_class(f"{role}-message")
        self.update(self._renderable())

    def _renderable(self):
        if self.role == "info":
            return Markdown(self.message_content)
        if self.role == "query":
            return Text.assemble(("› ", "#777777"), (self.message_content, "#dddddd"))
        if self.role == "error":
            return Text(self.message_content, style="#dd7777")
        # Values are never truncated; long numbers fold onto the next line.
        return Text(self.message_content, style="#cccccc", overflow="fold")


class ResultsView(VerticalScroll):
    """Scrolling list of queries and results, with an indicator while busy."""

    DEFAULT_CSS = """
    ResultsView {
        background: #0d0d0d;
        height: 1fr;
        padding: 1 0;
    }

    ResultsView LoadingIndicator {
        height: 3;
    }
    """

    def add_message(self, role: str, content: str) -> MessageWidget:
        message = MessageWidget(role, content)
        self.mount(message)
        self.scroll_end(animate=False)
        return message

    def set_busy(self, busy: bool) -> None:
        """Mount or remove the loading indicator."""
        indicators = self.query(LoadingIndicator)
        if busy and not indicators:
            self.mount(LoadingIndicator())
            self.scroll_end(animate=False)
        elif not busy:
            indicators.remove()

    def clear_messages(self) -> None:
        self.remove_children()


def describe_job(start: int, end: Optional[int], workers: int) -> str:
    """One-line summary of a computation, e.g. ``F(3)..F(10) · 4 chunks / 4 workers``."""
    if end is None:
        return f"F({start}) · fast doubling"
    chunks = len(plan_chunks(start, end, workers))
    return f"F({start})..F({end}) · {chunks} chunk(s) / {workers} worker(s)"


class ComputeStatus(Static):
    """Status line showing the current computation and how long the last one took."""

    DEFAULT_CSS = """
    ComputeStatus {
        dock: bottom;
        height: 1;
        background: #0d0d0d;
        color: #888888;
        padding: 0 2;
    }

    ComputeStatus.failed {
        color: #cc5555;
    }
    """

    def __init__(self, range_workers: int = 1, **kwargs):
        super().__init__("", **kwargs)
        self.range_workers = range_workers
        self.set_text(f"ready · {range_workers} worker(s)")

    def set_text(self, message: str, failed: bool = False) -> None:
        self.status_text = message
        self.set_class(failed, "failed")
        self.update(message)

    def computing(self, start: int, end: Optional[int]) -> None:
        self.set_text(f"computing {describe_job(start, end, self.range_workers)}")

    def done(self, start: int, end: Optional[int], seconds: float) -> None:
        self.set_text(f"{describe_job(start, end, self.range_workers)} · {seconds * 1000:.1f} ms")

    def set_failed(self, error: str) -> None:
        self.set_text(error, failed=True)
