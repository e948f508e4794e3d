"""
Status reporting protocol for decoupling console output from business logic.

The core pipeline reports what it is doing (directories scanned, files found,
unknown languages, final summary) through a Reporter. The CLI plugs in the Rich
implementation; tests use the no-op or recording implementations so they never
have to capture terminal output.
"""

from typing import Protocol

from rich.console import Console


class Reporter(Protocol):
    """
    Protocol for human-readable status lines.

    Messages are informational only; nothing downstream parses them.
    """

    def info(self, message: str) -> None:
        """Report a neutral status line."""

    def warning(self, message: str) -> None:
        """Report a recoverable problem (e.g. an unknown language)."""

    def error(self, message: str) -> None:
        """Report a fatal problem."""

    def success(self, message: str) -> None:
        """Report successful completion."""


class RichReporter:
    """
    Rich implementation of Reporter.

    Colors follow the progress bar states: yellow for warnings, red for
    errors and green for success. Messages are printed literally, so paths
    containing square brackets are not read as Rich markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def info(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def warning(self, message: str) -> None:
        self.console.print(f"⚠️  {message}", style="yellow", markup=False, highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"❌ {message}", style="bold red", markup=False, highlight=False)

    def success(self, message: str) -> None:
        self.console.print(f"✅ {message}", style="green", markup=False, highlight=False)


class NoOpReporter:
    """Reporter that discards every message."""

    def info(self, message: str) -> None:
        """No-op: does nothing."""

    def warning(self, message: str) -> None:
        """No-op: does nothing."""

    def error(self, message: str) -> None:
        """No-op: does nothing."""

    def success(self, message: str) -> None:
        """No-op: does nothing."""


class MockReporter:
    """
    Reporter that records every message for test inspection.

    Attributes (for test inspection):
        messages: List of (level, message) tuples in the order they were reported.
    """

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def of_level(self, level: str) -> list[str]:
        """Return the messages reported at ``level``."""
        return [message for lvl, message in self.messages if lvl == level]
