"""
Rich progress bar used while a bundle is written.

One bar per bundle: a spinner, the file currently being appended, the bar and
an "N/M" file counter.
"""

from enum import StrEnum

from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
)


class BundleStage(StrEnum):
    """Rich color of the bar's description at each stage of a bundle run."""

    BUNDLING = "magenta"
    DONE = "green"


def create_progress() -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
    )


def stage_markup(stage: BundleStage, text: str) -> str:
    """
    Color ``text`` for ``stage``.

    ``text`` is escaped first: file names such as "[x].py" are shown as they
    are instead of being read as Rich style tags.

    Args:
        stage: The bundle stage whose color is used.
        text: Plain text to display.

    Returns:
        str: Rich markup for the progress description.
    """
    return f"[{stage}]{escape(text)}[/{stage}]"
