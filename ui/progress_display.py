"""
Progress reporting protocol for the bundle writer.

The writer announces each file it appends through a ProgressDisplay, so the
core never depends on Rich directly and tests can run without a terminal.
"""

from types import TracebackType
from typing import Protocol

from rich.progress import Progress, TaskID
from ui.progress import BundleStage, create_progress, stage_markup


class ProgressDisplay(Protocol):
    """
    Receives progress while one bundle is written.

    Inside a single ``with`` block the writer calls on_start once, on_file for
    every file in bundle order, then on_complete once.
    """

    def __enter__(self) -> "ProgressDisplay":
        """Enter the progress context."""

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the progress context."""

    def on_start(self, total: int) -> None:
        """
        Announce the bundle.

        Args:
            total: Number of files that will be appended.
        """

    def on_file(self, relative_path: str) -> None:
        """
        A file is about to be appended.

        Args:
            relative_path: The file's path relative to the scan root, with
                forward slashes.
        """

    def on_complete(self, count: int) -> None:
        """
        Every file was appended.

        Args:
            count: Number of files written.
        """


class RichProgressDisplay:
    """
    Rich bar showing the file being appended and an "N/M" file counter.

    Must be used as a context manager: ``with RichProgressDisplay() as display:``.
    """

    def __init__(self) -> None:
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress()
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()

    def on_start(self, total: int) -> None:
        """
        Add the bundle's task to the bar.

        Raises:
            RuntimeError: If called outside the context manager.
        """
        if self._progress is None:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as display:"
            )
        self._task = self._progress.add_task(
            stage_markup(BundleStage.BUNDLING, "Bundling files..."), total=total
        )

    def _bundle_task(self) -> tuple[Progress, TaskID]:
        if self._progress is None or self._task is None:
            raise RuntimeError("on_start() must be called inside the progress context first")
        return self._progress, self._task

    def on_file(self, relative_path: str) -> None:
        progress, task = self._bundle_task()
        progress.update(
            task,
            advance=1,
            description=stage_markup(BundleStage.BUNDLING, f"📄 {relative_path}"),
        )

    def on_complete(self, count: int) -> None:
        progress, task = self._bundle_task()
        progress.update(
            task,
            completed=count,
            description=stage_markup(BundleStage.DONE, f"✅ Bundled {count} files."),
        )


class NoOpProgressDisplay:
    """ProgressDisplay that shows nothing; used when no terminal is involved."""

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        pass

    def on_start(self, total: int) -> None:
        pass

    def on_file(self, relative_path: str) -> None:
        pass

    def on_complete(self, count: int) -> None:
        pass
