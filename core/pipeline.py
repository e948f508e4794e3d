"""
Bundling pipeline.

Runs one BundleRequest end to end: validate, resolve extensions, discover,
sort and write. Each stage is a plain function in its own module; this module
only sequences them and reports progress.
"""

from datetime import datetime
import os
from pathlib import Path

from core.bundle import write_bundle
from core.discovery import discover_files
from core.exceptions import (
    EmptyInventoryError,
    EmptyOutputNameError,
    NoLanguagesSpecifiedError,
)
from core.extensions import resolve_extensions
from core.file_io import FileReader
from core.models import BundleResult
from core.sorting import sort_files
from models import BundleRequest
from ui.console import NoOpReporter, Reporter
from ui.progress_display import ProgressDisplay


def run_bundle(
    request: BundleRequest,
    base_directory: Path,
    reporter: Reporter | None = None,
    progress_display: ProgressDisplay | None = None,
    file_reader: FileReader | None = None,
    now: datetime | None = None,
) -> BundleResult:
    """
    Bundle the files under ``base_directory`` according to ``request``.

    Input errors are raised before the filesystem is touched. Finding no
    matching files is not a failure: EmptyInventoryError is raised and nothing
    is written, so an existing bundle is left as it was.

    Args:
        request: The run configuration.
        base_directory: Directory to scan; source notes are relative to it and
            a relative ``request.output`` is resolved against it.
        reporter: Receives status lines. Defaults to a NoOpReporter.
        progress_display: Receives per-file progress while writing.
        file_reader: Reader for file contents (tests inject a mock).
        now: Timestamp for the author header.

    Returns:
        BundleResult: The written path and the files in bundle order.

    Raises:
        EmptyOutputNameError: If the output file name is blank.
        NoLanguagesSpecifiedError: If no language was requested.
        NoValidExtensionsError: If no requested language is known.
        EmptyInventoryError: If no file matched.
        FileWriteError: If the bundle could not be written.
    """
    reporter = reporter if reporter is not None else NoOpReporter()
    base_directory = Path(os.path.normpath(base_directory.absolute()))

    if not request.output.name.strip():
        raise EmptyOutputNameError()

    if not request.languages:
        raise NoLanguagesSpecifiedError()

    reporter.info(f"Scanning directory: {base_directory}")

    extensions = resolve_extensions(request.languages, reporter)
    # Normalized like the discovered paths so "sub/../out.md" still matches
    output = Path(os.path.normpath(base_directory / request.output))

    # A previous bundle under the scan root must not be bundled into itself
    files = [f for f in discover_files(base_directory, extensions) if f.path != output]

    if not files:
        raise EmptyInventoryError()

    reporter.info(f"Found {len(files)} files")

    ordered = sort_files(files, request.sort)

    write_bundle(
        ordered,
        output,
        base_directory=base_directory,
        include_note=request.include_note,
        remove_empty_lines=request.remove_empty_lines,
        author=request.author,
        file_reader=file_reader,
        progress_display=progress_display,
        now=now,
    )

    return BundleResult(output=output, files=tuple(ordered))
