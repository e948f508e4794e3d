"""
Bundle writer.

Writes the sorted files into a single UTF-8 text artifact. The layout is:

    // Bundle created by: <author>        (only when an author is given)
    // Created on: <YYYY-MM-DD HH:MM:SS>
    <blank line>

and then, for every file:

    // Source: <path relative to the scan root>   (only with include_note)
    // ----------------------------------------
    <file content>
    <blank line>
    <blank line>

Every line terminator written by this module is ``os.linesep``; file content is
copied with its own line endings unless empty lines are removed, in which case
the remaining lines are rejoined with ``os.linesep``.
"""

from datetime import datetime
import os
from pathlib import Path
import re
from typing import Sequence, TextIO

from constants import COMMENT_PREFIX, SOURCE_SEPARATOR, TIMESTAMP_FORMAT
from core.exceptions import FileReadError, FileWriteError
from core.file_io import FileReader, FilesystemFileReader, FilesystemFileWriter
from core.models import DiscoveredFile
from ui.progress_display import NoOpProgressDisplay, ProgressDisplay

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def strip_empty_lines(content: str) -> str:
    """
    Remove empty and whitespace-only lines.

    The content is split on "\\r\\n", "\\r" and "\\n" alike; the surviving lines
    keep their relative order and are joined with ``os.linesep``.

    Args:
        content: Text to filter.

    Returns:
        str: The filtered text, without a trailing line terminator.
    """
    lines = [line for line in _LINE_BREAK.split(content) if line.strip()]
    return os.linesep.join(lines)


def _write_line(out: TextIO, text: str = "") -> None:
    out.write(text + os.linesep)


def _write_header(out: TextIO, author: str, now: datetime) -> None:
    _write_line(out, f"{COMMENT_PREFIX} Bundle created by: {author}")
    _write_line(out, f"{COMMENT_PREFIX} Created on: {now.strftime(TIMESTAMP_FORMAT)}")
    _write_line(out)


def write_bundle(
    files: Sequence[DiscoveredFile],
    output: Path,
    *,
    base_directory: Path,
    include_note: bool = False,
    remove_empty_lines: bool = False,
    author: str = "",
    file_reader: FileReader | None = None,
    progress_display: ProgressDisplay | None = None,
    now: datetime | None = None,
) -> Path:
    """
    Write ``files`` into a single bundle at ``output``.

    The output's parent directory is created when missing and any existing
    output is truncated. The handle is closed on every exit path; a failure
    part-way through leaves whatever was already written in place.

    Args:
        files: Files in the order they must appear.
        output: Path of the bundle to write.
        base_directory: Root the source notes are made relative to.
        include_note: Prefix each file with a source comment and separator line.
        remove_empty_lines: Drop empty/whitespace lines from each file.
        author: Author for the header; no header is written when blank.
        file_reader: Reader for file contents. Defaults to FilesystemFileReader.
        progress_display: Receives one update per file. Defaults to a no-op.
        now: Timestamp for the header. Defaults to the current local time.

    Returns:
        Path: The path that was written.

    Raises:
        OutputDirectoryError: If the parent directory cannot be created.
        FileWriteError: If the bundle cannot be written, including when a
            source file cannot be read while writing.
    """
    reader = file_reader if file_reader is not None else FilesystemFileReader()
    display = progress_display if progress_display is not None else NoOpProgressDisplay()

    writer = FilesystemFileWriter.from_path(output, create_parents=True)

    try:
        with writer.open_stream() as out, display as progress:
            if author.strip():
                _write_header(out, author, now or datetime.now())

            progress.on_start(len(files))

            for file in files:
                relative_path = file.relative_to(base_directory)
                progress.on_file(relative_path)

                if include_note:
                    _write_line(out, f"{COMMENT_PREFIX} Source: {relative_path}")
                    _write_line(out, SOURCE_SEPARATOR)

                content = reader.read_file(file.path)
                if remove_empty_lines:
                    content = strip_empty_lines(content)

                _write_line(out, content)
                _write_line(out)
                _write_line(out)

            progress.on_complete(len(files))
    except PermissionError as e:
        raise FileWriteError(
            message=f"No write permissions at location: {output.parent}",
            file_path=str(output),
            original_exception=e,
        ) from e
    except FileNotFoundError as e:
        raise FileWriteError(
            message=f"Directory not found: {output.parent}",
            file_path=str(output),
            original_exception=e,
        ) from e
    except OSError as e:
        raise FileWriteError(
            message=f"Error writing file: {e}",
            file_path=str(output),
            original_exception=e,
        ) from e
    except FileReadError as e:
        raise FileWriteError(
            message=f"Error writing file: {e.message}",
            file_path=str(output),
            original_exception=e,
        ) from e

    return output
