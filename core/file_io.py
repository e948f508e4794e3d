from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Protocol, TextIO

from core.exceptions import (
    FileReadError,
    FileWriteError,
    InvalidFilePathError,
    OutputDirectoryError,
)


class FileReader(Protocol):
    """
    Protocol defining the interface for file reading operations.

    This protocol specifies methods for reading files, allowing different
    implementations for production (filesystem) and testing (mocks).
    """

    def read_file(self, file_path: Path) -> str:
        """
        Read the full text content of a file.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content with its original line endings.
        """


class FileWriter(Protocol):
    """
    Protocol defining the interface for whole-file writes.

    This protocol specifies methods for writing data to files, allowing different
    implementations for production (filesystem) and testing (mocks).
    """

    file_path: Path | None

    def write_file(self, data: str) -> None:
        """
        Replace the content of the file with ``data``.

        Args:
            data: String data to write.
        """


class FilesystemFileReader:

    def read_file(self, file_path: Path) -> str:
        """
        Read the text content of a file as UTF-8.

        A leading byte-order mark is dropped and invalid UTF-8 sequences are
        replaced. Line endings are returned untouched (``newline=""``) so callers
        see "\\r\\n", "\\r" and "\\n" exactly as they are on disk.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If an I/O error occurs while reading the file.
        """
        try:
            with file_path.open(
                "r", encoding="utf-8-sig", errors="replace", newline=""
            ) as f:
                return f.read()
        except OSError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class FilesystemFileWriter:
    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path

    @classmethod
    def from_path(
        cls, file_path: Path, create_parents: bool = False
    ) -> "FilesystemFileWriter":
        """
        Create a writer instance with an explicit file path.

        Args:
            file_path: The path to the file to manage.
            create_parents: Create the parent directory (recursively) when it
                does not exist yet.

        Returns:
            FilesystemFileWriter instance configured for the given path.

        Raises:
            InvalidFilePathError: If the parent directory doesn't exist and
                ``create_parents`` is False.
            OutputDirectoryError: If the parent directory cannot be created.
        """
        parent = file_path.parent
        if not parent.exists():
            if not create_parents:
                raise InvalidFilePathError(
                    message=f"Parent directory does not exist: {parent}",
                    file_path=str(file_path),
                )
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputDirectoryError(
                    message=f"Cannot create directory: {parent}. {e}",
                    file_path=str(file_path),
                    original_exception=e,
                ) from e

        return cls(file_path)

    def write_file(self, data: str) -> None:
        """
        Writes data to the output file as UTF-8, truncating existing content.

        Args:
            data: String data to write

        Raises:
            InvalidFilePathError: If file path is not set.
            FileWriteError: If writing to the file fails.
        """
        if self.file_path is None:
            raise InvalidFilePathError("No file path set. Use a factory method first.")

        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            raise FileWriteError(
                message=f"Failed to write to file: {self.file_path}",
                file_path=str(self.file_path),
                original_exception=e,
            ) from e

    @contextmanager
    def open_stream(self) -> Iterator[TextIO]:
        """
        Open the file for streaming writes, truncating existing content.

        The stream is UTF-8 without a byte-order mark and performs no newline
        translation: the caller decides every line terminator. The handle is
        closed (and flushed) when the ``with`` block exits, whatever the reason.

        Raises:
            InvalidFilePathError: If file path is not set.
            OSError: Propagated as-is; callers map it to their own error type.
        """
        if self.file_path is None:
            raise InvalidFilePathError("No file path set. Use a factory method first.")

        with open(self.file_path, "w", encoding="utf-8", newline="") as f:
            yield f


class MockFileReader:
    """
    Mock implementation of FileReader for testing.

    Returns configurable file contents, allowing tests to control file reading
    behavior without requiring filesystem operations or actual file I/O.
    """

    def __init__(
        self,
        return_value: str | None = None,
        read_file_fn: Callable[[Path], str] | None = None,
    ):
        """
        Initialize MockFileReader with configurable reading behavior.

        Args:
            return_value: If provided, always returns this value regardless of input.
                Takes precedence over read_file_fn if both are provided.
            read_file_fn: Optional callable that takes a file path and returns file content.
                If both are None, defaults to returning empty string.

        Attributes (for test inspection):
            read_file_calls: List of file paths passed to read_file()
        """
        self.return_value = return_value
        self.read_file_fn = read_file_fn

        self.read_file_calls: list[Path] = []

    def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(file_path)
        if self.return_value is not None:
            return self.return_value
        if self.read_file_fn is not None:
            return self.read_file_fn(file_path)
        return ""


class MockFileWriter:
    """
    Mock implementation of FileWriter for testing.

    Tracks write calls and keeps the last written content in memory.

    Attributes (for test inspection):
        write_file_calls: List of data strings passed to write_file()
        written_data: The content the file would hold after those calls.
    """

    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path
        self.write_file_calls: list[str] = []
        self.written_data: str = ""

    def write_file(self, data: str) -> None:
        self.write_file_calls.append(data)
        self.written_data = data
