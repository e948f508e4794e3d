"""
Custom exception classes for the fib CLI.

This module defines application-specific exceptions raised while validating a
bundle request, discovering files and writing the bundle or response file.
They carry structured information (message, offending path, underlying
exception) so the CLI layer can render a helpful message and pick an exit code.
"""

from typing import Optional


class UserInputError(Exception):
    """
    Base exception for invalid bundle requests.

    Raised before any filesystem access when the request itself cannot be
    satisfied (missing output name, no languages, no usable extensions).

    Attributes:
        message: A human-readable error message describing what went wrong.
    """

    def __init__(self, message: Optional[str] = None):
        self.message = message or "Invalid input"
        super().__init__(self.message)


class EmptyOutputNameError(UserInputError):
    """Raised when the output file name is empty or only whitespace."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Output file name cannot be empty")


class NoLanguagesSpecifiedError(UserInputError):
    """Raised when the request does not name a single language."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Please specify at least one language")


class NoValidExtensionsError(UserInputError):
    """
    Raised when none of the requested languages resolves to an extension.

    Attributes:
        supported: The language identifiers that would have been accepted.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        supported: Optional[list[str]] = None,
    ):
        super().__init__(message or "No valid extensions found for selected languages")
        self.supported = supported or []


class EmptyInventoryError(Exception):
    """
    Raised when no files are found matching the requested languages.

    This is a warning condition rather than a failure: the run ends without
    writing a bundle, and the CLI exits successfully.

    Attributes:
        message: A human-readable message explaining that nothing matched.
    """

    def __init__(self, message: Optional[str] = None):
        self.message = message or "No matching code files found"
        super().__init__(self.message)


class FileIOError(Exception):
    """
    Base exception for file I/O errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file involved, if known.
        original_exception: The underlying exception that caused this error, if any.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "An error occurred during file I/O operation"
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception


class InvalidFilePathError(FileIOError):
    """Raised when a path cannot be used for the requested operation."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Invalid file path provided",
            file_path=file_path,
            original_exception=original_exception,
        )


class FileReadError(FileIOError):
    """Raised when a discovered file cannot be read."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Failed to read file",
            file_path=file_path,
            original_exception=original_exception,
        )


class FileWriteError(FileIOError):
    """
    Raised when the bundle or response file cannot be written.

    Permission problems, missing directories and I/O failures in the middle of
    a write are all reported through this single type.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Failed to write to file",
            file_path=file_path,
            original_exception=original_exception,
        )


class OutputDirectoryError(FileWriteError):
    """Raised when the parent directory of the output file cannot be created."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Cannot create output directory",
            file_path=file_path,
            original_exception=original_exception,
        )


class ResponseFileSyntaxError(FileReadError):
    """Raised when a response file line cannot be split into tokens (e.g. an unclosed quote)."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Invalid response file",
            file_path=file_path,
            original_exception=original_exception,
        )
