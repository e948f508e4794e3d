"""
Core data models for the discovery and bundling pipeline.

This module defines the data structures used to represent discovered files and
the outcome of a bundling run.
"""

from dataclasses import dataclass
import os
from pathlib import Path


def file_extension(name: str) -> str:
    """
    Return the extension of a file name, including the leading dot.

    The extension starts at the last dot of the name, so dot-files such as
    ".json" have the extension ".json". A name without a dot, or ending with
    one, has no extension.

    Args:
        name: A bare file name (no directory part).

    Returns:
        str: The extension (e.g. ".py"), or an empty string.
    """
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:]


@dataclass(frozen=True)
class DiscoveredFile:
    """
    A file found during a single discovery pass.

    Only the path is stored; the content is read lazily by the bundle writer.

    Attributes:
        path: Absolute path to the file.

    Computed Attributes:
        name: The bare file name including extension (e.g. "main.py").
        extension: The extension as it appears on disk (e.g. ".py", ".R").
    """

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return file_extension(self.path.name)

    def relative_to(self, base_directory: Path) -> str:
        """Path of this file relative to ``base_directory``, with forward slashes."""
        return Path(os.path.relpath(self.path, base_directory)).as_posix()


@dataclass(frozen=True)
class BundleResult:
    """
    Outcome of a successful bundling run.

    Attributes:
        output: Absolute path of the written bundle.
        files: The bundled files, in the order they were written.
    """

    output: Path
    files: tuple[DiscoveredFile, ...]
