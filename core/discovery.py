"""
File discovery.

Walks a directory tree and collects the files whose extension belongs to the
requested set, skipping build output, dependency and VCS directories by name.
"""

import os
from pathlib import Path
from typing import Iterable

from constants import EXCLUDED_DIRECTORIES
from core.models import DiscoveredFile, file_extension


def is_excluded_directory(name: str) -> bool:
    """
    Check whether a directory's bare name is on the exclusion list.

    Args:
        name: The directory name (not a path), e.g. "node_modules" or "BIN".

    Returns:
        bool: True if the directory must not be descended into.
    """
    return name.lower() in EXCLUDED_DIRECTORIES


def discover_files(root: Path, extensions: Iterable[str]) -> list[DiscoveredFile]:
    """
    Recursively collect files under ``root`` whose extension is requested.

    The walk is depth-first and uses an explicit stack so very deep trees cannot
    exhaust the interpreter's recursion limit. Excluded directories are skipped
    wherever they appear. Directories that cannot be listed (permission denied
    and similar) are skipped silently and the walk carries on with their siblings.

    Symlinks are followed the way ``os.DirEntry.is_dir``/``is_file`` follow them;
    there is no cycle detection.

    Args:
        root: Directory to start from.
        extensions: Extensions to match, including the leading dot. Matching is
            case-insensitive.

    Returns:
        list[DiscoveredFile]: Matching files in traversal order. The order carries
        no meaning; callers sort the result.
    """
    wanted = frozenset(ext.lower() for ext in extensions)
    found: list[DiscoveredFile] = []
    stack: list[Path] = [Path(root).absolute()]

    while stack:
        directory = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError:
            # Unreadable directory: skip this subtree only
            continue

        subdirectories: list[Path] = []
        for entry in entries:
            try:
                if entry.is_file():
                    if file_extension(entry.name).lower() in wanted:
                        found.append(DiscoveredFile(directory / entry.name))
                elif entry.is_dir():
                    if not is_excluded_directory(entry.name):
                        subdirectories.append(directory / entry.name)
            except OSError:
                continue

        # Reversed so the first subdirectory listed is the first one visited
        stack.extend(reversed(subdirectories))

    return found
