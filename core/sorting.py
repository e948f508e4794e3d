"""
Deterministic ordering of discovered files.
"""

from typing import Iterable

from core.models import DiscoveredFile
from models import SortMode


def _by_type(file: DiscoveredFile) -> tuple[str, str, str]:
    return (file.extension, file.name, str(file.path))


def _by_name(file: DiscoveredFile) -> tuple[str, str]:
    return (file.name, str(file.path))


def sort_files(
    files: Iterable[DiscoveredFile], mode: SortMode | str | None = SortMode.NAME
) -> list[DiscoveredFile]:
    """
    Order files for bundling.

    Comparisons are ordinal (code point) string comparisons. The full path is
    the final tie-breaker so two files with the same name in different
    directories always come out in the same order.

    Args:
        files: The files to order.
        mode: SortMode.TYPE groups by extension and then orders by name;
            SortMode.NAME (also used for unrecognized values) orders by name.

    Returns:
        list[DiscoveredFile]: A new, sorted list.
    """
    if SortMode.parse(mode) == SortMode.TYPE:
        return sorted(files, key=_by_type)
    return sorted(files, key=_by_name)
