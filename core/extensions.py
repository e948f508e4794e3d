"""
Extension resolution.

Turns the languages requested by the user into the flat set of extensions the
discoverer matches against.
"""

from typing import Sequence

from constants import ALL_LANGUAGES
from core.exceptions import NoLanguagesSpecifiedError, NoValidExtensionsError
from core.registry import all_extensions, get_extensions, supported_language_names
from ui.console import NoOpReporter, Reporter


def resolve_extensions(
    languages: Sequence[str], reporter: Reporter | None = None
) -> frozenset[str]:
    """
    Resolve requested language identifiers into a deduplicated extension set.

    If any identifier is "all" (case-insensitive), every registered extension is
    returned and the other identifiers are ignored. Otherwise unknown identifiers
    are reported as warnings and skipped.

    Args:
        languages: Requested language identifiers.
        reporter: Optional reporter for unknown-language warnings. Defaults to
            a NoOpReporter.

    Returns:
        frozenset[str]: The union of the extensions of every known identifier.

    Raises:
        NoLanguagesSpecifiedError: If ``languages`` is empty.
        NoValidExtensionsError: If no identifier resolved to any extension.
    """
    if not languages:
        raise NoLanguagesSpecifiedError()

    reporter = reporter if reporter is not None else NoOpReporter()

    if any(lang.strip().lower() == ALL_LANGUAGES for lang in languages):
        return all_extensions()

    extensions: set[str] = set()
    for lang in languages:
        found = get_extensions(lang)
        if found is None:
            reporter.warning(f"Unknown language: {lang}")
            continue
        extensions.update(found)

    if not extensions:
        supported = supported_language_names()
        raise NoValidExtensionsError(
            message="No valid extensions found for selected languages",
            supported=supported,
        )

    return frozenset(extensions)
