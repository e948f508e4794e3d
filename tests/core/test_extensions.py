"""
Tests for the extension resolver.

Tests cover:
- resolve_extensions: the "all" sentinel, unknown-language warnings,
  deduplication and the two fatal input errors
"""

import pytest

from core.exceptions import NoLanguagesSpecifiedError, NoValidExtensionsError
from core.extensions import resolve_extensions
from core.registry import all_extensions, supported_language_names


@pytest.mark.unit
def test_resolve_empty_input_raises():
    """An empty language list is a user input error."""
    with pytest.raises(NoLanguagesSpecifiedError):
        resolve_extensions([])


@pytest.mark.unit
def test_resolve_single_language(reporter):
    """A known language contributes its extensions and nothing is reported."""
    result = resolve_extensions(["typescript"], reporter)

    assert result == {".ts", ".tsx"}
    assert reporter.messages == []


@pytest.mark.unit
@pytest.mark.parametrize("sentinel", ["all", "ALL", " All "])
def test_resolve_all_returns_every_extension(sentinel):
    """'all' (any case) selects every registered extension."""
    assert resolve_extensions([sentinel]) == all_extensions()


@pytest.mark.unit
def test_resolve_all_ignores_other_entries(reporter):
    """Other entries, even unknown ones, are ignored once 'all' is present."""
    result = resolve_extensions(["cobol", "python", "all"], reporter)

    assert result == all_extensions()
    assert reporter.of_level("warning") == []


@pytest.mark.unit
def test_resolve_unknown_languages_are_warned_and_skipped(reporter):
    """Unknown identifiers are reported and skipped; known ones still count."""
    result = resolve_extensions(["python", "cobol", "fortran"], reporter)

    assert result == {".py"}
    assert reporter.of_level("warning") == [
        "Unknown language: cobol",
        "Unknown language: fortran",
    ]


@pytest.mark.unit
def test_resolve_only_unknown_raises(reporter):
    """Only unknown identifiers leaves nothing to match: fatal."""
    with pytest.raises(NoValidExtensionsError) as exc_info:
        resolve_extensions(["cobol"], reporter)

    assert exc_info.value.supported == supported_language_names()
    assert reporter.of_level("warning") == ["Unknown language: cobol"]


@pytest.mark.unit
def test_resolve_deduplicates_shared_extensions():
    """'.h' from both C and C++ appears once."""
    result = resolve_extensions(["c", "cpp"])

    assert result == {".c", ".h", ".cpp", ".cc", ".cxx", ".hpp", ".hxx"}


@pytest.mark.unit
def test_resolve_trims_and_folds_case():
    """Identifiers are trimmed and case-folded before lookup."""
    assert resolve_extensions(["  YAML "]) == {".yaml", ".yml"}


@pytest.mark.unit
def test_resolve_without_reporter_does_not_fail():
    """The reporter is optional."""
    assert resolve_extensions(["python", "nope"]) == {".py"}
