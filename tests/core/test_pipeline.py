"""
Tests for the pipeline module using pytest.

Tests cover:
- run_bundle: input validation before filesystem access, unknown-language
  warnings, the "no matching files" warning path, end-to-end scenarios
"""

import os
from pathlib import Path

import pytest

from constants import SOURCE_SEPARATOR
from core.exceptions import (
    EmptyInventoryError,
    EmptyOutputNameError,
    NoLanguagesSpecifiedError,
    NoValidExtensionsError,
)
from core.pipeline import run_bundle
from core.registry import all_extensions
from models import BundleRequest, SortMode

NL = os.linesep


# ============================================================================
# Validation
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("output", [Path(""), Path("   ")])
def test_run_bundle_empty_output_name(project_root, output, mocker):
    """A blank output name fails before anything is scanned."""
    mock_discover = mocker.patch("core.pipeline.discover_files")

    with pytest.raises(EmptyOutputNameError):
        run_bundle(BundleRequest(("python",), output), project_root)

    mock_discover.assert_not_called()


@pytest.mark.unit
def test_run_bundle_no_languages(project_root, mocker):
    """An empty language list fails before anything is scanned."""
    mock_discover = mocker.patch("core.pipeline.discover_files")

    with pytest.raises(NoLanguagesSpecifiedError):
        run_bundle(BundleRequest((), Path("out.txt")), project_root)

    mock_discover.assert_not_called()


@pytest.mark.unit
def test_run_bundle_no_valid_extensions(project_root, reporter, mocker):
    """Only unknown languages is fatal and discovery never runs."""
    mock_discover = mocker.patch("core.pipeline.discover_files")

    with pytest.raises(NoValidExtensionsError):
        run_bundle(
            BundleRequest(("cobol", "fortran"), Path("out.txt")),
            project_root,
            reporter=reporter,
        )

    mock_discover.assert_not_called()
    assert reporter.of_level("warning") == [
        "Unknown language: cobol",
        "Unknown language: fortran",
    ]


# ============================================================================
# No matching files
# ============================================================================


@pytest.mark.unit
def test_run_bundle_no_matching_files_writes_nothing(make_tree):
    """Zero matches raises EmptyInventoryError and creates no artifact."""
    root = make_tree({"readme.txt": "hello"})
    output = root / "out" / "bundle.txt"

    with pytest.raises(EmptyInventoryError):
        run_bundle(BundleRequest(("python",), output), root)

    assert not output.exists()
    assert not output.parent.exists()


@pytest.mark.unit
def test_run_bundle_no_matching_files_leaves_existing_output(make_tree):
    """A previous artifact is not modified when nothing matches."""
    root = make_tree({"bundle.txt": "previous run"})

    with pytest.raises(EmptyInventoryError):
        run_bundle(BundleRequest(("java",), Path("bundle.txt")), root)

    assert (root / "bundle.txt").read_text(encoding="utf-8") == "previous run"


# ============================================================================
# End-to-end scenarios
# ============================================================================


@pytest.mark.unit
def test_run_bundle_python_scenario(make_tree, read_output, reporter):
    """a.py then sub/c.py; b.txt and node_modules/d.py are left out."""
    root = make_tree(
        {
            "a.py": "A",
            "b.txt": "B",
            "sub/c.py": "C",
            "node_modules/d.py": "D",
        }
    )

    result = run_bundle(
        BundleRequest(("python",), Path("bundle.txt"), sort=SortMode.NAME),
        root,
        reporter=reporter,
    )

    assert result.output == root / "bundle.txt"
    assert [f.relative_to(root) for f in result.files] == ["a.py", "sub/c.py"]
    assert read_output(result.output) == f"A{NL}{NL}{NL}C{NL}{NL}{NL}"
    assert reporter.of_level("info") == [
        f"Scanning directory: {root}",
        "Found 2 files",
    ]


@pytest.mark.unit
def test_run_bundle_all_languages_counts_distinct_files(make_tree):
    """'all' over one file per extension bundles each file exactly once."""
    extensions = sorted(all_extensions())
    root = make_tree({f"src/sample{ext}": ext for ext in extensions})

    result = run_bundle(BundleRequest(("all",), Path("../bundle.txt")), root)

    assert len(result.files) == len(extensions)
    assert len({f.path for f in result.files}) == len(extensions)


@pytest.mark.unit
def test_run_bundle_r_covers_upper_case_extension(make_tree):
    """Language 'r' bundles both analysis.R and script.r."""
    root = make_tree({"analysis.R": "x <- 1", "script.r": "y <- 2", "notes.txt": ""})

    result = run_bundle(BundleRequest(("r",), Path("../out.txt")), root)

    assert sorted(f.name for f in result.files) == ["analysis.R", "script.r"]


@pytest.mark.unit
def test_run_bundle_sort_by_type(make_tree):
    """Type sort groups extensions, then orders by name."""
    root = make_tree({"b.py": "", "a.py": "", "z.js": "", "m.js": ""})

    result = run_bundle(
        BundleRequest(("python", "javascript"), Path("../out.txt"), sort=SortMode.TYPE),
        root,
    )

    assert [f.name for f in result.files] == ["m.js", "z.js", "a.py", "b.py"]


@pytest.mark.unit
def test_run_bundle_notes_relative_to_scan_root(make_tree, read_output):
    """Source notes name each file relative to the scanned directory."""
    root = make_tree({"pkg/mod.rb": "puts 1"})

    result = run_bundle(
        BundleRequest(("ruby",), Path("../out.txt"), include_note=True), root
    )

    assert read_output(result.output) == (
        f"// Source: pkg/mod.rb{NL}{SOURCE_SEPARATOR}{NL}puts 1{NL}{NL}{NL}"
    )


@pytest.mark.unit
def test_run_bundle_creates_output_directory(make_tree, read_output):
    """A missing parent directory of the output is created."""
    root = make_tree({"main.go": "package main"})

    result = run_bundle(BundleRequest(("go",), Path("dist/out/bundle.txt")), root)

    assert result.output == root / "dist" / "out" / "bundle.txt"
    assert read_output(result.output) == f"package main{NL}{NL}{NL}"


@pytest.mark.unit
def test_run_bundle_does_not_bundle_its_own_output(make_tree, read_output):
    """A previous bundle inside the scan root is not treated as input."""
    root = make_tree({"notes.md": "# Notes", "bundle.md": "old bundle"})

    result = run_bundle(BundleRequest(("markdown",), Path("bundle.md")), root)

    assert [f.name for f in result.files] == ["notes.md"]
    assert read_output(result.output) == f"# Notes{NL}{NL}{NL}"


@pytest.mark.unit
@pytest.mark.parametrize("output", ["sub/../all.md", "./all.md", "x/y/../../all.md"])
def test_run_bundle_own_output_matched_after_normalization(make_tree, read_output, output):
    """Rerunning with a non-normalized output path does not bundle the old bundle."""
    root = make_tree({"a.md": "hello\n"})
    request = BundleRequest(("markdown",), Path(output))

    run_bundle(request, root)
    result = run_bundle(request, root)

    assert result.output == root / "all.md"
    assert [f.name for f in result.files] == ["a.md"]
    assert read_output(root / "all.md") == f"hello\n{NL}{NL}{NL}"
    assert not (root / "sub").exists()


@pytest.mark.unit
def test_run_bundle_absolute_output(make_tree, tmp_path, read_output):
    """An absolute output path is used as-is."""
    root = make_tree({"a.sql": "select 1;"})
    output = tmp_path / "elsewhere" / "bundle.sql.txt"

    result = run_bundle(BundleRequest(("SQL",), output), root)

    assert result.output == output
    assert read_output(output) == f"select 1;{NL}{NL}{NL}"


@pytest.mark.unit
def test_run_bundle_full_options(make_tree, read_output, fixed_now, tracking_progress_display):
    """Header, notes and empty-line removal combine in one artifact."""
    root = make_tree({"app.kt": "fun main() {\n\n    println(1)\n}\n"})

    result = run_bundle(
        BundleRequest(
            ("kotlin",),
            Path("../out.txt"),
            include_note=True,
            remove_empty_lines=True,
            author="Dana",
        ),
        root,
        progress_display=tracking_progress_display,
        now=fixed_now,
    )

    assert read_output(result.output) == (
        f"// Bundle created by: Dana{NL}// Created on: 2024-01-15 14:30:00{NL}{NL}"
        f"// Source: app.kt{NL}{SOURCE_SEPARATOR}{NL}"
        f"fun main() {{{NL}    println(1){NL}}}{NL}{NL}{NL}"
    )
    assert ("file", "app.kt") in tracking_progress_display.calls


@pytest.mark.unit
def test_run_bundle_with_warnings_still_bundles(make_tree, reporter):
    """Unknown languages are warned about but do not stop the run."""
    root = make_tree({"a.py": "A"})

    result = run_bundle(
        BundleRequest(("python", "klingon"), Path("../out.txt")), root, reporter=reporter
    )

    assert [f.name for f in result.files] == ["a.py"]
    assert reporter.of_level("warning") == ["Unknown language: klingon"]
