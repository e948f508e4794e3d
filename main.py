"""
fib CLI Entry Point.

This module implements the command-line interface of fib, a tool that bundles
the source files of selected programming languages into a single text file.

Commands:

1.  **bundle**: Scans the current directory (recursively, skipping build output,
    dependency and VCS folders), keeps the files whose extension belongs to the
    requested languages, sorts them by name or by type and concatenates them into
    one output file, optionally with source notes, an author header and without
    empty lines.
2.  **create-rsp**: Asks the same questions interactively and saves the answers
    as a response file, which can be replayed with ``fib @commands.rsp``.

Usage:
    $ fib bundle --language python javascript --output out/bundle.txt --note
    $ fib create-rsp
    $ fib @commands.rsp

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, and progress visualization.
    - Inquirer: Interactive terminal user prompts.
"""

from pathlib import Path
import re
import shlex
import sys
from typing import Annotated

import typer
from rich import print as pr
from rich.markup import escape

from core.exceptions import (
    EmptyInventoryError,
    FileIOError,
    NoValidExtensionsError,
    ResponseFileSyntaxError,
    UserInputError,
)
from core.file_io import FilesystemFileReader
from core.pipeline import run_bundle
from core.response_file import build_response_file, write_response_file
from models import BundleRequest, SortMode, SupportedLanguage
from ui.console import RichReporter
from ui.progress_display import RichProgressDisplay
from ui.prompts import ask_response_file_options, print_response_file_summary

PROG_NAME = "fib"
LANGUAGE_FLAGS = ("--language", "-l")
_LANGUAGE_SEPARATORS = re.compile(r"[,;]")

app = typer.Typer(
    help="File Bundler CLI - bundle code files into a single file.",
    no_args_is_help=True,
)


@app.command("bundle")
def bundle(
    language: Annotated[
        list[str],
        typer.Option(
            "--language",
            "-l",
            help=f"Languages to bundle, or 'all'. Available: {', '.join(SupportedLanguage)}",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Name of the output file"),
    ],
    note: Annotated[
        bool,
        typer.Option("--note", "-n", help="Add a comment with the source path of each file"),
    ] = False,
    sort: Annotated[
        str,
        typer.Option("--sort", "-s", help="Sort order: 'name' or 'type'"),
    ] = SortMode.NAME.value,
    remove_empty_lines: Annotated[
        bool,
        typer.Option("--remove-empty-lines", "-r", help="Remove empty lines"),
    ] = False,
    author: Annotated[
        str,
        typer.Option("--author", "-a", help="Author name written in the bundle header"),
    ] = "",
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            exists=True,  # Typer throws error if path doesn't exist
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Directory to scan. Defaults to the current working directory.",
        ),
    ] = None,
):
    """
    Bundle code files into a single file.

    Raises:
        typer.Exit: With code 1 on invalid input or when the bundle cannot be
            written. Finding no matching files is only a warning.
    """
    reporter = RichReporter()
    base_directory = path if path is not None else Path.cwd()

    reporter.info("Starting bundling process...\n")

    sort_mode = SortMode.parse(sort)
    if sort_mode.value != sort.strip().lower():
        reporter.warning(f"Unknown sort mode '{sort}', sorting by name.")

    request = BundleRequest(
        languages=tuple(split_language_values(language)),
        output=output,
        include_note=note,
        sort=sort_mode,
        remove_empty_lines=remove_empty_lines,
        author=author,
    )

    try:
        result = run_bundle(
            request,
            base_directory,
            reporter=reporter,
            progress_display=RichProgressDisplay(),
        )
    except NoValidExtensionsError as e:
        reporter.error(f"Error: {e.message}.")
        pr(f"💡 Supported languages: {', '.join(e.supported)}")
        raise typer.Exit(code=1) from e
    except UserInputError as e:
        reporter.error(f"Error: {e.message}.")
        raise typer.Exit(code=1) from e
    except EmptyInventoryError as e:
        reporter.warning(f"{e.message}.")
        return
    except FileIOError as e:
        print_file_io_err(e)
        return
    except Exception as e:  # noqa: BLE001
        # Catch-all for any unexpected errors - ensures users always see
        # a friendly message instead of a raw Python stack trace
        print_unexpected_err(e)
        return

    reporter.success("Bundling completed successfully!")
    reporter.info(f"📄 File saved at: {result.output}")


@app.command("create-rsp")
def create_rsp():
    """
    Create a response file with a ready-made bundle command.
    """
    options = ask_response_file_options()

    try:
        rsp_path = write_response_file(options, Path.cwd())
    except FileIOError as e:
        print_file_io_err(e)
        return

    print_response_file_summary(rsp_path, build_response_file(options), PROG_NAME)


def split_language_values(values: list[str]) -> list[str]:
    """
    Flatten ``--language`` values, splitting "python,java" style entries.

    Args:
        values: Raw option values.

    Returns:
        list[str]: Non-empty, trimmed language identifiers.
    """
    return [
        part.strip()
        for value in values
        for part in _LANGUAGE_SEPARATORS.split(value)
        if part.strip()
    ]


def read_response_file(rsp_path: Path) -> list[str]:
    """
    Read the tokens stored in a response file.

    Every non-blank line is split like a shell command line, so quoted values
    ("--author \\"Jane Doe\\"") stay together. Lines starting with "#" are
    comments.

    Args:
        rsp_path: Path of the response file.

    Returns:
        list[str]: The tokens, in file order.

    Raises:
        FileReadError: If the file cannot be read.
        ResponseFileSyntaxError: If a line has an unbalanced quote or a
            trailing escape.
    """
    content = FilesystemFileReader().read_file(rsp_path)
    tokens: list[str] = []
    for line_number, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            tokens.extend(shlex.split(line))
        except ValueError as e:
            raise ResponseFileSyntaxError(
                message=f"Line {line_number}: {e}",
                file_path=str(rsp_path),
                original_exception=e,
            ) from e
    return tokens


def expand_response_files(args: list[str]) -> list[str]:
    """Replace every ``@file`` argument with the tokens of that response file."""
    expanded: list[str] = []
    for arg in args:
        if arg.startswith("@") and len(arg) > 1:
            expanded.extend(read_response_file(Path(arg[1:])))
        else:
            expanded.append(arg)
    return expanded


def expand_language_values(args: list[str]) -> list[str]:
    """
    Rewrite ``--language a b c`` into ``--language a --language b --language c``.

    Click options take exactly one value per occurrence; this keeps the
    "several values after one flag" form (also used by response files) working.

    Args:
        args: Command-line tokens.

    Returns:
        list[str]: Tokens Click can parse.
    """
    result: list[str] = []
    pending_flag: str | None = None
    consumed = False

    for arg in args:
        if arg in LANGUAGE_FLAGS:
            if pending_flag and not consumed:
                result.append(pending_flag)
            pending_flag, consumed = arg, False
            continue

        if pending_flag and not arg.startswith("-"):
            result.extend([pending_flag, arg])
            consumed = True
            continue

        if pending_flag and not consumed:
            result.append(pending_flag)
        pending_flag = None
        result.append(arg)

    if pending_flag and not consumed:
        result.append(pending_flag)

    return result


def print_file_io_err(e: FileIOError) -> None:
    """
    Displays a user-friendly error message for file I/O operation failures.

    Args:
        e (FileIOError): The exception that was raised, containing error details
            and file path information.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("\n❌ [bold red]File I/O Error[/bold red]")
    pr(f"{escape(e.message)}")
    if e.file_path:
        pr(f"File path: [yellow]{escape(e.file_path)}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Check file permissions and available disk space.")
    if e.original_exception:
        pr(f"\nTechnical details: {escape(str(e.original_exception))}")

    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("\n❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while bundling.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {escape(str(e))}")
    if e.__cause__:
        pr(f"Caused by: {escape(str(e.__cause__))}")

    raise typer.Exit(code=1) from e


def run(argv: list[str] | None = None) -> None:
    """
    Console-script entry point: expands response files, then runs the Typer app.
    """
    args = sys.argv[1:] if argv is None else argv
    try:
        args = expand_response_files(args)
    except FileIOError as e:
        pr(f"[red]Error:[/red] Cannot read response file: {escape(e.file_path or '')}")
        if isinstance(e, ResponseFileSyntaxError):
            pr(escape(e.message))
        raise SystemExit(1) from e

    app(args=expand_language_values(args), prog_name=PROG_NAME)


if __name__ == "__main__":
    run()
