"""
Interactive user prompts for the fib CLI application.

This module implements the ``create-rsp`` wizard: it asks the same questions a
``bundle`` invocation answers through options (languages, output file, source
notes, sort order, empty-line removal, author) plus the name of the response
file to create, and turns the answers into ResponseFileOptions.

The module uses the `inquirer` library for interactive prompts and `rich` for
formatted terminal output.

Dependencies:
    - inquirer: Interactive terminal prompts
    - rich: Terminal formatting and colors
    - typer: CLI framework integration
"""

from pathlib import Path
import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from rich import print as pr
from rich.markup import escape
import typer

from constants import ALL_LANGUAGES, DEFAULT_OUTPUT_FILE, DEFAULT_RESPONSE_FILE
from core.response_file import split_languages
from models import ResponseFileOptions, SortMode


def build_questions() -> list:
    """Return the wizard's questions, in the order they are asked."""
    return [
        inquirer.Text(
            "languages",
            message=f"Which languages should be bundled? (e.g. csharp, java, python or '{ALL_LANGUAGES}')",
            default=ALL_LANGUAGES,
        ),
        inquirer.Text(
            "output",
            message="Output file name",
            default=DEFAULT_OUTPUT_FILE,
        ),
        inquirer.Confirm(
            "include_note",
            message="Add a note with the source path of each file?",
            default=False,
        ),
        inquirer.List(
            "sort",
            message="How should the files be sorted?",
            choices=[
                ("By name", SortMode.NAME.value),
                ("By type (extension, then name)", SortMode.TYPE.value),
            ],
            default=SortMode.NAME.value,
        ),
        inquirer.Confirm(
            "remove_empty_lines",
            message="Remove empty lines?",
            default=False,
        ),
        inquirer.Text(
            "author",
            message="Author name (optional, press [ENTER] to skip)",
            default="",
        ),
        inquirer.Text(
            "file_name",
            message="Response file name",
            default=DEFAULT_RESPONSE_FILE,
        ),
    ]


def answers_to_options(answers: dict) -> ResponseFileOptions:
    """
    Convert raw inquirer answers into ResponseFileOptions.

    Blank answers fall back to the same defaults the prompts display.

    Args:
        answers: The dictionary returned by ``inquirer.prompt``.

    Returns:
        ResponseFileOptions: The normalized answers.
    """
    output = (answers.get("output") or "").strip() or DEFAULT_OUTPUT_FILE
    return ResponseFileOptions(
        languages=tuple(split_languages(answers.get("languages") or "")),
        output=output,
        include_note=bool(answers.get("include_note")),
        sort=SortMode.parse(answers.get("sort")),
        remove_empty_lines=bool(answers.get("remove_empty_lines")),
        author=(answers.get("author") or "").strip(),
        file_name=(answers.get("file_name") or "").strip(),
    )


def ask_response_file_options() -> ResponseFileOptions:
    """
    Run the create-rsp wizard.

    Returns:
        ResponseFileOptions: The user's answers.

    Raises:
        typer.Exit: If the user cancels the prompt (Ctrl+C).
    """
    pr("\n[bold green]=== Create a response file ===[/bold green]")
    pr("Answer the following questions to build a ready-to-run command.\n")

    answers = inquirer.prompt(build_questions(), theme=GreenPassion())

    if not answers:
        raise typer.Exit(code=1)

    return answers_to_options(answers)


def print_response_file_summary(rsp_path: Path, content: str, prog_name: str) -> None:
    """
    Show where the response file was written, its content and how to run it.

    Args:
        rsp_path: Location of the response file.
        content: The text that was written.
        prog_name: Executable name used in the run hint.
    """
    pr("\n[green]✅ Response file created successfully![/green]")
    pr(f"\n📄 File location: [yellow]{escape(str(rsp_path))}[/yellow]")
    pr("\n📋 Command content:")
    pr("─" * 37)
    pr(f"[cyan]{escape(content.rstrip())}[/cyan]")
    pr("─" * 37)
    pr("\n💡 To run the command, type:")
    pr(f"   [yellow]{escape(prog_name)} @{escape(rsp_path.name)}[/yellow]")
