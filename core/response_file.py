"""
Response file generation.

A response file holds a ready-made ``bundle`` invocation, one option per line,
so it can be replayed with ``fib @commands.rsp``.
"""

from pathlib import Path
import re

from constants import ALL_LANGUAGES, DEFAULT_RESPONSE_FILE, RESPONSE_FILE_SUFFIX
from core.file_io import FilesystemFileWriter, FileWriter
from models import ResponseFileOptions

_LANGUAGE_SEPARATORS = re.compile(r"[,;\s]+")
_NEEDS_QUOTING = re.compile(r"[\s\"'\\]")


def split_languages(raw: str) -> list[str]:
    """
    Split a free-form language answer ("python, java;go") into identifiers.

    Args:
        raw: Identifiers separated by commas, semicolons or whitespace.

    Returns:
        list[str]: The identifiers, or ["all"] when the answer is blank.
    """
    languages = [lang for lang in _LANGUAGE_SEPARATORS.split(raw.strip()) if lang]
    return languages or [ALL_LANGUAGES]


def normalize_file_name(name: str) -> str:
    """Default a blank name to commands.rsp and make sure it ends with .rsp."""
    name = name.strip()
    if not name:
        return DEFAULT_RESPONSE_FILE
    if not name.lower().endswith(RESPONSE_FILE_SUFFIX):
        name += RESPONSE_FILE_SUFFIX
    return name


def quote_token(value: str) -> str:
    """
    Make ``value`` a single token for the response file reader.

    Values with whitespace, quotes or backslashes are wrapped in double quotes,
    with embedded ``"`` and ``\\`` backslash-escaped, so ``shlex.split`` gives
    the original value back. Anything else is written bare.

    Args:
        value: The option value.

    Returns:
        str: The value as it appears on its response file line.
    """
    if not value or _NEEDS_QUOTING.search(value):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


def build_response_file(options: ResponseFileOptions) -> str:
    """
    Render the response file content for ``options``.

    Example output::

        bundle
        --language python java
        --output bundle.txt
        --note
        --sort type
        --author "Jane Doe"

    Args:
        options: The wizard's answers.

    Returns:
        str: One option per line, each terminated by a newline.
    """
    lines = ["bundle"]
    lines.append(
        " ".join(["--language", *(quote_token(lang.strip()) for lang in options.languages)])
    )
    lines.append(f"--output {quote_token(options.output)}")

    if options.include_note:
        lines.append("--note")

    if options.remove_empty_lines:
        lines.append("--remove-empty-lines")

    lines.append(f"--sort {options.sort}")

    author = options.author.strip()
    if author:
        lines.append(f"--author {quote_token(author)}")

    return "".join(f"{line}\n" for line in lines)


def write_response_file(
    options: ResponseFileOptions,
    directory: Path,
    writer: FileWriter | None = None,
) -> Path:
    """
    Write the response file for ``options`` into ``directory``.

    Args:
        options: The wizard's answers; ``options.file_name`` names the file.
        directory: Directory the response file is created in.
        writer: Optional writer (tests inject a MockFileWriter).

    Returns:
        Path: The path of the response file.

    Raises:
        InvalidFilePathError: If ``directory`` does not exist.
        FileWriteError: If the file cannot be written.
    """
    rsp_path = directory / normalize_file_name(options.file_name)
    if writer is None:
        writer = FilesystemFileWriter.from_path(rsp_path)
    writer.write_file(build_response_file(options))
    return rsp_path
