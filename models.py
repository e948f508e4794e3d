"""
Type definitions and data models used across the fib CLI application.

This module contains the shared enums and immutable request/result structures
that flow between the CLI layer, the wizard and the bundling pipeline.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class SupportedLanguage(StrEnum):
    """
    Enumeration of language identifiers understood by the bundler.

    The enum values are the lower-case identifiers users type on the command line
    (``--language python``). They are used as keys in the LANGUAGE_EXTENSIONS
    mapping to retrieve the file extensions that belong to each language.
    """

    CSHARP = "csharp"
    JAVA = "java"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    HTML = "html"
    CSS = "css"
    CPP = "cpp"
    C = "c"
    PHP = "php"
    RUBY = "ruby"
    GO = "go"
    RUST = "rust"
    SQL = "sql"
    SWIFT = "swift"
    KOTLIN = "kotlin"
    R = "r"
    PERL = "perl"
    SHELL = "shell"
    POWERSHELL = "powershell"
    XML = "xml"
    JSON = "json"
    YAML = "yaml"
    MARKDOWN = "markdown"


class SortMode(StrEnum):
    """
    Ordering policy applied to discovered files before they are bundled.

    Attributes:
        NAME: Order by file name only.
        TYPE: Order by extension first, then by file name.
    """

    NAME = "name"
    TYPE = "type"

    @classmethod
    def parse(cls, value: "str | SortMode | None") -> "SortMode":
        """
        Convert a user supplied value into a SortMode.

        Matching is case-insensitive. Anything that is not a known mode
        falls back to NAME.

        Args:
            value: The raw sort mode (e.g. "Type", "name", None).

        Returns:
            SortMode: The matching mode, or SortMode.NAME.
        """
        if isinstance(value, SortMode):
            return value
        normalized = (value or "").strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        return cls.NAME


@dataclass(frozen=True)
class BundleRequest:
    """
    Immutable configuration for a single bundling run.

    Attributes:
        languages: Requested language identifiers, or ("all",).
        output: Path of the bundle file to produce.
        include_note: Prefix each file with a comment giving its relative path.
        sort: Ordering policy for the bundled files.
        remove_empty_lines: Drop empty and whitespace-only lines from each file.
        author: Optional author name written in the bundle header.
    """

    languages: tuple[str, ...]
    output: Path
    include_note: bool = False
    sort: SortMode = SortMode.NAME
    remove_empty_lines: bool = False
    author: str = ""


@dataclass(frozen=True)
class ResponseFileOptions:
    """
    Answers collected by the create-rsp wizard.

    Attributes:
        languages: Language identifiers to pass to ``--language``.
        output: Output file name for the bundle command.
        include_note: Whether ``--note`` is emitted.
        sort: Value emitted for ``--sort``.
        remove_empty_lines: Whether ``--remove-empty-lines`` is emitted.
        author: Value emitted for ``--author`` (omitted when blank).
        file_name: Name of the response file to create.
    """

    languages: tuple[str, ...]
    output: str
    include_note: bool = False
    sort: SortMode = SortMode.NAME
    remove_empty_lines: bool = False
    author: str = ""
    file_name: str = "commands.rsp"
