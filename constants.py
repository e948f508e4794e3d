"""
Application-wide constants and configuration mappings.

This module defines the fixed tables the bundler works from: which file
extensions belong to each supported language, which directory names are never
scanned, and the literals that make up the bundle's annotation format.
"""

from typing import Final, Mapping
from models import SupportedLanguage


# Sentinel language identifier that selects every registered extension.
ALL_LANGUAGES: Final[str] = "all"

# Language registry. Extensions are stored lower-case because discovery matches
# them case-insensitively; several languages may claim the same extension
# (".h" belongs to both C and C++), the resolver deduplicates the union.
LANGUAGE_EXTENSIONS: Final[Mapping[SupportedLanguage, frozenset[str]]] = {
    SupportedLanguage.CSHARP: frozenset({".cs"}),
    SupportedLanguage.JAVA: frozenset({".java"}),
    SupportedLanguage.PYTHON: frozenset({".py"}),
    SupportedLanguage.JAVASCRIPT: frozenset({".js", ".jsx"}),
    SupportedLanguage.TYPESCRIPT: frozenset({".ts", ".tsx"}),
    SupportedLanguage.HTML: frozenset({".html", ".htm"}),
    SupportedLanguage.CSS: frozenset({".css", ".scss", ".sass", ".less"}),
    SupportedLanguage.CPP: frozenset({".cpp", ".cc", ".cxx", ".h", ".hpp", ".hxx"}),
    SupportedLanguage.C: frozenset({".c", ".h"}),
    SupportedLanguage.PHP: frozenset({".php"}),
    SupportedLanguage.RUBY: frozenset({".rb"}),
    SupportedLanguage.GO: frozenset({".go"}),
    SupportedLanguage.RUST: frozenset({".rs"}),
    SupportedLanguage.SQL: frozenset({".sql"}),
    SupportedLanguage.SWIFT: frozenset({".swift"}),
    SupportedLanguage.KOTLIN: frozenset({".kt", ".kts"}),
    # Also covers ".R": matching ignores case
    SupportedLanguage.R: frozenset({".r"}),
    SupportedLanguage.PERL: frozenset({".pl", ".pm"}),
    SupportedLanguage.SHELL: frozenset({".sh", ".bash"}),
    SupportedLanguage.POWERSHELL: frozenset({".ps1", ".psm1"}),
    SupportedLanguage.XML: frozenset({".xml", ".xaml"}),
    SupportedLanguage.JSON: frozenset({".json"}),
    SupportedLanguage.YAML: frozenset({".yaml", ".yml"}),
    SupportedLanguage.MARKDOWN: frozenset({".md"}),
}

# Directory names (compared case-insensitively) that are never descended into,
# regardless of how deep in the tree they appear. Build outputs, dependency
# caches and IDE/VCS metadata.
EXCLUDED_DIRECTORIES: Final[frozenset[str]] = frozenset(
    {
        "bin",
        "obj",
        "debug",
        "release",
        ".vs",
        ".git",
        "node_modules",
        "packages",
        ".vscode",
        ".idea",
        "target",
        "build",
        "dist",
        "out",
    }
)

# Bundle annotation format. One comment token is used for the whole artifact.
COMMENT_PREFIX: Final[str] = "//"
SOURCE_SEPARATOR: Final[str] = f"{COMMENT_PREFIX} {'-' * 40}"
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

DEFAULT_OUTPUT_FILE: Final[str] = "bundle.txt"
DEFAULT_RESPONSE_FILE: Final[str] = "commands.rsp"
RESPONSE_FILE_SUFFIX: Final[str] = ".rsp"
