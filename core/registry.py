"""
Language registry lookups.

Thin, side-effect free accessors over the static LANGUAGE_EXTENSIONS table.
"""

from constants import LANGUAGE_EXTENSIONS
from models import SupportedLanguage


def normalize_language(language: str | None) -> SupportedLanguage:
    """
    Normalizes and validates a language string to a SupportedLanguage enum value.

    Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        language (str | None): The language string to normalize.

    Returns:
        SupportedLanguage: The matching SupportedLanguage enum value.

    Raises:
        ValueError: If no language is provided or if it does not match any
            supported language.
    """
    if not language:
        raise ValueError("No language provided")

    normalized = language.strip().lower()
    for lang in SupportedLanguage:
        if lang.value == normalized:
            return lang
    raise ValueError(f"Unsupported language: {language}")


def get_extensions(language: str) -> frozenset[str] | None:
    """
    Look up the extensions registered for a language identifier.

    Args:
        language: A language identifier such as "python" or " CPP ".

    Returns:
        frozenset[str] | None: The registered extensions, or None when the
        identifier is not part of the vocabulary.
    """
    try:
        return LANGUAGE_EXTENSIONS[normalize_language(language)]
    except ValueError:
        return None


def all_extensions() -> frozenset[str]:
    """Union of the extensions of every registered language."""
    return frozenset().union(*LANGUAGE_EXTENSIONS.values())


def supported_language_names() -> list[str]:
    return [str(lang) for lang in SupportedLanguage]
