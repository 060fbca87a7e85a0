"""
Utility functions for JSON Schema to value object generator.
"""

import keyword
import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z]+(?![a-z])|[A-Z][a-z]*|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots, spaces) to spaces."""
    return re.sub(r"[^A-Za-z0-9]+", " ", text)


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(_normalize_separators(text))


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def _safe_identifier(text: str) -> str:
    """Make sure the text can be used as a Python identifier."""
    if not text:
        return text
    if text[0].isdigit():
        text = "_" + text
    if keyword.iskeyword(text):
        text = text + "_"
    return text


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "billingAddress" -> "BillingAddress"
        "BCP 47" -> "Bcp47"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    return _safe_identifier(_capitalize_and_join(_split_into_words(text)))


def to_snake_case(text: str) -> str:
    """Convert camelCase, PascalCase or separated text to snake_case.

    Examples:
        "billingAddress" -> "billing_address"
        "dateTime" -> "date_time"
        "in-progress" -> "in_progress"
        "class" -> "class_"
    """
    if not text:
        return ""
    words = _split_into_words(text)
    return _safe_identifier("_".join(word.lower() for word in words))


def to_screaming_snake_case(text: str) -> str:
    """Convert any text to UPPER_SNAKE_CASE, e.g. "billingAddress" -> "BILLING_ADDRESS"."""
    if not text:
        return ""
    words = _split_into_words(text)
    return _safe_identifier("_".join(word.upper() for word in words))


def namespace_to_path(namespace: str) -> str:
    """Convert a dotted namespace into a relative path ("acme.exception" -> "acme/exception")."""
    return "/".join(part for part in namespace.split(".") if part)


def join_namespace(*parts: str) -> str:
    """Join namespace segments, ignoring empty ones; "\\" and "/" separate segments too."""
    return ".".join(segment for part in parts for segment in re.split(r"[.\\/]", part) if segment)
