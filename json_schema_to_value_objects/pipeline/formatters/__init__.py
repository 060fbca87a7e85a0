"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from .base import Formatter
from .black_formatter import BlackFormatter
from .ruff_formatter import RuffFormatter

FORMATTERS: dict[str, type[Formatter]] = {
    "ruff": RuffFormatter,
    "black": BlackFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Instantiate the formatter registered under `name`."""
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(f'Unknown formatter "{name}", expected one of {", ".join(FORMATTERS)}') from None


__all__ = [
    "Formatter",
    "RuffFormatter",
    "BlackFormatter",
    "FORMATTERS",
    "get_formatter",
]
