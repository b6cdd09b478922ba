"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from .base import Formatter
from .black_formatter import BlackFormatter, format_with_black
from .ruff_formatter import RuffFormatter, format_with_ruff

FORMATTERS: dict[str, type[Formatter]] = {
    "black": BlackFormatter,
    "ruff": RuffFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Return a new formatter instance by name."""
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown formatter {name!r}, expected one of {sorted(FORMATTERS)}") from None


__all__ = [
    "Formatter",
    "BlackFormatter",
    "RuffFormatter",
    "FORMATTERS",
    "get_formatter",
    "format_with_black",
    "format_with_ruff",
]
