"""
Black formatter for Python code.
"""

from __future__ import annotations

from ..config import FormatterConfig
from ..errors import FormatError
from .base import Formatter


class BlackFormatter(Formatter):
    """Formatter using black for Python code."""

    name = "black"

    def __init__(self):
        self._black = None
        self._available = None

    def is_available(self) -> bool:
        """Check if black is installed."""
        if self._available is None:
            try:
                import black

                self._black = black
                self._available = True
            except ImportError:
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Python code using black.

        Args:
            code: Python source code to format
            config: Formatter configuration

        Returns:
            Formatted code
        """
        if not self.is_available():
            raise FormatError(self.name, "black is not installed")

        self.check_syntax(code)
        black = self._black

        target_versions = set()
        if config.target_version:
            target = getattr(black.TargetVersion, config.target_version.upper(), None)
            if target is None:
                raise FormatError(self.name, f"unknown target version {config.target_version!r}")
            target_versions.add(target)

        mode = black.Mode(
            target_versions=target_versions,
            line_length=config.line_length,
            string_normalization=config.string_normalization,
            magic_trailing_comma=config.magic_trailing_comma,
        )

        try:
            return black.format_str(code, mode=mode)
        except black.InvalidInput as e:
            raise FormatError(self.name, str(e)) from e


def format_with_black(
    code: str,
    line_length: int = 100,
    target_version: str = "py312",
) -> str:
    """
    Convenience function to format Python code with black.

    Args:
        code: Python source code
        line_length: Maximum line length
        target_version: Python version target (e.g., "py312")

    Returns:
        Formatted code
    """
    formatter = BlackFormatter()
    config = FormatterConfig(
        enabled=True,
        name="black",
        line_length=line_length,
        target_version=target_version,
    )
    return formatter.format(code, config)
