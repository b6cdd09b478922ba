"""
Ruff formatter for Python code.
"""

from __future__ import annotations

import subprocess

from ..config import FormatterConfig
from ..errors import FormatError
from .base import Formatter


class RuffFormatter(Formatter):
    """Formatter using the ruff command line tool."""

    name = "ruff"

    def __init__(self, executable: str = "ruff"):
        self._executable = executable
        self._available = None

    def is_available(self) -> bool:
        """Check if ruff is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [self._executable, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Python code using ruff.

        Args:
            code: Python source code to format
            config: Formatter configuration

        Returns:
            Formatted code
        """
        if not self.is_available():
            raise FormatError(self.name, f"{self._executable} is not installed")

        self.check_syntax(code)

        # Code is passed on stdin; ruff needs a filename to pick the language
        cmd = [self._executable, "format", "--stdin-filename", "code.py"]

        if config.line_length:
            cmd.extend(["--line-length", str(config.line_length)])

        if config.target_version:
            cmd.extend(["--target-version", config.target_version])

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            raise FormatError(self.name, str(e)) from e

        if result.returncode != 0:
            raise FormatError(self.name, result.stderr.strip() or f"exit status {result.returncode}")
        return result.stdout


def format_with_ruff(
    code: str,
    line_length: int = 100,
    target_version: str = "py312",
) -> str:
    """
    Convenience function to format Python code with ruff.

    Args:
        code: Python source code
        line_length: Maximum line length
        target_version: Python version target (e.g., "py312")

    Returns:
        Formatted code
    """
    formatter = RuffFormatter()
    config = FormatterConfig(
        enabled=True,
        name="ruff",
        line_length=line_length,
        target_version=target_version,
    )
    return formatter.format(code, config)
