"""
Base class for code formatters.
"""

from __future__ import annotations

import ast
from abc import ABC, abstractmethod

from ..config import FormatterConfig
from ..errors import FormatError


class Formatter(ABC):
    """Abstract base class for code formatters.

    A formatter either returns the canonically formatted code or raises
    FormatError; it never hands back the unformatted input.
    """

    name: str = ""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format the given code.

        Args:
            code: The source code to format
            config: Formatter configuration

        Returns:
            Formatted code

        Raises:
            FormatError: If the code is not valid or the formatter cannot run
        """

    def check_syntax(self, code: str) -> None:
        """Reject code the Python compiler would not accept.

        Formatter grammars are looser than the compiler's (e.g. `a-b: int`
        parses as an annotated assignment), so the code is checked first.
        """
        try:
            ast.parse(code)
        except SyntaxError as e:
            raise FormatError(self.name, f"invalid syntax: {e}") from e

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the formatter is available (dependencies installed).

        Returns:
            True if the formatter can be used
        """
