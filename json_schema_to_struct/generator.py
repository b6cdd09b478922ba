"""
Pipeline generator: parse a schema document, then emit its dataclass.
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .emitter import StructEmitter
from .schema_ast import parse


class PipelineGenerator:
    """Runs the parse and emit phases for one schema document.

    Each call is self-contained: it either returns the full source or
    raises, leaving nothing behind.
    """

    def __init__(self, data: bytes | str, config: CodeGeneratorConfig | None = None):
        self.data = data
        self.config = config or CodeGeneratorConfig()

    def generate(self) -> str:
        schema = parse(self.data)
        return StructEmitter(self.config).emit(schema)
