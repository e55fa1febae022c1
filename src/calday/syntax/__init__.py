"""Layout syntax package.

Compiles reference-date layout strings into instruction programs shared by
the formatter and the parser. Separate from runtime so tooling can inspect a
layout without formatting anything.

Python 3.13+.
"""

from .layout import CompiledLayout, Instruction, compile_layout

__all__ = [
    "CompiledLayout",
    "Instruction",
    "compile_layout",
]
