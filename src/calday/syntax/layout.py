"""Layout compiler: reference-date pattern strings to instruction programs.

A layout is written in terms of the reference date, Monday January 2, 2006.
Compilation scans the layout left to right and, at every position, tries the
operators in a fixed priority order. The first token that is a prefix of the
remaining layout wins; text that matches no token becomes a literal.

Operator Priority:
    The order of _OPERATOR_TABLE is load-bearing. "January" must be tried
    before "Jan", "002" before "02", "01" before "1", and "2006" before "2";
    otherwise longer tokens would be split into shorter ones. "Jan" and "Mon"
    additionally require that no ASCII lower-case letter follows, so "Month"
    stays literal text.

Compilation never fails: every string is a valid layout.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from calday.enums import FormatOp

__all__ = ["CompiledLayout", "Instruction", "compile_layout"]


@dataclass(frozen=True, slots=True)
class Instruction:
    """One step of a compiled layout.

    Attributes:
        op: The operator to execute
        literal: Text to copy or match; only meaningful for FormatOp.LITERAL
    """

    op: FormatOp
    literal: str = ""

    def __str__(self) -> str:
        """Return the layout text this instruction was compiled from."""
        if self.op is FormatOp.LITERAL:
            return self.literal
        return self.op.value


type CompiledLayout = tuple[Instruction, ...]
"""Immutable instruction program produced by compile_layout()."""


# (token, ends_word, op), in priority order. Do not re-order.
_OPERATOR_TABLE: tuple[tuple[str, bool, FormatOp], ...] = (
    ("January", False, FormatOp.LONG_MONTH),
    ("Jan", True, FormatOp.SHORT_MONTH),
    ("Monday", False, FormatOp.LONG_WEEKDAY),
    ("Mon", True, FormatOp.SHORT_WEEKDAY),
    ("002", False, FormatOp.ZERO_YEAR_DAY),
    ("01", False, FormatOp.ZERO_MONTH),
    ("02", False, FormatOp.ZERO_DAY),
    ("06", False, FormatOp.YEAR),
    ("1", False, FormatOp.NUM_MONTH),
    ("2006", False, FormatOp.LONG_YEAR),
    ("2", False, FormatOp.DAY),
    ("_2006", False, FormatOp.UNDER_LONG_YEAR),
    ("_2", False, FormatOp.UNDER_DAY),
    ("__2", False, FormatOp.UNDER_YEAR_DAY),
)


def _starts_with_lower(layout: str, pos: int) -> bool:
    """Report whether layout has an ASCII lower-case letter at pos."""
    return pos < len(layout) and "a" <= layout[pos] <= "z"


def _match_operator(layout: str, pos: int) -> tuple[FormatOp, int] | None:
    """Return the operator starting at pos and the position after it."""
    for token, ends_word, op in _OPERATOR_TABLE:
        if not layout.startswith(token, pos):
            continue
        end = pos + len(token)
        if ends_word and _starts_with_lower(layout, end):
            continue
        return op, end
    return None


def compile_layout(layout: str) -> CompiledLayout:
    """Compile a layout string into its instruction program.

    Consecutive non-token characters are merged into a single literal
    instruction, so a program never holds two adjacent literals.

    Args:
        layout: Any string

    Returns:
        Tuple of Instructions; empty for an empty layout

    Example:
        >>> [str(i) for i in compile_layout("2006-01-02")]
        ['2006', '-', '01', '-', '02']
        >>> [str(i) for i in compile_layout("Month Mon")]
        ['Month ', 'Mon']
    """
    program: list[Instruction] = []
    literal_start = 0
    pos = 0
    while pos < len(layout):
        found = _match_operator(layout, pos)
        if found is None:
            pos += 1
            continue
        op, end = found
        if literal_start < pos:
            program.append(Instruction(FormatOp.LITERAL, layout[literal_start:pos]))
        program.append(Instruction(op))
        pos = literal_start = end
    if literal_start < len(layout):
        program.append(Instruction(FormatOp.LITERAL, layout[literal_start:]))
    return tuple(program)
