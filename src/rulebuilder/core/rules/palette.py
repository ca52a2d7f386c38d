"""Block palette: default-shaped blocks the editor can add.

Every entry builds a complete, valid block with fresh ids each time it is
instantiated.
"""

from dataclasses import dataclass
from typing import Callable

from .ast import LITERAL, VAR, Block, LiteralValue, block_type_for, generate_id


def _block(operator: str, value: LiteralValue = None, children: list[Block] | None = None) -> Block:
    return Block(
        id=generate_id(),
        type=block_type_for(operator),
        operator=operator,
        value=value,
        children=children,
    )


def _literal(value: LiteralValue) -> Block:
    return _block(LITERAL, value)


def _operator(operator: str, *operands: LiteralValue) -> Callable[[], Block]:
    return lambda: _block(operator, children=[_literal(operand) for operand in operands])


@dataclass(frozen=True)
class PaletteEntry:
    """A block the palette offers."""

    category: str
    label: str
    description: str
    operator: str
    factory: Callable[[], Block]

    def create(self) -> Block:
        return self.factory()


PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry(
        "Conditional", "If-Then-Else", "Conditional expression", "if",
        _operator("if", True, "then value", "else value"),
    ),
    PaletteEntry("Logical", "AND", "All conditions must be true", "and", _operator("and", True, True)),
    PaletteEntry(
        "Logical", "OR", "At least one condition must be true", "or", _operator("or", True, False)
    ),
    PaletteEntry("Logical", "NOT", "Negates the condition", "!", _operator("!", True)),
    PaletteEntry("Comparison", "Equal (==)", "Check if values are equal", "==", _operator("==", 1, 1)),
    PaletteEntry(
        "Comparison", "Not Equal (!=)", "Check if values are not equal", "!=", _operator("!=", 1, 2)
    ),
    PaletteEntry(
        "Comparison", "Greater Than (>)", "Check if left is greater than right", ">",
        _operator(">", 2, 1),
    ),
    PaletteEntry(
        "Comparison", "Greater or Equal (>=)",
        "Check if left is greater than or equal to right", ">=", _operator(">=", 2, 1),
    ),
    PaletteEntry(
        "Comparison", "Less Than (<)", "Check if left is less than right", "<", _operator("<", 1, 2)
    ),
    PaletteEntry(
        "Comparison", "Less or Equal (<=)", "Check if left is less than or equal to right", "<=",
        _operator("<=", 1, 2),
    ),
    PaletteEntry("Arithmetic", "Add (+)", "Add numbers together", "+", _operator("+", 1, 2)),
    PaletteEntry("Arithmetic", "Subtract (-)", "Subtract second from first", "-", _operator("-", 5, 3)),
    PaletteEntry("Arithmetic", "Multiply (*)", "Multiply numbers together", "*", _operator("*", 2, 3)),
    PaletteEntry("Arithmetic", "Divide (/)", "Divide first by second", "/", _operator("/", 10, 2)),
    PaletteEntry("Arithmetic", "Modulo (%)", "Remainder after division", "%", _operator("%", 10, 3)),
    PaletteEntry(
        "Values", "Variable", "Reference a variable from context", VAR,
        lambda: _block(VAR, "path.to.variable"),
    ),
    PaletteEntry("Values", "Number", "Constant number value", LITERAL, lambda: _literal(0)),
    PaletteEntry("Values", "Text", "Constant text value", LITERAL, lambda: _literal("")),
    PaletteEntry("Values", "Boolean", "True or false value", LITERAL, lambda: _literal(True)),
    PaletteEntry("Values", "Null", "Empty value", LITERAL, lambda: _literal(None)),
)


def palette_categories() -> dict[str, list[PaletteEntry]]:
    """Group palette entries by category, preserving palette order."""
    categories: dict[str, list[PaletteEntry]] = {}
    for entry in PALETTE:
        categories.setdefault(entry.category, []).append(entry)
    return categories


def create_palette_block(label: str) -> Block:
    """Instantiate the palette entry with the given label.

    Raises:
        KeyError: If no entry has that label.
    """
    for entry in PALETTE:
        if entry.label == label:
            return entry.create()
    raise KeyError(f"Unknown palette entry: {label}")
