"""Block tree nodes for the visual rule editor.

A Block is one operator application, literal, or variable reference. The
JSONLogic wire format carries no identity, so every Block gets a fresh ``id``
when it is created; ids only matter to the editor's reconciliation.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .exceptions import UnknownOperatorError

LiteralValue = Union[str, int, float, bool, None]

# Recursive JSON value: a literal, a list of expressions, or a single-key
# ``{operator: operands}`` object.
JSONLogicExpression = Any


class BlockType(str, Enum):
    """Syntactic category of a Block."""

    LITERAL = "literal"
    VARIABLE = "variable"
    LOGICAL = "logical"
    COMPARISON = "comparison"
    ARITHMETIC = "arithmetic"
    CONDITIONAL = "conditional"


LITERAL = "literal"
VAR = "var"
AND = "and"
OR = "or"
NOT = "!"
IF = "if"

LOGICAL_OPERATORS = frozenset({AND, OR, NOT})
COMPARISON_OPERATORS = frozenset({"==", "!=", "===", "!==", ">", ">=", "<", "<="})
NARY_ARITHMETIC = frozenset({"+", "*"})
BINARY_ARITHMETIC = frozenset({"-", "/", "%"})
ARITHMETIC_OPERATORS = NARY_ARITHMETIC | BINARY_ARITHMETIC

ALL_OPERATORS = (
    frozenset({LITERAL, VAR, IF}) | LOGICAL_OPERATORS | COMPARISON_OPERATORS | ARITHMETIC_OPERATORS
)

# Operator symbols that can appear as the single key of an expression object.
EXPRESSION_OPERATORS = ALL_OPERATORS - {LITERAL}

_OPERATOR_TYPES: dict[str, BlockType] = {
    LITERAL: BlockType.LITERAL,
    VAR: BlockType.VARIABLE,
    IF: BlockType.CONDITIONAL,
    **{op: BlockType.LOGICAL for op in LOGICAL_OPERATORS},
    **{op: BlockType.COMPARISON for op in COMPARISON_OPERATORS},
    **{op: BlockType.ARITHMETIC for op in ARITHMETIC_OPERATORS},
}


def block_type_for(operator: str) -> BlockType:
    """Return the BlockType implied by an operator symbol."""
    try:
        return _OPERATOR_TYPES[operator]
    except (KeyError, TypeError):
        raise UnknownOperatorError(operator) from None


def generate_id() -> str:
    """Generate a fresh block id."""
    return uuid.uuid4().hex[:12]


@dataclass
class Block:
    """A node in the editor's expression tree.

    Literal and variable blocks carry ``value`` and no ``children``; operator
    blocks carry ``children`` (possibly empty) and no ``value``. While a block
    is being edited a child slot may hold ``None``.
    """

    id: str
    type: BlockType
    operator: str
    value: LiteralValue | list[str] = None
    children: list[Union["Block", None]] | None = field(default=None)

    @property
    def is_leaf(self) -> bool:
        return self.type in (BlockType.LITERAL, BlockType.VARIABLE)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire form used by the HTTP API and CLI."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "operator": self.operator,
        }
        if self.is_leaf:
            data["value"] = self.value
        if self.children is not None:
            data["children"] = [
                child.to_dict() if child is not None else None for child in self.children
            ]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Block":
        """Build a Block from its wire form.

        ``type`` is always derived from ``operator``; a supplied ``type`` is
        ignored. ``id`` is generated when absent.
        """
        operator = data["operator"]
        block_type = block_type_for(operator)
        children = data.get("children")
        return cls(
            id=data.get("id") or generate_id(),
            type=block_type,
            operator=operator,
            value=data.get("value"),
            children=(
                [cls.from_dict(child) if child is not None else None for child in children]
                if children is not None
                else None
            ),
        )
