"""Serializer turning Block trees back into JSONLogic values.

Fixed-arity operators (``!``, ``if`` and the comparisons) are enforced here
as a last line of defense; the block validators are what the editor checks
before it lets a rule be saved. Arithmetic and ``and``/``or`` serialize
whatever children they have.
"""

from rulebuilder.core.logging import get_logger

from .ast import (
    AND,
    ARITHMETIC_OPERATORS,
    COMPARISON_OPERATORS,
    IF,
    LITERAL,
    NOT,
    OR,
    VAR,
    Block,
    JSONLogicExpression,
)
from .exceptions import ArityError, UnknownOperatorError

logger = get_logger(__name__)


def _fixed_children(block: Block, expected: int, message: str) -> list[Block]:
    children = block.children or []
    if len(children) != expected or any(child is None for child in children):
        present = sum(1 for child in children if child is not None)
        logger.warning(
            "Block arity violation", operator=block.operator, expected=expected, actual=present
        )
        raise ArityError(message, operator=block.operator, expected=expected, actual=present)
    return children


def _serialize_present(block: Block) -> list[JSONLogicExpression]:
    # Variadic operators skip empty editing slots.
    return [serialize_block(child) for child in block.children or [] if child is not None]


def serialize_block(block: Block) -> JSONLogicExpression:
    """Serialize a single Block to JSONLogic."""
    operator = block.operator

    if operator == LITERAL:
        return block.value

    if operator == VAR:
        return {VAR: block.value}

    if operator in (AND, OR):
        return {operator: _serialize_present(block)}

    if operator == NOT:
        (child,) = _fixed_children(block, 1, "NOT operator requires a child")
        return {NOT: serialize_block(child)}

    if operator == IF:
        children = _fixed_children(block, 3, "IF operator requires exactly 3 children")
        return {IF: [serialize_block(child) for child in children]}

    if operator in COMPARISON_OPERATORS:
        left, right = _fixed_children(block, 2, f"{operator} operator requires exactly 2 children")
        return {operator: [serialize_block(left), serialize_block(right)]}

    if operator in ARITHMETIC_OPERATORS:
        return {operator: _serialize_present(block)}

    raise UnknownOperatorError(operator)


def serialize_blocks(blocks: list[Block]) -> JSONLogicExpression:
    """Serialize the editor's root blocks into a JSONLogic expression.

    Only the first root is serialized; an empty list serializes to ``None``.

    Raises:
        ArityError: If a fixed-arity block has the wrong number of children.
        UnknownOperatorError: If a block carries an unrecognized operator.
    """
    if not blocks:
        return None
    return serialize_block(blocks[0])
