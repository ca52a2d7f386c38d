"""Parser turning JSONLogic values into Block trees."""

from typing import Any, Callable

from rulebuilder.core.logging import get_logger

from .ast import (
    AND,
    IF,
    LITERAL,
    NOT,
    OR,
    VAR,
    Block,
    BlockType,
    JSONLogicExpression,
    block_type_for,
    generate_id,
)
from .exceptions import UnknownExpressionKindError
from .type_guards import (
    is_and_expression,
    is_arithmetic_expression,
    is_comparison_expression,
    is_if_expression,
    is_literal,
    is_not_expression,
    is_or_expression,
    is_var_expression,
    operator_of,
)

logger = get_logger(__name__)


class Parser:
    """Recursive descent parser from JSONLogic to Blocks.

    Each expression shape maps to exactly one Block shape, so there is no
    backtracking. A Parser instance issues ids that are unique across the
    whole tree it builds.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_id):
        self.id_factory = id_factory
        self._issued: set[str] = set()

    def parse(self, expr: JSONLogicExpression) -> list[Block]:
        """Parse an expression into the editor's list of root blocks."""
        return [self.to_block(expr)]

    def next_id(self) -> str:
        """Draw an id not yet used in this parse."""
        block_id = self.id_factory()
        while block_id in self._issued:
            block_id = self.id_factory()
        self._issued.add(block_id)
        return block_id

    def to_block(self, expr: JSONLogicExpression) -> Block:  # noqa: C901
        """Convert a single expression into a Block."""
        if is_literal(expr):
            return Block(id=self.next_id(), type=BlockType.LITERAL, operator=LITERAL, value=expr)

        if is_var_expression(expr):
            return Block(id=self.next_id(), type=BlockType.VARIABLE, operator=VAR, value=expr[VAR])

        if is_and_expression(expr) or is_or_expression(expr):
            operator = AND if AND in expr else OR
            return self._operator_block(operator, self._operands(expr, operator))

        if is_not_expression(expr):
            return Block(
                id=self.next_id(),
                type=BlockType.LOGICAL,
                operator=NOT,
                children=[self.to_block(expr[NOT])],
            )

        if is_if_expression(expr):
            return self._operator_block(IF, self._operands(expr, IF))

        # Comparison and arithmetic share a shape: the operator symbol is kept
        # and the operand list is parsed in order.
        if is_comparison_expression(expr) or is_arithmetic_expression(expr):
            operator = operator_of(expr)
            return self._operator_block(operator, self._operands(expr, operator))

        logger.warning("Rejected unknown expression type", value_type=type(expr).__name__)
        raise UnknownExpressionKindError(expr)

    def _operands(self, expr: dict[str, Any], operator: str) -> list[Any]:
        operands = expr[operator]
        if not isinstance(operands, list):
            raise UnknownExpressionKindError(expr)
        return operands

    def _operator_block(self, operator: str, operands: list[Any]) -> Block:
        block_id = self.next_id()
        return Block(
            id=block_id,
            type=block_type_for(operator),
            operator=operator,
            children=[self.to_block(operand) for operand in operands],
        )


def parse_expression(expr: JSONLogicExpression) -> list[Block]:
    """Parse a JSONLogic expression into Block structures for the visual editor.

    Raises:
        UnknownExpressionKindError: If any part of the expression has no
            recognized shape.
    """
    blocks = Parser().parse(expr)
    logger.debug("Parsed expression", root_operator=blocks[0].operator)
    return blocks
