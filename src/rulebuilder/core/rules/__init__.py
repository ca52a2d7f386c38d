"""Rule Expression Engine API.

Converts JSONLogic expressions to and from the visual editor's Block trees,
validates blocks and raw expressions, and evaluates expressions for preview.
"""

from typing import Any

from .ast import Block, BlockType, JSONLogicExpression, block_type_for
from .block_validator import BlockIssue, ValidationResult, validate_block, validate_blocks
from .builders import (
    create_and,
    create_arithmetic,
    create_comparison,
    create_if,
    create_literal,
    create_not,
    create_or,
    create_var_reference,
)
from .evaluator import EvaluationResult, ExpressionEvaluator, TracedEvaluation, is_empty_expression
from .exceptions import (
    ArityError,
    RuleError,
    RuleEvaluationError,
    UnknownExpressionKindError,
    UnknownOperatorError,
)
from .expression_validator import ExpressionValidation, extract_variables, validate_expression
from .parser import parse_expression
from .preview import RulePreview
from .serializer import serialize_block, serialize_blocks
from .text_editor import JsonTextEditor
from .tree import add_block, delete_block, find_block, move_block, update_block


def round_trip(expression: JSONLogicExpression) -> JSONLogicExpression:
    """Parse an expression and serialize it back."""
    return serialize_blocks(parse_expression(expression))


def evaluate_rule(expression: JSONLogicExpression, context: dict[str, Any]) -> EvaluationResult | None:
    """Evaluate an expression against a context with the default runtime."""
    return ExpressionEvaluator().evaluate(expression, context)


__all__ = [
    "parse_expression",
    "serialize_blocks",
    "serialize_block",
    "round_trip",
    "evaluate_rule",
    "validate_block",
    "validate_blocks",
    "validate_expression",
    "extract_variables",
    "is_empty_expression",
    "create_var_reference",
    "create_literal",
    "create_and",
    "create_or",
    "create_not",
    "create_comparison",
    "create_arithmetic",
    "create_if",
    "find_block",
    "update_block",
    "delete_block",
    "add_block",
    "move_block",
    "block_type_for",
    "Block",
    "BlockType",
    "BlockIssue",
    "ValidationResult",
    "ExpressionValidation",
    "EvaluationResult",
    "TracedEvaluation",
    "ExpressionEvaluator",
    "RulePreview",
    "JsonTextEditor",
    "RuleError",
    "UnknownExpressionKindError",
    "ArityError",
    "UnknownOperatorError",
    "RuleEvaluationError",
]
