"""Structure checks on raw JSONLogic values.

Unlike the block validators these run on stored JSON before evaluation:
they reject empty expressions and anything nested deeper than the configured
limit.
"""

from dataclasses import dataclass, field
from typing import Any

from rulebuilder.core.config import get_settings

from .ast import VAR


@dataclass
class ExpressionValidation:
    """Result of validating an expression's structure."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)


def validate_expression(expression: Any, max_depth: int | None = None) -> ExpressionValidation:
    """Validate a JSONLogic expression structure.

    Args:
        expression: The expression to validate.
        max_depth: Deepest nesting allowed. Defaults to ``max_expression_depth``
            from settings.

    Returns:
        ExpressionValidation with every error found.
    """
    if max_depth is None:
        max_depth = get_settings().max_expression_depth

    if expression is None:
        return ExpressionValidation(False, ["Expression cannot be null or undefined"])

    if not isinstance(expression, dict):
        return ExpressionValidation(False, ["Expression must be a valid object"])

    if not expression:
        return ExpressionValidation(False, ["Expression must contain at least one operator"])

    errors: list[str] = []
    _validate_nested(expression, errors, 0, max_depth)
    return ExpressionValidation(not errors, errors)


def _validate_nested(expr: Any, errors: list[str], depth: int, max_depth: int) -> None:
    if depth > max_depth:
        message = f"Expression exceeds maximum depth of {max_depth}"
        if message not in errors:
            errors.append(message)
        return

    if isinstance(expr, list):
        for item in expr:
            _validate_nested(item, errors, depth + 1, max_depth)
    elif isinstance(expr, dict):
        for value in expr.values():
            _validate_nested(value, errors, depth + 1, max_depth)


def extract_variables(expression: Any) -> list[str]:
    """Collect the variable paths referenced by an expression.

    Returns:
        Sorted, de-duplicated ``var`` paths.
    """
    variables: set[str] = set()

    def extract(expr: Any) -> None:
        if isinstance(expr, list):
            for item in expr:
                extract(item)
            return
        if not isinstance(expr, dict):
            return
        for key, value in expr.items():
            if key == VAR:
                # {"var": ["path", default]} names the path first
                path = value[0] if isinstance(value, list) and value else value
                if isinstance(path, str):
                    variables.add(path)
            else:
                extract(value)

    extract(expression)
    return sorted(variables)
