"""Helpers for building JSONLogic expressions directly.

Examples:
    >>> create_comparison("==", create_var_reference("status"), "active")
    {'==': [{'var': 'status'}, 'active']}

    >>> create_if(create_comparison(">", create_var_reference("level"), 3), "city", "town")
    {'if': [{'>': [{'var': 'level'}, 3]}, 'city', 'town']}
"""

from typing import Any

from .ast import AND, ARITHMETIC_OPERATORS, COMPARISON_OPERATORS, IF, NOT, OR, VAR, LiteralValue
from .exceptions import UnknownOperatorError


def create_var_reference(variable_path: str) -> dict[str, str]:
    return {VAR: variable_path}


def create_literal(value: LiteralValue) -> LiteralValue:
    return value


def create_and(conditions: list[Any]) -> dict[str, list[Any]]:
    return {AND: list(conditions)}


def create_or(conditions: list[Any]) -> dict[str, list[Any]]:
    return {OR: list(conditions)}


def create_not(condition: Any) -> dict[str, Any]:
    return {NOT: condition}


def create_comparison(operator: str, left: Any, right: Any) -> dict[str, list[Any]]:
    """Create a comparison expression.

    Raises:
        UnknownOperatorError: If ``operator`` is not a comparison operator.
    """
    if operator not in COMPARISON_OPERATORS:
        raise UnknownOperatorError(operator)
    return {operator: [left, right]}


def create_arithmetic(operator: str, operands: list[Any]) -> dict[str, list[Any]]:
    """Create an arithmetic expression.

    Raises:
        UnknownOperatorError: If ``operator`` is not an arithmetic operator.
    """
    if operator not in ARITHMETIC_OPERATORS:
        raise UnknownOperatorError(operator)
    return {operator: list(operands)}


def create_if(condition: Any, then_value: Any, else_value: Any) -> dict[str, list[Any]]:
    return {IF: [condition, then_value, else_value]}
