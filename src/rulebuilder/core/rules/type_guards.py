"""Predicates classifying a raw JSONLogic value.

An operator predicate holds only for a dict whose single key is that
operator, so for well-formed input exactly one predicate is true. A dict with
several operator keys (``{"and": [], "or": []}``) fails every predicate and is
reported downstream as an unknown expression type. Predicates never raise.
"""

from typing import Any

from .ast import ARITHMETIC_OPERATORS, COMPARISON_OPERATORS, EXPRESSION_OPERATORS


def is_literal(expr: Any) -> bool:
    """Check if a value is a primitive literal (string, number, boolean or null)."""
    return expr is None or isinstance(expr, (str, int, float, bool))


def operator_of(expr: Any) -> str | None:
    """Return the recognized operator of a single-key expression object."""
    if not isinstance(expr, dict) or len(expr) != 1:
        return None
    (key,) = expr
    return key if key in EXPRESSION_OPERATORS else None


def _has_operator(expr: Any, operator: str) -> bool:
    return isinstance(expr, dict) and len(expr) == 1 and operator in expr


def is_var_expression(expr: Any) -> bool:
    return _has_operator(expr, "var")


def is_and_expression(expr: Any) -> bool:
    return _has_operator(expr, "and")


def is_or_expression(expr: Any) -> bool:
    return _has_operator(expr, "or")


def is_not_expression(expr: Any) -> bool:
    return _has_operator(expr, "!")


def is_logical_expression(expr: Any) -> bool:
    """Check if expression is any logical operator."""
    return is_and_expression(expr) or is_or_expression(expr) or is_not_expression(expr)


def is_if_expression(expr: Any) -> bool:
    return _has_operator(expr, "if")


def is_equal_expression(expr: Any) -> bool:
    return _has_operator(expr, "==")


def is_not_equal_expression(expr: Any) -> bool:
    return _has_operator(expr, "!=")


def is_strict_equal_expression(expr: Any) -> bool:
    return _has_operator(expr, "===")


def is_strict_not_equal_expression(expr: Any) -> bool:
    return _has_operator(expr, "!==")


def is_greater_than_expression(expr: Any) -> bool:
    return _has_operator(expr, ">")


def is_greater_than_or_equal_expression(expr: Any) -> bool:
    return _has_operator(expr, ">=")


def is_less_than_expression(expr: Any) -> bool:
    return _has_operator(expr, "<")


def is_less_than_or_equal_expression(expr: Any) -> bool:
    return _has_operator(expr, "<=")


def is_comparison_expression(expr: Any) -> bool:
    """Check if expression is any comparison operator."""
    return operator_of(expr) in COMPARISON_OPERATORS


def is_add_expression(expr: Any) -> bool:
    return _has_operator(expr, "+")


def is_subtract_expression(expr: Any) -> bool:
    return _has_operator(expr, "-")


def is_multiply_expression(expr: Any) -> bool:
    return _has_operator(expr, "*")


def is_divide_expression(expr: Any) -> bool:
    return _has_operator(expr, "/")


def is_modulo_expression(expr: Any) -> bool:
    return _has_operator(expr, "%")


def is_arithmetic_expression(expr: Any) -> bool:
    """Check if expression is any arithmetic operator."""
    return operator_of(expr) in ARITHMETIC_OPERATORS
