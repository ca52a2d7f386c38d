"""Exceptions for parsing, serializing and evaluating rule expressions."""

import json
from typing import Any


class RuleError(Exception):
    """Base class for all rule-related errors."""
    pass


class UnknownExpressionKindError(RuleError):
    """Raised when a JSON value matches no recognized expression shape."""

    def __init__(self, expression: Any):
        self.expression = expression
        super().__init__(f"Unknown expression type: {json.dumps(expression, default=repr)}")


class ArityError(RuleError):
    """Raised when a block's children violate its operator's fixed arity."""

    def __init__(self, message: str, operator: str, expected: int, actual: int):
        self.operator = operator
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class UnknownOperatorError(RuleError):
    """Raised when a block carries an operator outside the recognized set."""

    def __init__(self, operator: Any):
        self.operator = operator
        super().__init__(f"Unknown block operator: {operator}")


class RuleEvaluationError(RuleError):
    """Raised when the JSONLogic runtime fails on an expression."""
    pass
