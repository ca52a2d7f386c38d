"""Evaluation of JSONLogic expressions for the live preview.

Operator semantics come from the ``json_logic`` runtime; this module only
wraps it. Empty expressions short-circuit to "no result" and every runtime
failure is turned into an error result, so callers never see an exception.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from json_logic import jsonLogic

from rulebuilder.core.logging import get_logger

from .exceptions import RuleEvaluationError
from .expression_validator import extract_variables, validate_expression

logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "Evaluation failed"

Runtime = Callable[[Any, Any], Any]


def is_empty_expression(expression: Any) -> bool:
    """Check whether an expression has nothing to evaluate.

    ``None``, primitives, lists and ``{}`` are all empty. This is the only
    place where a literal ``None`` is treated as "no expression".
    """
    return not isinstance(expression, dict) or len(expression) == 0


@dataclass
class EvaluationResult:
    """Value produced by an evaluation, or the error that replaced it."""

    value: Any
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"value": self.value}
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass
class TraceStep:
    """One step of a traced evaluation."""

    step: str
    input: Any
    output: Any
    passed: bool


@dataclass
class TracedEvaluation:
    """Evaluation outcome with the steps that produced it."""

    success: bool
    value: Any
    error: str | None = None
    trace: list[TraceStep] = field(default_factory=list)


def build_context(context: Any) -> dict[str, Any]:
    """Normalize an evaluation context; anything but a dict becomes ``{}``."""
    return context if isinstance(context, dict) else {}


def resolve_variable(path: str, context: dict[str, Any]) -> Any:
    """Resolve a dotted path against a context, ``None`` when missing."""
    value: Any = context
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        elif isinstance(value, list) and part.isdigit():
            index = int(part)
            value = value[index] if index < len(value) else None
        else:
            return None
    return value


class ExpressionEvaluator:
    """Evaluates expressions against a context through a JSONLogic runtime."""

    def __init__(self, runtime: Runtime = jsonLogic):
        self.runtime = runtime

    def apply(self, expression: Any, context: Any) -> Any:
        """Run the runtime directly.

        Raises:
            RuleEvaluationError: If the runtime fails for any reason.
        """
        try:
            return self.runtime(expression, build_context(context))
        except Exception as e:
            raise RuleEvaluationError(str(e) or DEFAULT_ERROR_MESSAGE) from e

    def evaluate(self, expression: Any, context: Any) -> EvaluationResult | None:
        """Evaluate an expression.

        Returns:
            ``None`` for an empty expression, otherwise an EvaluationResult
            carrying either the value or an error message.
        """
        if is_empty_expression(expression):
            return None

        try:
            value = self.apply(expression, context)
        except RuleEvaluationError as e:
            logger.warning("Expression evaluation failed", error=str(e))
            return EvaluationResult(value=None, error=str(e))

        return EvaluationResult(value=value)

    def evaluate_with_trace(self, expression: Any, context: Any) -> TracedEvaluation:
        """Evaluate an expression, recording each step for debugging."""
        trace = [TraceStep("Start evaluation", expression, None, True)]

        validation = validate_expression(expression)
        trace.append(
            TraceStep(
                "Validate expression structure",
                expression,
                {"is_valid": validation.is_valid, "errors": validation.errors},
                validation.is_valid,
            )
        )
        if not validation.is_valid:
            return TracedEvaluation(False, None, ", ".join(validation.errors), trace)

        eval_context = build_context(context)
        trace.append(TraceStep("Build evaluation context", context, eval_context, True))

        try:
            result = EvaluationResult(value=self.apply(expression, eval_context))
        except RuleEvaluationError as e:
            logger.warning("Traced evaluation failed", error=str(e))
            result = EvaluationResult(value=None, error=str(e))
        trace.append(
            TraceStep(
                "Evaluate expression",
                {"expression": expression, "context": eval_context},
                result.value,
                result.succeeded,
            )
        )

        variables = extract_variables(expression)
        if variables:
            trace.append(
                TraceStep(
                    "Resolve variables",
                    variables,
                    {path: resolve_variable(path, eval_context) for path in variables},
                    True,
                )
            )

        return TracedEvaluation(result.succeeded, result.value, result.error, trace)
