"""Unit tests for expression evaluation."""

from unittest.mock import Mock

import pytest

from rulebuilder.core.rules import (
    EvaluationResult,
    ExpressionEvaluator,
    RuleEvaluationError,
    evaluate_rule,
    is_empty_expression,
)
from rulebuilder.core.rules.evaluator import build_context, resolve_variable


@pytest.fixture
def evaluator():
    return ExpressionEvaluator()


@pytest.mark.parametrize("expr", [None, {}, 1, "text", [1, 2], True])
def test_is_empty_expression(expr):
    assert is_empty_expression(expr) is True


def test_non_empty_expression():
    assert is_empty_expression({"var": "a"}) is False


@pytest.mark.parametrize("expr", [None, {}])
def test_empty_expression_has_no_result(evaluator, expr):
    assert evaluator.evaluate(expr, {}) is None


def test_evaluate_equal(evaluator):
    assert evaluator.evaluate({"==": [1, 1]}, {}) == EvaluationResult(value=True)
    assert evaluator.evaluate({"==": [1, 2]}, {}) == EvaluationResult(value=False)


def test_evaluate_with_context(evaluator):
    expr = {"and": [{">": [{"var": "level"}, 3]}, {"==": [{"var": "type"}, "city"]}]}

    result = evaluator.evaluate(expr, {"level": 5, "type": "city"})

    assert result.succeeded
    assert result.value is True


def test_evaluate_nested_variable(evaluator):
    result = evaluator.evaluate({"var": "user.name"}, {"user": {"name": "Ada"}})

    assert result.value == "Ada"


def test_evaluate_if(evaluator):
    expr = {"if": [{"<": [{"var": "temp"}, 0]}, "freezing", "fine"]}

    assert evaluator.evaluate(expr, {"temp": -5}).value == "freezing"
    assert evaluator.evaluate(expr, {"temp": 20}).value == "fine"


def test_unknown_operator_becomes_error_result(evaluator):
    result = evaluator.evaluate({"no_such_op": [1]}, {})

    assert result is not None
    assert result.value is None
    assert result.error
    assert not result.succeeded


def test_runtime_exception_message_is_kept(evaluator):
    result = evaluator.evaluate({"/": [1, 0]}, {})

    assert "division by zero" in result.error


def test_runtime_exception_without_message_uses_default():
    evaluator = ExpressionEvaluator(runtime=Mock(side_effect=RuntimeError()))

    result = evaluator.evaluate({"==": [1, 1]}, {})

    assert result.error == "Evaluation failed"


def test_apply_raises_rule_evaluation_error():
    evaluator = ExpressionEvaluator(runtime=Mock(side_effect=ValueError("bad op")))

    with pytest.raises(RuleEvaluationError, match="bad op"):
        evaluator.apply({"x": []}, {})


def test_non_dict_context_is_replaced_with_empty_dict():
    runtime = Mock(return_value=True)
    evaluator = ExpressionEvaluator(runtime=runtime)

    evaluator.evaluate({"==": [1, 1]}, ["not", "a", "dict"])

    runtime.assert_called_once_with({"==": [1, 1]}, {})


def test_evaluate_rule_uses_default_runtime():
    assert evaluate_rule({"==": [1, 1]}, {}).value is True
    assert evaluate_rule({}, {}) is None


def test_result_to_dict():
    assert EvaluationResult(value=3).to_dict() == {"value": 3}
    assert EvaluationResult(value=None, error="boom").to_dict() == {"value": None, "error": "boom"}


def test_build_context():
    assert build_context({"a": 1}) == {"a": 1}
    assert build_context(None) == {}
    assert build_context("x") == {}


def test_resolve_variable():
    context = {"user": {"name": "Ada", "tags": ["x", "y"]}}

    assert resolve_variable("user.name", context) == "Ada"
    assert resolve_variable("user.tags.1", context) == "y"
    assert resolve_variable("user.tags.9", context) is None
    assert resolve_variable("user.missing.deeper", context) is None
    assert resolve_variable("user.name.first", context) is None


def test_trace_of_successful_evaluation(evaluator):
    traced = evaluator.evaluate_with_trace({"==": [{"var": "a"}, 1]}, {"a": 1})

    assert traced.success is True
    assert traced.value is True
    assert traced.error is None
    assert [step.step for step in traced.trace] == [
        "Start evaluation",
        "Validate expression structure",
        "Build evaluation context",
        "Evaluate expression",
        "Resolve variables",
    ]
    assert traced.trace[-1].output == {"a": 1}
    assert all(step.passed for step in traced.trace)


def test_trace_without_variables_skips_resolution(evaluator):
    traced = evaluator.evaluate_with_trace({"+": [1, 2]}, {})

    assert traced.success is True
    assert traced.value == 3
    assert traced.trace[-1].step == "Evaluate expression"


def test_trace_stops_on_invalid_structure(evaluator):
    traced = evaluator.evaluate_with_trace(None, {})

    assert traced.success is False
    assert traced.error == "Expression cannot be null or undefined"
    assert len(traced.trace) == 2
    assert traced.trace[1].passed is False


def test_trace_records_runtime_failure():
    evaluator = ExpressionEvaluator(runtime=Mock(side_effect=ValueError("bad op")))

    traced = evaluator.evaluate_with_trace({"==": [1, 1]}, {})

    assert traced.success is False
    assert traced.error == "bad op"
    assert traced.trace[-1].step == "Evaluate expression"
    assert traced.trace[-1].passed is False
