"""Unit tests for expression builder helpers."""

import pytest

from rulebuilder.core.rules import (
    UnknownOperatorError,
    create_and,
    create_arithmetic,
    create_comparison,
    create_if,
    create_literal,
    create_not,
    create_or,
    create_var_reference,
    parse_expression,
    round_trip,
)


def test_simple_builders():
    assert create_var_reference("user.age") == {"var": "user.age"}
    assert create_literal("x") == "x"
    assert create_and([True, False]) == {"and": [True, False]}
    assert create_or([]) == {"or": []}
    assert create_not({"var": "x"}) == {"!": {"var": "x"}}
    assert create_if(True, 1, 2) == {"if": [True, 1, 2]}


def test_create_comparison():
    assert create_comparison(">=", create_var_reference("age"), 18) == {">=": [{"var": "age"}, 18]}

    with pytest.raises(UnknownOperatorError):
        create_comparison("+", 1, 2)


def test_create_arithmetic():
    assert create_arithmetic("*", [2, 3, 4]) == {"*": [2, 3, 4]}

    with pytest.raises(UnknownOperatorError):
        create_arithmetic("==", [1, 2])


def test_built_expressions_parse_and_round_trip():
    expr = create_and(
        [
            create_comparison("==", create_var_reference("status"), "active"),
            create_not(create_comparison("<", create_arithmetic("-", [create_var_reference("a"), 1]), 0)),
        ]
    )

    (block,) = parse_expression(expr)

    assert block.operator == "and"
    assert round_trip(expr) == expr


def test_builders_copy_operand_lists():
    operands = [1, 2]
    expr = create_arithmetic("+", operands)
    operands.append(3)

    assert expr == {"+": [1, 2]}
