"""Unit tests for the block palette."""

import pytest

from rulebuilder.core.rules import BlockType, serialize_block, validate_blocks
from rulebuilder.core.rules.palette import PALETTE, create_palette_block, palette_categories


def test_categories_in_palette_order():
    categories = palette_categories()

    assert list(categories) == ["Conditional", "Logical", "Comparison", "Arithmetic", "Values"]
    assert [entry.label for entry in categories["Logical"]] == ["AND", "OR", "NOT"]
    assert len(categories["Comparison"]) == 6
    assert len(categories["Arithmetic"]) == 5


@pytest.mark.parametrize("entry", PALETTE, ids=lambda entry: entry.label)
def test_every_entry_builds_a_valid_block(entry):
    block = entry.create()

    assert block.operator == entry.operator
    assert validate_blocks([block]) == []
    serialize_block(block)


def test_entries_build_fresh_ids():
    first = create_palette_block("AND")
    second = create_palette_block("AND")

    assert first.id != second.id
    assert first.children[0].id != second.children[0].id


def test_default_shapes():
    assert serialize_block(create_palette_block("If-Then-Else")) == {
        "if": [True, "then value", "else value"]
    }
    assert serialize_block(create_palette_block("Subtract (-)")) == {"-": [5, 3]}
    assert serialize_block(create_palette_block("Variable")) == {"var": "path.to.variable"}


def test_value_entries_are_leaves():
    for label, value in [("Number", 0), ("Text", ""), ("Boolean", True), ("Null", None)]:
        block = create_palette_block(label)
        assert block.type == BlockType.LITERAL
        assert block.value == value
        assert block.children is None


def test_unknown_label():
    with pytest.raises(KeyError):
        create_palette_block("XOR")
