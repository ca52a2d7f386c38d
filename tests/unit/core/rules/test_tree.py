"""Unit tests for block tree edits."""

from rulebuilder.core.rules import (
    Block,
    BlockType,
    add_block,
    block_type_for,
    delete_block,
    find_block,
    move_block,
    update_block,
)


def literal(value, block_id):
    return Block(id=block_id, type=BlockType.LITERAL, operator="literal", value=value)


def op(operator, block_id, *children):
    return Block(id=block_id, type=block_type_for(operator), operator=operator, children=list(children))


def _tree():
    return [
        op("and", "root", op("==", "cmp", literal(1, "one"), literal(2, "two")), literal(True, "yes")),
        literal("other", "second"),
    ]


def test_find_block_at_any_depth():
    blocks = _tree()

    assert find_block(blocks, "root").operator == "and"
    assert find_block(blocks, "two").value == 2
    assert find_block(blocks, "second").value == "other"
    assert find_block(blocks, "missing") is None


def test_find_block_skips_holes():
    blocks = [op("==", "cmp", None, literal(1, "one"))]

    assert find_block(blocks, "one").value == 1


def test_update_block_replaces_subtree_without_mutating():
    blocks = _tree()
    replacement = literal(False, "no")

    updated = update_block(blocks, "cmp", replacement)

    assert find_block(updated, "cmp") is None
    assert find_block(updated, "one") is None
    assert updated[0].children[0] is replacement
    assert find_block(blocks, "cmp") is not None


def test_delete_block_removes_subtree():
    blocks = _tree()

    remaining = delete_block(blocks, "cmp")

    assert [child.id for child in remaining[0].children] == ["yes"]
    assert find_block(remaining, "one") is None
    assert len(blocks[0].children) == 2


def test_delete_root():
    assert [block.id for block in delete_block(_tree(), "root")] == ["second"]


def test_add_block_appends():
    blocks = _tree()

    added = add_block(blocks, literal(3, "three"))

    assert [block.id for block in added] == ["root", "second", "three"]
    assert len(blocks) == 2


def test_move_block():
    blocks = [literal(i, f"b{i}") for i in range(4)]

    assert [b.id for b in move_block(blocks, "b0", "b2")] == ["b1", "b2", "b0", "b3"]
    assert [b.id for b in move_block(blocks, "b3", "b1")] == ["b0", "b3", "b1", "b2"]


def test_move_block_no_ops():
    blocks = [literal(i, f"b{i}") for i in range(3)]

    assert move_block(blocks, "b1", "b1") == blocks
    assert move_block(blocks, "b1", "missing") == blocks
    assert move_block(blocks, "missing", "b1") == blocks
