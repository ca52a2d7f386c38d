"""Copy-on-write edits of the editor's block tree.

Each function returns a new root list and leaves its input untouched. Blocks
are owned by exactly one parent, so replacing or deleting a block drops its
whole subtree.
"""

from dataclasses import replace

from .ast import Block


def find_block(blocks: list[Block | None], block_id: str) -> Block | None:
    """Find a block anywhere in the tree by id."""
    for block in blocks:
        if block is None:
            continue
        if block.id == block_id:
            return block
        if block.children:
            found = find_block(block.children, block_id)
            if found is not None:
                return found
    return None


def update_block(blocks: list[Block | None], block_id: str, replacement: Block) -> list[Block | None]:
    """Replace the block with ``block_id`` (at any depth) by ``replacement``."""
    updated: list[Block | None] = []
    for block in blocks:
        if block is not None and block.id == block_id:
            updated.append(replacement)
        elif block is not None and block.children is not None:
            updated.append(replace(block, children=update_block(block.children, block_id, replacement)))
        else:
            updated.append(block)
    return updated


def delete_block(blocks: list[Block | None], block_id: str) -> list[Block | None]:
    """Remove the block with ``block_id`` (at any depth) from its parent."""
    remaining: list[Block | None] = []
    for block in blocks:
        if block is not None and block.id == block_id:
            continue
        if block is not None and block.children is not None:
            block = replace(block, children=delete_block(block.children, block_id))
        remaining.append(block)
    return remaining


def add_block(blocks: list[Block], block: Block) -> list[Block]:
    """Append a new root block."""
    return [*blocks, block]


def move_block(blocks: list[Block], active_id: str, over_id: str) -> list[Block]:
    """Move a root block to the position of another root block.

    Unknown ids, or moving a block onto itself, leave the order unchanged.
    """
    if active_id == over_id:
        return list(blocks)

    ids = [block.id for block in blocks]
    if active_id not in ids or over_id not in ids:
        return list(blocks)

    old_index = ids.index(active_id)
    new_index = ids.index(over_id)
    reordered = list(blocks)
    reordered.insert(new_index, reordered.pop(old_index))
    return reordered
