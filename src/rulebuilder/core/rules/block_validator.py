"""Structural validation of editor blocks.

These checks flag incomplete blocks while a rule is being edited so the
editor can hold back saving. They are advisory: nothing here raises, and the
raw JSON editor does not run them.
"""

from dataclasses import dataclass

from .ast import AND, ARITHMETIC_OPERATORS, COMPARISON_OPERATORS, IF, NOT, OR, Block


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one block."""

    invalid: bool
    error_message: str = ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(invalid=False)

    @classmethod
    def error(cls, message: str) -> "ValidationResult":
        return cls(invalid=True, error_message=message)


@dataclass(frozen=True)
class BlockIssue:
    """An invalid block found while walking a tree."""

    block_id: str
    operator: str
    message: str


def _slot(block: Block, index: int) -> Block | None:
    children = block.children or []
    return children[index] if index < len(children) else None


def _present(block: Block) -> list[Block]:
    return [child for child in block.children or [] if child is not None]


def validate_not_block(block: Block) -> ValidationResult:
    if len(block.children or []) != 1 or _slot(block, 0) is None:
        return ValidationResult.error("NOT operator requires exactly one child")
    return ValidationResult.ok()


def validate_logical_block(block: Block) -> ValidationResult:
    """Validate an AND/OR block. Stricter than the serializer: empty is invalid."""
    if not _present(block):
        return ValidationResult.error(f"{block.operator.upper()} operator requires at least one child")
    return ValidationResult.ok()


def validate_comparison_block(block: Block) -> ValidationResult:
    """Validate a comparison. Left and right are positional, so holes stay in place."""
    if _slot(block, 0) is None:
        return ValidationResult.error("Left operand is required")
    if _slot(block, 1) is None:
        return ValidationResult.error("Right operand is required")
    return ValidationResult.ok()


def validate_conditional_block(block: Block) -> ValidationResult:
    """Validate an if-then-else block, reporting the first missing part."""
    for index, part in enumerate(("Condition", "Then value", "Else value")):
        if _slot(block, index) is None:
            return ValidationResult.error(f"{part} is required")
    return ValidationResult.ok()


def validate_arithmetic_block(block: Block) -> ValidationResult:
    """Validate an arithmetic block.

    Every arithmetic operator needs at least two operands here, including
    ``+`` and ``*`` which JSONLogic would accept with one.
    """
    if len(_present(block)) < 2:
        return ValidationResult.error("Arithmetic operation requires at least two operands")
    return ValidationResult.ok()


def validate_block(block: Block) -> ValidationResult:
    """Validate a single block (not its descendants)."""
    operator = block.operator
    if operator == NOT:
        return validate_not_block(block)
    if operator in (AND, OR):
        return validate_logical_block(block)
    if operator in COMPARISON_OPERATORS:
        return validate_comparison_block(block)
    if operator == IF:
        return validate_conditional_block(block)
    if operator in ARITHMETIC_OPERATORS:
        return validate_arithmetic_block(block)
    # Literals and variables are always structurally complete.
    return ValidationResult.ok()


class BlockValidator:
    """Validates every block of an editor tree."""

    def __init__(self) -> None:
        self.errors: list[BlockIssue] = []

    def validate(self, blocks: list[Block]) -> list[BlockIssue]:
        """Validate all root blocks and their descendants.

        Returns:
            Issues in depth-first, pre-order order. Empty when the tree is valid.
        """
        self.errors = []
        for block in blocks:
            self._validate_node(block)
        return list(self.errors)

    def _validate_node(self, block: Block) -> None:
        result = validate_block(block)
        if result.invalid:
            self.errors.append(BlockIssue(block.id, block.operator, result.error_message))
        for child in _present(block):
            self._validate_node(child)


def validate_blocks(blocks: list[Block]) -> list[BlockIssue]:
    """Validate an editor tree, returning every invalid block."""
    return BlockValidator().validate(blocks)
