"""Pydantic schemas for the rules API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from rulebuilder.core.rules import Block, BlockType


class BlockSchema(BaseModel):
    """Wire form of an editor block.

    ``type`` is always derived from ``operator``; ``id`` is generated when omitted.
    A ``null`` child marks an empty slot in a block being edited.
    """

    id: Optional[str] = Field(None, description="Block id, unique within a tree")
    type: Optional[BlockType] = Field(None, description="Syntactic category of the block")
    operator: str = Field(..., description="Operator symbol, 'literal' or 'var'")
    value: Any = Field(None, description="Literal value or variable path")
    children: Optional[list[Optional["BlockSchema"]]] = Field(
        None, description="Operands, in order"
    )

    def to_block(self) -> Block:
        return Block.from_dict(self.model_dump(mode="json"))


class ParseRequest(BaseModel):
    """Request to parse an expression into blocks."""

    expression: Any = Field(..., description="JSONLogic expression")


class ParseResponse(BaseModel):
    """Parsed block tree."""

    blocks: list[dict[str, Any]]


class BlocksRequest(BaseModel):
    """A block tree to serialize or validate."""

    blocks: list[BlockSchema]


class SerializeResponse(BaseModel):
    """Serialized JSONLogic expression."""

    expression: Any


class BlockIssueSchema(BaseModel):
    """An invalid block."""

    model_config = ConfigDict(from_attributes=True)

    block_id: str
    operator: str
    message: str


class ValidateBlocksResponse(BaseModel):
    """Result of validating a block tree."""

    valid: bool
    issues: list[BlockIssueSchema]


class ValidateExpressionRequest(BaseModel):
    """Request to validate a raw expression's structure."""

    expression: Any = Field(..., description="JSONLogic expression")
    max_depth: Optional[int] = Field(None, ge=1, description="Overrides the configured depth limit")


class ValidateExpressionResponse(BaseModel):
    """Structure validation result."""

    is_valid: bool
    errors: list[str]
    variables: list[str]


class EvaluateRequest(BaseModel):
    """Request to evaluate an expression against a context."""

    expression: Any = Field(..., description="JSONLogic expression")
    context: dict[str, Any] = Field(default_factory=dict, description="Evaluation context")
    trace: bool = Field(False, description="Include evaluation trace steps")


class TraceStepSchema(BaseModel):
    """One step of a traced evaluation."""

    model_config = ConfigDict(from_attributes=True)

    step: str
    input: Any
    output: Any
    passed: bool


class EvaluateResponse(BaseModel):
    """Evaluation outcome.

    ``has_result`` is false when the expression was empty and nothing was
    evaluated, which is different from evaluating to ``null``.
    """

    has_result: bool
    value: Any = None
    error: Optional[str] = None
    trace: Optional[list[TraceStepSchema]] = None


class PaletteEntrySchema(BaseModel):
    """A block offered by the palette, with a freshly built default block."""

    label: str
    description: str
    operator: str
    block: dict[str, Any]


class PaletteCategorySchema(BaseModel):
    """Palette entries of one category."""

    category: str
    entries: list[PaletteEntrySchema]


class PaletteResponse(BaseModel):
    """The full block palette."""

    categories: list[PaletteCategorySchema]


BlockSchema.model_rebuild()
