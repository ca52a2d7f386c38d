"""Pydantic schemas for API requests and responses."""

from rulebuilder.infrastructure.api.schemas.rule_schemas import (
    BlockIssueSchema,
    BlocksRequest,
    BlockSchema,
    EvaluateRequest,
    EvaluateResponse,
    PaletteCategorySchema,
    PaletteEntrySchema,
    PaletteResponse,
    ParseRequest,
    ParseResponse,
    SerializeResponse,
    TraceStepSchema,
    ValidateBlocksResponse,
    ValidateExpressionRequest,
    ValidateExpressionResponse,
)

__all__ = [
    "BlockIssueSchema",
    "BlocksRequest",
    "BlockSchema",
    "EvaluateRequest",
    "EvaluateResponse",
    "PaletteCategorySchema",
    "PaletteEntrySchema",
    "PaletteResponse",
    "ParseRequest",
    "ParseResponse",
    "SerializeResponse",
    "TraceStepSchema",
    "ValidateBlocksResponse",
    "ValidateExpressionRequest",
    "ValidateExpressionResponse",
]
