"""Rule builder API routes.

Exposes the expression engine to the editor: parsing stored expressions into
blocks, serializing edited blocks, validating both forms, and evaluating a
rule against a test context. Parser and serializer errors propagate as
RuleError and are turned into 400 responses by the app's exception handler.
"""

from fastapi import APIRouter, status

from rulebuilder.core.logging import get_logger
from rulebuilder.core.rules import (
    ExpressionEvaluator,
    extract_variables,
    parse_expression,
    serialize_blocks,
    validate_blocks,
    validate_expression,
)
from rulebuilder.core.rules.palette import palette_categories
from rulebuilder.infrastructure.api.schemas.rule_schemas import (
    BlockIssueSchema,
    BlocksRequest,
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

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/parse",
    response_model=ParseResponse,
    status_code=status.HTTP_200_OK,
    summary="Parse expression",
    description="Convert a JSONLogic expression into the visual editor's block tree.",
)
async def parse(request: ParseRequest) -> ParseResponse:
    blocks = parse_expression(request.expression)
    return ParseResponse(blocks=[block.to_dict() for block in blocks])


@router.post(
    "/serialize",
    response_model=SerializeResponse,
    status_code=status.HTTP_200_OK,
    summary="Serialize blocks",
    description="Convert a block tree back into a JSONLogic expression.",
)
async def serialize(request: BlocksRequest) -> SerializeResponse:
    blocks = [schema.to_block() for schema in request.blocks]
    return SerializeResponse(expression=serialize_blocks(blocks))


@router.post(
    "/validate",
    response_model=ValidateBlocksResponse,
    status_code=status.HTTP_200_OK,
    summary="Validate blocks",
    description="Report every structurally incomplete block in a block tree.",
)
async def validate(request: BlocksRequest) -> ValidateBlocksResponse:
    issues = validate_blocks([schema.to_block() for schema in request.blocks])
    if issues:
        logger.info("Block tree has invalid blocks", issue_count=len(issues))
    return ValidateBlocksResponse(
        valid=not issues,
        issues=[BlockIssueSchema.model_validate(issue) for issue in issues],
    )


@router.post(
    "/validate-expression",
    response_model=ValidateExpressionResponse,
    status_code=status.HTTP_200_OK,
    summary="Validate expression structure",
    description="Check a raw expression for emptiness and excessive nesting.",
)
async def validate_raw_expression(request: ValidateExpressionRequest) -> ValidateExpressionResponse:
    validation = validate_expression(request.expression, max_depth=request.max_depth)
    return ValidateExpressionResponse(
        is_valid=validation.is_valid,
        errors=validation.errors,
        variables=extract_variables(request.expression),
    )


@router.post(
    "/evaluate",
    response_model=EvaluateResponse,
    status_code=status.HTTP_200_OK,
    summary="Evaluate expression",
    description=(
        "Evaluate an expression against a test context. Evaluation errors are "
        "reported in the response body, never as an error status."
    ),
)
async def evaluate(request: EvaluateRequest) -> EvaluateResponse:
    evaluator = ExpressionEvaluator()

    if request.trace:
        traced = evaluator.evaluate_with_trace(request.expression, request.context)
        return EvaluateResponse(
            has_result=True,
            value=traced.value,
            error=traced.error,
            trace=[TraceStepSchema.model_validate(step) for step in traced.trace],
        )

    result = evaluator.evaluate(request.expression, request.context)
    if result is None:
        return EvaluateResponse(has_result=False)
    return EvaluateResponse(has_result=True, value=result.value, error=result.error)


@router.get(
    "/palette",
    response_model=PaletteResponse,
    status_code=status.HTTP_200_OK,
    summary="Get block palette",
    description="List the blocks the editor can add, each with a default-shaped block.",
)
async def get_palette() -> PaletteResponse:
    return PaletteResponse(
        categories=[
            PaletteCategorySchema(
                category=category,
                entries=[
                    PaletteEntrySchema(
                        label=entry.label,
                        description=entry.description,
                        operator=entry.operator,
                        block=entry.create().to_dict(),
                    )
                    for entry in entries
                ],
            )
            for category, entries in palette_categories().items()
        ]
    )
