"""Command-line interface for RuleBuilder.

This module provides commands for converting, validating and evaluating
JSONLogic rules from the shell, and for running the HTTP API.
"""

import json
import sys
from typing import Any, NoReturn

import click

from rulebuilder.core.config import get_settings
from rulebuilder.core.logging import configure_logging, get_logger
from rulebuilder.core.rules import (
    Block,
    ExpressionEvaluator,
    RuleError,
    parse_expression,
    serialize_blocks,
    validate_blocks,
)
from rulebuilder.core.rules.text_editor import EXPRESSION_ERROR_MESSAGE, format_json


def _read_json(source: Any) -> Any:
    """Read a JSON document from an open file, exiting on syntax errors."""
    try:
        return json.load(source)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{EXPRESSION_ERROR_MESSAGE}: {e.msg}") from e


def _read_blocks(source: Any) -> list[Block]:
    data = _read_json(source)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise click.ClickException("Blocks must be a JSON object or array of objects")
    try:
        return [Block.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError) as e:
        raise click.ClickException(f"Malformed block: {e}") from e
    except RuleError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version="0.1.0", prog_name="RuleBuilder")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides environment)",
)
def cli(log_level: str | None) -> None:
    """RuleBuilder - visual rule builder expression engine.

    Converts JSONLogic expressions to and from editor block trees,
    validates them and evaluates them against test data.
    """
    settings = get_settings()
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings, stream=sys.stderr)


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
def parse(source: Any) -> None:
    """Parse a JSONLogic expression into a block tree.

    SOURCE is a file path, or '-' (the default) to read stdin.
    """
    expression = _read_json(source)
    try:
        blocks = parse_expression(expression)
    except RuleError as e:
        raise click.ClickException(str(e)) from e
    click.echo(format_json([block.to_dict() for block in blocks]))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
def serialize(source: Any) -> None:
    """Serialize a block tree back into a JSONLogic expression."""
    blocks = _read_blocks(source)
    try:
        expression = serialize_blocks(blocks)
    except RuleError as e:
        raise click.ClickException(str(e)) from e
    click.echo(format_json(expression))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
def validate(source: Any) -> None:
    """Report every incomplete block in a block tree.

    Exits with status 1 when any block is invalid.
    """
    issues = validate_blocks(_read_blocks(source))
    if not issues:
        click.echo("All blocks are valid")
        return

    for issue in issues:
        click.echo(f"{issue.block_id} ({issue.operator}): {issue.message}")
    sys.exit(1)


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--context", "context_json", default=None, help="Test context as inline JSON")
@click.option(
    "--context-file",
    type=click.File("r"),
    default=None,
    help="Read the test context from a JSON file",
)
@click.option("--trace", is_flag=True, default=False, help="Print each evaluation step")
def evaluate(source: Any, context_json: str | None, context_file: Any, trace: bool) -> None:
    """Evaluate a JSONLogic expression against a test context."""
    if context_json is not None and context_file is not None:
        raise click.UsageError("Use either --context or --context-file, not both")

    expression = _read_json(source)
    if context_file is not None:
        context = _read_json(context_file)
    elif context_json is not None:
        try:
            context = json.loads(context_json)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Syntax error in JSON: {e.msg}") from e
    else:
        context = {}

    evaluator = ExpressionEvaluator()

    if trace:
        traced = evaluator.evaluate_with_trace(expression, context)
        for step in traced.trace:
            marker = "ok" if step.passed else "failed"
            click.echo(f"[{marker}] {step.step}")
        if not traced.success:
            raise click.ClickException(traced.error or "Evaluation failed")
        click.echo(format_json(traced.value))
        return

    result = evaluator.evaluate(expression, context)
    if result is None:
        click.echo("Nothing to evaluate")
        return
    if result.error is not None:
        raise click.ClickException(result.error)
    click.echo(format_json(result.value))


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the RuleBuilder API server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting RuleBuilder server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "rulebuilder.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
def info() -> None:
    """Display RuleBuilder configuration."""
    settings = get_settings()

    click.echo(f"""
RuleBuilder v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Rules:
  Debounce:     {settings.preview_debounce_ms} ms
  Max Depth:    {settings.max_expression_depth}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `rulebuilder` command is run
    or when using `python -m rulebuilder`.
    """
    cli()


if __name__ == "__main__":
    main()
