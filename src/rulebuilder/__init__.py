"""RuleBuilder - visual rule builder expression engine.

Converts JSONLogic expressions to and from the block trees edited in the
visual rule builder, validates them, and evaluates them for live preview.
"""

__version__ = "0.1.0"

from rulebuilder.core.rules import parse_expression, serialize_blocks

__all__ = ["parse_expression", "serialize_blocks", "__version__"]
