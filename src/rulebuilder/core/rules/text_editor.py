"""Validate-on-commit editing of JSON text.

Shared by the raw expression editor and the preview's test-context editor.
Keystrokes are accepted without validation; the text is only parsed when the
editor commits (loses focus). Error messages never echo the input back.
"""

import json
from typing import Any, Callable

from rulebuilder.core.logging import get_logger

logger = get_logger(__name__)

EXPRESSION_ERROR_MESSAGE = "Invalid JSON syntax"
CONTEXT_ERROR_MESSAGE = "Syntax error in JSON"


def format_json(value: Any) -> str:
    """Render a value the way the editors display it (2-space indent)."""
    return json.dumps(value, indent=2)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


class JsonTextEditor:
    """Holds the text of a JSON editor and commits it to a callback.

    Args:
        value: Initial value, rendered as formatted JSON.
        on_change: Called with the parsed value after each successful commit.
        error_message: Generic message shown when the text does not parse.
    """

    def __init__(
        self,
        value: Any = None,
        on_change: Callable[[Any], None] | None = None,
        error_message: str = EXPRESSION_ERROR_MESSAGE,
    ):
        self.text = format_json(value)
        self.on_change = on_change
        self.error_message = error_message
        self.error: str | None = None
        self.is_local_edit = False

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def edit(self, text: str) -> None:
        """Replace the text as the user types. No validation, no callback."""
        self.text = text
        self.is_local_edit = True
        self.error = None

    def commit(self) -> bool:
        """Parse the current text and forward it on success.

        Blank text is left alone: no error and no callback.

        Returns:
            True when the text parsed (or was blank), False otherwise.
        """
        if not self.text.strip():
            self.error = None
            return True

        try:
            parsed = json.loads(self.text, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            logger.warning("Rejected JSON edit", length=len(self.text))
            self.error = self.error_message
            return False

        self.error = None
        self.is_local_edit = False
        if self.on_change is not None:
            self.on_change(parsed)
        return True

    def sync(self, value: Any) -> bool:
        """Apply an external update to the underlying value.

        Uncommitted local edits win over the external value.

        Returns:
            True if the displayed text was replaced.
        """
        if self.is_local_edit:
            return False
        self.text = format_json(value)
        return True


def expression_editor(
    expression: Any = None, on_change: Callable[[Any], None] | None = None
) -> JsonTextEditor:
    """Create the raw JSON editor for a rule expression."""
    return JsonTextEditor(expression, on_change, EXPRESSION_ERROR_MESSAGE)


def context_editor(
    context: Any = None, on_change: Callable[[Any], None] | None = None
) -> JsonTextEditor:
    """Create the preview's test-context editor."""
    return JsonTextEditor({} if context is None else context, on_change, CONTEXT_ERROR_MESSAGE)
