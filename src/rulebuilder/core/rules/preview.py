"""Live preview of a rule against a test context.

The preview evaluates on demand, or automatically after every change when
auto-evaluation is on. Automatic evaluation is debounced: each change cancels
the pending evaluation and starts a new delay, so a burst of edits produces a
single evaluation of the final expression and context. Debouncing runs on the
running asyncio loop; called from synchronous code with no loop, each change
is evaluated immediately instead.
"""

import asyncio
from typing import Any, Callable

from rulebuilder.core.config import get_settings
from rulebuilder.core.logging import get_logger

from .evaluator import EvaluationResult, ExpressionEvaluator, is_empty_expression
from .text_editor import context_editor

logger = get_logger(__name__)


class RulePreview:
    """Evaluation state behind the rule builder's preview panel.

    Args:
        expression: Expression to evaluate.
        test_context: Context the expression is evaluated against.
        on_context_change: Called with the new context after the context
            editor commits valid JSON.
        evaluator: Evaluator to use. Defaults to the JSONLogic runtime.
        debounce_seconds: Auto-evaluation delay. Defaults to
            ``preview_debounce_ms`` from settings.
        on_result: Called after every evaluation with its result.
    """

    def __init__(
        self,
        expression: Any = None,
        test_context: dict[str, Any] | None = None,
        on_context_change: Callable[[Any], None] | None = None,
        evaluator: ExpressionEvaluator | None = None,
        debounce_seconds: float | None = None,
        on_result: Callable[[EvaluationResult | None], None] | None = None,
    ):
        self.expression = expression
        self.test_context: Any = test_context if test_context is not None else {}
        self.on_context_change = on_context_change
        self.evaluator = evaluator or ExpressionEvaluator()
        self.debounce_seconds = (
            debounce_seconds
            if debounce_seconds is not None
            else get_settings().preview_debounce_seconds
        )
        self.on_result = on_result

        self.auto_evaluate = False
        self.result: EvaluationResult | None = None
        self.context_editor = context_editor(self.test_context, self._handle_context_commit)

        self._pending: asyncio.Task | None = None
        self._disposed = False

    @property
    def has_expression(self) -> bool:
        return not is_empty_expression(self.expression)

    @property
    def pending(self) -> bool:
        """Whether a debounced evaluation is scheduled."""
        return self._pending is not None and not self._pending.done()

    def evaluate(self) -> EvaluationResult | None:
        """Evaluate the current expression and context now."""
        self.result = self.evaluator.evaluate(self.expression, self.test_context)
        if self.on_result is not None:
            self.on_result(self.result)
        return self.result

    def set_expression(self, expression: Any) -> None:
        self.expression = expression
        self._changed()

    def set_context(self, context: Any) -> None:
        """Apply a context update coming from outside the preview."""
        self.test_context = context
        self.context_editor.sync(context)
        self._changed()

    def set_auto_evaluate(self, enabled: bool) -> None:
        """Turn auto-evaluation on (schedules an evaluation) or off (cancels it)."""
        self.auto_evaluate = enabled
        if enabled:
            self._schedule()
        else:
            self._cancel()

    def edit_context(self, text: str) -> None:
        self.context_editor.edit(text)

    def commit_context(self) -> bool:
        """Commit the context editor text, as on loss of focus."""
        return self.context_editor.commit()

    @property
    def context_error(self) -> str | None:
        return self.context_editor.error

    def dispose(self) -> None:
        """Cancel any pending evaluation. The preview stops scheduling afterwards."""
        self._disposed = True
        self._cancel()

    def _handle_context_commit(self, context: Any) -> None:
        self.test_context = context
        if self.on_context_change is not None:
            self.on_context_change(context)
        self._changed()

    def _changed(self) -> None:
        if self.auto_evaluate:
            self._schedule()

    def _schedule(self) -> None:
        if self._disposed:
            return
        self._cancel()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop to debounce on: evaluate the change right away.
            logger.debug("No running event loop, evaluating immediately")
            self.evaluate()
            return
        self._pending = loop.create_task(self._evaluate_after_delay())

    def _cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    async def _evaluate_after_delay(self) -> None:
        await asyncio.sleep(self.debounce_seconds)
        self._pending = None
        logger.debug("Running debounced evaluation")
        self.evaluate()
