"""API Routes for RuleBuilder."""

from .rules_router import router as rules_router

__all__ = ["rules_router"]
