"""Infrastructure layer - the HTTP surface of the rule engine.

The engine itself lives in ``rulebuilder.core.rules`` and has no knowledge
of FastAPI; this layer adapts it to request/response contracts.
"""
