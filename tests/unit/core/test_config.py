
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rulebuilder.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    get_settings.cache_clear()

    settings = Settings()

    assert settings.app_name == "RuleBuilder"
    assert settings.environment == "development"
    assert settings.debug is False
    assert settings.api_prefix == "/api/v1"
    assert settings.port == 8000
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False


def test_rule_engine_defaults():
    """Test the preview debounce and depth limit defaults."""
    settings = Settings()

    assert settings.preview_debounce_ms == 300
    assert settings.preview_debounce_seconds == pytest.approx(0.3)
    assert settings.max_expression_depth == 10


def test_settings_env_override():
    """Test that environment variables override defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "RULEBUILDER_ENVIRONMENT": "production",
        "RULEBUILDER_PORT": "9000",
        "RULEBUILDER_PREVIEW_DEBOUNCE_MS": "50",
        "RULEBUILDER_MAX_EXPRESSION_DEPTH": "4",
    }):
        settings = Settings()

        assert settings.environment == "production"
        assert settings.port == 9000
        assert settings.preview_debounce_seconds == pytest.approx(0.05)
        assert settings.max_expression_depth == 4
        assert settings.is_production is True


def test_rule_engine_settings_are_bounded():
    """Test that negative debounce and zero depth are rejected."""
    with pytest.raises(ValidationError):
        Settings(preview_debounce_ms=-1)

    with pytest.raises(ValidationError):
        Settings(max_expression_depth=0)


def test_cors_origins_parsing():
    """Test CORS origins parsing from a comma-separated string."""
    settings = Settings(cors_origins="http://example.com, http://test.com")

    assert settings.cors_origins == ["http://example.com", "http://test.com"]


def test_get_settings_is_cached(clean_settings):
    """Test that get_settings returns the same instance."""
    assert get_settings() is get_settings()
