"""
Tests for environment-driven configuration.
"""

import pytest
from pydantic import ValidationError

from rag_mcp.core.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_QA_MODEL,
    DEFAULT_SEARCH_MODEL,
    ServerConfig,
    load_config,
)

_VARS = (
    "API_BASE_URL", "API_KEY", "API_MODEL", "API_SEARCH_MODEL", "API_QA_MODEL",
    "PRODUCT_SLUG", "PRODUCT_NAME", "QA_SYSTEM_PROMPT", "API_STRUCTURED_OUTPUT", "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_when_unset(clean_env) -> None:
    config = load_config()
    assert config.api_base_url == DEFAULT_API_BASE_URL
    assert config.api_key is None
    assert config.api_key_configured is False
    assert config.search_model == DEFAULT_SEARCH_MODEL
    assert config.qa_model == DEFAULT_QA_MODEL
    assert config.structured_output is False


def test_api_model_overrides_both_tools(clean_env) -> None:
    clean_env.setenv("API_MODEL", "custom-model")
    clean_env.setenv("API_SEARCH_MODEL", "ignored")
    config = load_config()
    assert config.search_model == "custom-model"
    assert config.qa_model == "custom-model"


def test_per_tool_models_and_flags(clean_env) -> None:
    clean_env.setenv("API_BASE_URL", "https://proxy.local/v1/")
    clean_env.setenv("API_KEY", "  abc  ")
    clean_env.setenv("API_QA_MODEL", "qa-expert")
    clean_env.setenv("API_STRUCTURED_OUTPUT", "true")
    clean_env.setenv("PRODUCT_SLUG", "acme")
    config = load_config()
    assert config.api_base_url == "https://proxy.local/v1"
    assert config.api_key == "abc"
    assert config.search_model == DEFAULT_SEARCH_MODEL
    assert config.qa_model == "qa-expert"
    assert config.structured_output is True
    assert config.product_slug == "acme"


def test_blank_api_key_counts_as_missing(clean_env) -> None:
    clean_env.setenv("API_KEY", "   ")
    assert load_config().api_key is None


def test_config_is_frozen() -> None:
    config = ServerConfig(api_key="k")
    with pytest.raises(ValidationError):
        config.api_key = "other"


def test_public_view_hides_key() -> None:
    view = ServerConfig(api_key="secret").public_view()
    assert "api_key" not in view
    assert view["api_key_configured"] is True
