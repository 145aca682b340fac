"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading and environment variables into one
frozen ServerConfig. It is resolved once per process and passed explicitly to
the tool entry points, so nothing downstream reads the environment itself.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

# Upstream retrieval provider (OpenAI-compatible chat completions)
DEFAULT_API_BASE_URL: str = "https://api.inkeep.com/v1"
DEFAULT_SEARCH_MODEL: str = "inkeep-rag"
DEFAULT_QA_MODEL: str = "inkeep-qa"

# Product identity used to template tool names and descriptions
DEFAULT_PRODUCT_SLUG: str = "product"
DEFAULT_PRODUCT_NAME: str = "the product"

DEFAULT_LOG_LEVEL: str = "INFO"

_TRUTHY = ("1", "true", "yes", "on")


class ServerConfig(BaseModel):
    """Read-only settings shared by every tool invocation."""

    model_config = ConfigDict(frozen=True)

    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, description="Base URL of the completion API.")
    api_key: str | None = Field(default=None, description="Bearer key; absence is handled per call.")
    search_model: str = Field(default=DEFAULT_SEARCH_MODEL)
    qa_model: str = Field(default=DEFAULT_QA_MODEL)
    product_slug: str = Field(default=DEFAULT_PRODUCT_SLUG)
    product_name: str = Field(default=DEFAULT_PRODUCT_NAME)
    qa_system_prompt: str | None = Field(default=None, description="Optional system preamble for the QA tool.")
    # Ask the search endpoint for schema-constrained output (json_schema response_format)
    structured_output: bool = Field(default=False)
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)

    @property
    def api_key_configured(self) -> bool:
        return bool(self.api_key)

    def public_view(self) -> dict:
        """Config as exposed on /config: everything except the key itself."""
        data = self.model_dump(exclude={"api_key"})
        data["api_key_configured"] = self.api_key_configured
        return data


def _env(name: str) -> str:
    return os.getenv(name, "").strip()


def load_config() -> ServerConfig:
    """
    Read configuration from the environment and return a ServerConfig.

    Recognised environment variables:
      - API_BASE_URL          : default "https://api.inkeep.com/v1"
      - API_KEY               : required for upstream calls, no default
      - API_MODEL             : overrides both per-tool models when set
      - API_SEARCH_MODEL      : default "inkeep-rag"
      - API_QA_MODEL          : default "inkeep-qa"
      - PRODUCT_SLUG          : default "product"
      - PRODUCT_NAME          : default "the product"
      - QA_SYSTEM_PROMPT      : optional system message for the QA tool
      - API_STRUCTURED_OUTPUT : "1"/"true"/"yes"/"on" to request json_schema output
      - LOG_LEVEL             : default "INFO"
    """
    shared_model = _env("API_MODEL")
    search_model = shared_model or _env("API_SEARCH_MODEL") or DEFAULT_SEARCH_MODEL
    qa_model = shared_model or _env("API_QA_MODEL") or DEFAULT_QA_MODEL

    return ServerConfig(
        api_base_url=(_env("API_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/"),
        api_key=_env("API_KEY") or None,
        search_model=search_model,
        qa_model=qa_model,
        product_slug=_env("PRODUCT_SLUG") or DEFAULT_PRODUCT_SLUG,
        product_name=_env("PRODUCT_NAME") or DEFAULT_PRODUCT_NAME,
        qa_system_prompt=_env("QA_SYSTEM_PROMPT") or None,
        structured_output=_env("API_STRUCTURED_OUTPUT").lower() in _TRUTHY,
        log_level=(_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


@lru_cache(maxsize=1)
def get_config() -> ServerConfig:
    """Process-wide config, resolved on first use and never mutated."""
    return load_config()
