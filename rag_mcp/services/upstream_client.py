"""
Upstream client: one OpenAI-compatible chat completion call per tool invocation.

No retries, no caching. Failures are logged here and raised once as RagToolError
subclasses; the tool entry points decide what the caller sees.
"""

import logging
from typing import Any

import httpx
from openai import AsyncOpenAI, OpenAIError

from rag_mcp.core.config import ServerConfig
from rag_mcp.core.errors import MalformedPayloadError, MissingCredentialError, UpstreamTransportError

logger = logging.getLogger(__name__)


async def create_chat_completion(
    config: ServerConfig,
    model: str,
    messages: list[dict[str, Any]],
    response_format: dict[str, Any] | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> Any:
    """
    Send `messages` to {api_base_url}/chat/completions and return the completion object.
    Raises MissingCredentialError before any I/O when no API key is configured.
    """
    if not config.api_key:
        logger.warning("[upstream] no API_KEY configured; skipping call model=%s", model)
        raise MissingCredentialError("API key not provided")

    logger.info("[upstream] IN  model=%s messages=%d structured=%s", model, len(messages), response_format is not None)
    kwargs: dict[str, Any] = {"model": model, "messages": messages}
    if response_format is not None:
        kwargs["response_format"] = response_format
    try:
        async with AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.api_base_url,
            max_retries=0,
            http_client=http_client,
        ) as client:
            completion = await client.chat.completions.create(**kwargs)
    except OpenAIError as e:
        logger.warning("[upstream] request failed model=%s base_url=%s: %s", model, config.api_base_url, e)
        raise UpstreamTransportError(f"Upstream request failed: {e}") from e
    logger.info("[upstream] OUT model=%s choices=%d", model, len(getattr(completion, "choices", None) or []))
    return completion


def extract_message_content(completion: Any) -> Any:
    """
    Return choices[0].message.content exactly as the upstream sent it
    (str, object or list). Missing choices/message is a MalformedPayloadError.
    """
    choices = getattr(completion, "choices", None)
    if choices is None and isinstance(completion, dict):
        choices = completion.get("choices")
    if not choices:
        raise MalformedPayloadError("Completion has no choices")
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else getattr(first, "message", None)
    if message is None:
        raise MalformedPayloadError("Completion choice has no message")
    if isinstance(message, dict):
        return message.get("content")
    return getattr(message, "content", None)
