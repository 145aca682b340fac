"""
Tool entry points: document search and question answering.

Responsibility: Build the upstream messages, make the single upstream call and
normalize what comes back. These functions never raise; every failure is logged
with the tool and stage and turns into an empty ToolResult.
"""

import logging
from typing import Any

from rag_mcp.core.config import ServerConfig
from rag_mcp.core.errors import RagToolError
from rag_mcp.schemas.documents import DocumentCollection, ToolResult
from rag_mcp.services.normalizer import normalize_answer, normalize_documents
from rag_mcp.services.upstream_client import create_chat_completion, extract_message_content

logger = logging.getLogger(__name__)


def documents_response_format() -> dict[str, Any]:
    """json_schema response_format asking the upstream for a DocumentCollection."""
    return {
        "type": "json_schema",
        "json_schema": {
            "name": "rag_documents",
            "schema": DocumentCollection.model_json_schema(),
            "strict": False,
        },
    }


def build_qa_messages(question: str, system_prompt: str | None = None) -> list[dict[str, str]]:
    messages: list[dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": question})
    return messages


async def search_documents(query: str, config: ServerConfig) -> ToolResult:
    """
    Semantic search over the product's reference content.
    Returns one text item per retrieved document, in relevance order.
    """
    logger.info("[rag_tools:search_documents] IN  query=%r", query)
    query = (query or "").strip()
    if not query:
        return ToolResult(content=[])

    response_format = documents_response_format() if config.structured_output else None
    try:
        completion = await create_chat_completion(
            config,
            model=config.search_model,
            messages=[{"role": "user", "content": query}],
            response_format=response_format,
        )
        raw = extract_message_content(completion)
        items = normalize_documents(raw)
    except RagToolError as e:
        logger.warning("[rag_tools:search_documents] stage=%s failed: %s", e.stage, e.message)
        return ToolResult(content=[])
    except Exception:
        logger.exception("[rag_tools:search_documents] unexpected failure")
        return ToolResult(content=[])

    logger.info("[rag_tools:search_documents] OUT items=%d", len(items))
    return ToolResult(content=items)


async def ask_question(question: str, config: ServerConfig) -> ToolResult:
    """
    Ask the QA endpoint a question about the product.
    Returns a single text item with the answer, or nothing.
    """
    logger.info("[rag_tools:ask_question] IN  question=%r", question)
    question = (question or "").strip()
    if not question:
        return ToolResult(content=[])

    try:
        completion = await create_chat_completion(
            config,
            model=config.qa_model,
            messages=build_qa_messages(question, config.qa_system_prompt),
        )
        items = normalize_answer(extract_message_content(completion))
    except RagToolError as e:
        logger.warning("[rag_tools:ask_question] stage=%s failed: %s", e.stage, e.message)
        return ToolResult(content=[])
    except Exception:
        logger.exception("[rag_tools:ask_question] unexpected failure")
        return ToolResult(content=[])

    logger.info("[rag_tools:ask_question] OUT items=%d answer_len=%d", len(items), len(items[0].text) if items else 0)
    return ToolResult(content=items)
