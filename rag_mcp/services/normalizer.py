"""
Response normalization: upstream message content -> list of TextItem.

Responsibility: Accept whatever shape the retrieval endpoint sent back (JSON string,
structured object, bare document array, schema-constrained object), validate it
against DocumentCollection and flatten each Document into plain text. Nothing in
here raises; malformed input degrades to an empty list.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from rag_mcp.schemas.documents import Document, DocumentCollection, TextItem

logger = logging.getLogger(__name__)

NO_CONTENT_PLACEHOLDER = "No content available"


def parse_documents(raw: Any) -> list[Document]:
    """
    Parse raw message content into Documents, in upstream order.

    A single invalid document rejects the whole batch (returns []).
    """
    if raw is None:
        return []
    if isinstance(raw, DocumentCollection):
        return list(raw.content)

    data = raw
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("[normalizer:parse_documents] content is not valid JSON: %s", e)
            return []

    # Oldest upstream variant: the documents array itself
    if isinstance(data, list):
        data = {"content": data}

    if not isinstance(data, dict):
        logger.warning("[normalizer:parse_documents] unexpected payload type %s", type(data).__name__)
        return []

    content = data.get("content")
    if not isinstance(content, list):
        logger.info("[normalizer:parse_documents] payload has no content list; keys=%s", sorted(data)[:10])
        return []

    try:
        collection = DocumentCollection.model_validate({"content": content})
    except ValidationError as e:
        logger.warning(
            "[normalizer:parse_documents] rejected batch of %d documents: %d validation errors (first: %s)",
            len(content), e.error_count(), e.errors()[0].get("msg") if e.errors() else "",
        )
        return []
    logger.info("[normalizer:parse_documents] OUT documents=%d", len(collection.content))
    return collection.content


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(value)


def _source_body(source: Any) -> str:
    """Text body of a document source: nested content texts, then text, then the stringified source."""
    if isinstance(source, dict):
        items = source.get("content")
        if isinstance(items, list):
            texts = [item["text"] for item in items if isinstance(item, dict) and isinstance(item.get("text"), str)]
            if texts:
                return "\n".join(texts)
        text = source.get("text")
        if isinstance(text, str):
            return text
    return _stringify(source)


def document_text(doc: Document) -> str:
    """Flatten one Document: optional title, body (or placeholder), optional source URL."""
    body = _source_body(doc.source) or NO_CONTENT_PLACEHOLDER
    text = body
    if doc.title:
        text = f"{doc.title}\n\n{text}"
    if doc.url:
        text = f"{text}\n\nSource: {doc.url}"
    return text


def normalize_documents(raw: Any) -> list[TextItem]:
    """Document search path: raw content -> one TextItem per Document."""
    return [TextItem(text=document_text(doc)) for doc in parse_documents(raw)]


def normalize_answer(raw: Any) -> list[TextItem]:
    """QA path: plain prose, passed through unmodified when non-blank."""
    if raw is None:
        return []
    if not isinstance(raw, str):
        logger.warning("[normalizer:normalize_answer] expected text answer, got %s", type(raw).__name__)
        return []
    if not raw.strip():
        return []
    return [TextItem(text=raw)]
