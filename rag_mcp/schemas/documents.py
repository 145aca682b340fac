"""Schemas for upstream RAG documents and the tool result contract."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """One retrieved reference unit. Unknown fields are kept (the upstream schema evolves on its own)."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Document kind, e.g. 'document'.")
    source: Any = Field(..., description="Producer-specific payload; usually {type, content|text, ...}.")
    title: str | None = None
    context: str | None = None
    record_type: str | None = None
    url: str | None = None


class DocumentCollection(BaseModel):
    """The `{content: Document[]}` envelope, in upstream relevance order."""

    model_config = ConfigDict(extra="allow")

    content: list[Document] = Field(default_factory=list)


class TextItem(BaseModel):
    """One normalized snippet or answer as returned to the caller."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Tool output. An empty content list means "no results", never an error."""

    content: list[TextItem] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [{"content": [{"type": "text", "text": "Intro\n\nHello\n\nSource: https://docs.example.com/intro"}]}]
        }
    }
