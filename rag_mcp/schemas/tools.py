"""Schemas for tool requests and tool descriptors."""

from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field

from rag_mcp.schemas.documents import ToolResult


class SearchRequest(BaseModel):
    """Request body for the document search tool."""

    query: str = Field(..., description="Free-text search query.")


class QuestionRequest(BaseModel):
    """Request body for the question-answer tool."""

    question: str = Field(..., description="Free-text question.")


class ToolAnnotationHints(BaseModel):
    """Behaviour hints published with a tool (MCP tool annotations)."""

    title: str
    readOnlyHint: bool = True
    openWorldHint: bool = True


class ToolSpec(BaseModel):
    """A registered tool: discoverable identity plus the coroutine that serves it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    title: str
    description: str
    argument: str = Field(..., description="Name of the single required string argument.")
    request_model: type[BaseModel]
    annotations: ToolAnnotationHints
    handler: Callable[..., Awaitable[ToolResult]] = Field(exclude=True)

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {self.argument: {"type": "string"}},
            "required": [self.argument],
        }

    def describe(self) -> dict[str, Any]:
        """Discovery entry, same shape the MCP tools/list response uses."""
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "input_schema": self.input_schema(),
            "annotations": self.annotations.model_dump(),
        }
