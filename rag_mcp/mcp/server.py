"""
MCP-style tool server over HTTP: exposes document search and question answering
as a standardized tool interface for external agents.

Tool names are templated from the product identity, so invocation is routed by
name: POST /mcp/tools/{tool_name}. Tool failures never surface as HTTP errors;
they come back as {"content": []}.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from rag_mcp.core.config import ServerConfig, get_config
from rag_mcp.mcp.registry import build_tool_specs, find_tool
from rag_mcp.schemas.documents import ToolResult

logger = logging.getLogger(__name__)

mcp_router = APIRouter(tags=["mcp"])


@mcp_router.get(
    "/tools",
    summary="MCP tool discovery",
    description="List the tools this server exposes, with input schema and behaviour hints.",
)
def mcp_list_tools(config: ServerConfig = Depends(get_config)) -> dict[str, list[dict[str, Any]]]:
    """Tool discovery: name, title, description, input_schema, annotations."""
    return {"tools": [spec.describe() for spec in build_tool_specs(config)]}


@mcp_router.post(
    "/tools/{tool_name}",
    response_model=ToolResult,
    summary="MCP tool invocation",
    description="Invoke a tool by name. Body is {query} for search and {question} for QA. Returns {content: [{type, text}]}.",
)
async def mcp_call_tool(
    tool_name: str,
    body: dict[str, Any] | None = Body(default=None),
    config: ServerConfig = Depends(get_config),
) -> ToolResult:
    """
    This endpoint acts as an MCP tool server,
    allowing external agents to call retrieval
    through a standardized interface.
    """
    spec = find_tool(config, tool_name)
    if spec is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name!r}")
    try:
        request = spec.request_model.model_validate(body or {})
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False)) from e

    logger.info("MCP tool called: %s", spec.name)
    return await spec.handler(getattr(request, spec.argument), config)
