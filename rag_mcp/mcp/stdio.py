"""
MCP protocol host for the same tools, via the mcp SDK (FastMCP).

Run: python -m rag_mcp.mcp.stdio --transport stdio
"""

import argparse
import logging
import sys

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent, ToolAnnotations

from rag_mcp.core.config import ServerConfig, get_config
from rag_mcp.core.logging_setup import setup_logging
from rag_mcp.mcp.registry import build_tool_specs
from rag_mcp.schemas.documents import ToolResult
from rag_mcp.schemas.tools import ToolSpec

logger = logging.getLogger(__name__)


def to_text_content(result: ToolResult) -> list[TextContent]:
    return [TextContent(type="text", text=item.text) for item in result.content]


def _tool_function(spec: ToolSpec, config: ServerConfig):
    # FastMCP derives the input schema from the parameter name, so each tool gets its own signature
    if spec.argument == "query":
        async def tool_fn(query: str) -> list[TextContent]:
            return to_text_content(await spec.handler(query, config))
    else:
        async def tool_fn(question: str) -> list[TextContent]:
            return to_text_content(await spec.handler(question, config))
    tool_fn.__name__ = spec.name.replace("-", "_")
    tool_fn.__doc__ = spec.description
    return tool_fn


def build_mcp_server(config: ServerConfig, host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """FastMCP server with one tool per registry entry."""
    server = FastMCP(f"{config.product_name} RAG tools", host=host, port=port)
    for spec in build_tool_specs(config):
        server.add_tool(
            _tool_function(spec, config),
            name=spec.name,
            title=spec.title,
            description=spec.description,
            annotations=ToolAnnotations(**spec.annotations.model_dump()),
            structured_output=False,
        )
        logger.info("[mcp] registered tool %s", spec.name)
    return server


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Product RAG MCP server")
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "sse", "streamable-http"],
        help="MCP transport (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host for sse/streamable-http")
    parser.add_argument("--port", type=int, default=8000, help="Bind port for sse/streamable-http")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Overrides LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    config = get_config()
    # stdout is the JSON-RPC channel under stdio
    setup_logging(args.log_level or config.log_level, stream=sys.stderr)
    if not config.api_key_configured:
        logger.warning("API_KEY is not set; tools will return empty results")
    server = build_mcp_server(config, host=args.host, port=args.port)
    logger.info("Starting MCP server transport=%s", args.transport)
    server.run(transport=args.transport)


if __name__ == "__main__":
    main()
