"""
Tool registry: names, titles, descriptions and hints templated from the product identity.

Changing PRODUCT_SLUG / PRODUCT_NAME changes the tool names clients discover.
"""

from rag_mcp.core.config import ServerConfig
from rag_mcp.schemas.documents import ToolResult
from rag_mcp.schemas.tools import QuestionRequest, SearchRequest, ToolAnnotationHints, ToolSpec
from rag_mcp.services.rag_tools import ask_question, search_documents


async def _search_handler(query: str, config: ServerConfig) -> ToolResult:
    return await search_documents(query, config)


async def _question_handler(question: str, config: ServerConfig) -> ToolResult:
    return await ask_question(question, config)


def search_tool_name(config: ServerConfig) -> str:
    return f"search-{config.product_slug}-docs"


def question_tool_name(config: ServerConfig) -> str:
    return f"ask-question-about-{config.product_slug}"


def build_tool_specs(config: ServerConfig) -> list[ToolSpec]:
    """Both tools, in discovery order."""
    name = config.product_name
    search_title = f"Search {name} docs"
    question_title = f"Ask a question about {name}"
    return [
        ToolSpec(
            name=search_tool_name(config),
            title=search_title,
            description=f"Use this tool to do a semantic search for reference content related to {name}.",
            argument="query",
            request_model=SearchRequest,
            annotations=ToolAnnotationHints(title=search_title),
            handler=_search_handler,
        ),
        ToolSpec(
            name=question_tool_name(config),
            title=question_title,
            description=(
                f"Use this tool to ask a question about {name} to an AI Support Agent "
                f"that is knowledgeable about {name}."
            ),
            argument="question",
            request_model=QuestionRequest,
            annotations=ToolAnnotationHints(title=question_title),
            handler=_question_handler,
        ),
    ]


def find_tool(config: ServerConfig, tool_name: str) -> ToolSpec | None:
    for spec in build_tool_specs(config):
        if spec.name == tool_name:
            return spec
    return None
