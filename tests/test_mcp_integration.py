"""
Integration tests for MCP tool endpoints.

The config dependency is overridden and the tool coroutines are mocked, so tests
do not need an API key or network access.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from rag_mcp.core.config import ServerConfig, get_config
from rag_mcp.main import app
from rag_mcp.schemas.documents import TextItem, ToolResult

TEST_CONFIG = ServerConfig(api_key="test-key", product_slug="acme", product_name="Acme")


@pytest.fixture
def client() -> TestClient:
    app.dependency_overrides[get_config] = lambda: TEST_CONFIG
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_mcp_list_tools_uses_product_identity(client: TestClient) -> None:
    """GET /mcp/tools returns both tools with names templated from the product slug."""
    response = client.get("/mcp/tools")
    assert response.status_code == 200
    tools = response.json()["tools"]
    assert [t["name"] for t in tools] == ["search-acme-docs", "ask-question-about-acme"]
    assert "Acme" in tools[0]["description"]
    assert tools[0]["input_schema"] == {
        "type": "object",
        "properties": {"query": {"type": "string"}},
        "required": ["query"],
    }
    assert tools[1]["input_schema"]["required"] == ["question"]
    assert tools[0]["annotations"]["readOnlyHint"] is True
    assert tools[0]["annotations"]["openWorldHint"] is True


def test_mcp_search_returns_content(client: TestClient) -> None:
    """POST /mcp/tools/search-acme-docs returns 200 and { content: [{ type, text }] }."""
    fake = ToolResult(content=[TextItem(text="Intro\n\nHello"), TextItem(text="Second")])
    with patch("rag_mcp.mcp.registry.search_documents", AsyncMock(return_value=fake)) as mock_search:
        response = client.post("/mcp/tools/search-acme-docs", json={"query": "intro"})
    assert response.status_code == 200
    assert response.json() == {
        "content": [{"type": "text", "text": "Intro\n\nHello"}, {"type": "text", "text": "Second"}]
    }
    mock_search.assert_awaited_once_with("intro", TEST_CONFIG)


def test_mcp_question_returns_answer(client: TestClient) -> None:
    fake = ToolResult(content=[TextItem(text="Paris is the capital of France.")])
    with patch("rag_mcp.mcp.registry.ask_question", AsyncMock(return_value=fake)):
        response = client.post("/mcp/tools/ask-question-about-acme", json={"question": "Capital?"})
    assert response.status_code == 200
    assert response.json() == {"content": [{"type": "text", "text": "Paris is the capital of France."}]}


def test_mcp_unknown_tool_returns_404(client: TestClient) -> None:
    response = client.post("/mcp/tools/search-product-content", json={"query": "x"})
    assert response.status_code == 404


def test_mcp_missing_argument_returns_422(client: TestClient) -> None:
    """POST without body, or with the wrong argument name, returns 422."""
    with patch("rag_mcp.mcp.registry.search_documents") as mock_search:
        assert client.post("/mcp/tools/search-acme-docs").status_code == 422
        assert client.post("/mcp/tools/search-acme-docs", json={"question": "x"}).status_code == 422
    mock_search.assert_not_called()


def test_mcp_search_without_api_key_returns_empty(client: TestClient) -> None:
    """Missing credentials are not an HTTP error: the tool returns no results."""
    app.dependency_overrides[get_config] = lambda: ServerConfig(product_slug="acme")
    with patch("rag_mcp.services.upstream_client.AsyncOpenAI") as mock_openai:
        response = client.post("/mcp/tools/search-acme-docs", json={"query": "x"})
    assert response.status_code == 200
    assert response.json() == {"content": []}
    mock_openai.assert_not_called()


def test_health_and_public_config(client: TestClient) -> None:
    assert client.get("/health").json() == {"ok": True}
    data = client.get("/config").json()
    assert data["api_key_configured"] is True
    assert "api_key" not in data
    assert data["product_slug"] == "acme"
