# Run from project root: uvicorn rag_mcp.main:app --reload

import logging

from fastapi import FastAPI

from rag_mcp.api.routes import router
from rag_mcp.core.config import get_config
from rag_mcp.core.logging_setup import setup_logging
from rag_mcp.mcp.server import mcp_router

setup_logging(get_config().log_level)
logger = logging.getLogger(__name__)


app = FastAPI(title="Product RAG Tool Server")
app.include_router(router)
app.include_router(mcp_router, prefix="/mcp")


if __name__ == "__main__":
    import uvicorn

    logger.info("Product RAG tool server booting...")
    uvicorn.run(app, host="0.0.0.0", port=8000)
