"""
System routes: status, health and the public configuration view. No tool logic here.
"""

import logging

from fastapi import APIRouter, Depends

from rag_mcp.core.config import ServerConfig, get_config

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", tags=["system"])
def root():
    return {"status": "Product RAG tool server running"}


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


@router.get(
    "/config",
    tags=["system"],
    summary="Public configuration",
    description="Resolved endpoint, models and product identity. The API key is reported only as configured or not.",
)
def get_public_config(config: ServerConfig = Depends(get_config)) -> dict:
    return config.public_view()
