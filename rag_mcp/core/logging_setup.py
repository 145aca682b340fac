"""
Logging setup shared by the HTTP app and the MCP entry point.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", stream=None) -> None:
    """
    Configure root logging once. The MCP stdio host passes sys.stderr because
    stdout carries the JSON-RPC stream.
    """
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=stream or sys.stdout)
    # openai/httpx log every request at INFO
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
