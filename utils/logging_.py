"""Logging setup for the Raysurfer MCP server.

stdout carries the MCP stdio protocol, so console output goes to stderr.
"""

import logging
import sys

from config import LOG_LEVEL, LOGS_DIR


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the server logger."""
    logger = logging.getLogger("raysurfer-mcp")
    logger.setLevel(level)
    # FastMCP installs a root handler; don't emit every record twice.
    logger.propagate = False
    if logger.handlers:
        return logger

    # Console handler
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console_fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console.setFormatter(console_fmt)
    logger.addHandler(console)

    # File handler (opt-in)
    if LOGS_DIR is not None:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOGS_DIR / "raysurfer-mcp.log")
        file_handler.setLevel(level)
        file_handler.setFormatter(console_fmt)
        logger.addHandler(file_handler)

    return logger


logger = setup_logging(getattr(logging, LOG_LEVEL, logging.INFO))
