"""Raysurfer MCP configuration.

All config comes from environment variables. The API key is looked up
on every call so the server can be reconfigured without a restart.
"""

import os
from pathlib import Path
from typing import Optional


def env_seconds(name: str) -> Optional[float]:
    """Read a duration in seconds from the environment. Unset or blank is None."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


# ─── Server ─────────────────────────────────────────────────────
SERVER_NAME = "raysurfer-code-caching-mcp"
VERSION = "1.0.2"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOGS_DIR = Path(os.environ["LOGS_DIR"]) if os.environ.get("LOGS_DIR") else None

# ─── Raysurfer API ──────────────────────────────────────────────
API_KEY_ENV = "RAYSURFER_API_KEY"
BASE_URL = os.environ.get("RAYSURFER_BASE_URL", "https://api.raysurfer.com").rstrip("/")
SDK_VERSION_HEADER = "X-Raysurfer-SDK-Version"
PUBLIC_SNIPS_HEADER = "X-Raysurfer-Public-Snips"
SIGNUP_URL = "https://www.raysurfer.com"

# Unset means no timeout on API calls; only the health probe is bounded.
API_TIMEOUT_SECONDS: Optional[float] = env_seconds("RAYSURFER_API_TIMEOUT")
HEALTH_TIMEOUT_SECONDS = 5.0

# ─── Endpoints ──────────────────────────────────────────────────
SEARCH_PATH = "/api/retrieve/search"
UPLOAD_PATH = "/api/store/execution-result"
VOTE_PATH = "/api/store/cache-usage"
PATTERNS_PATH = "/api/retrieve/task-patterns"
HEALTH_PATH = "/health"

# ─── Tools / resources ──────────────────────────────────────────
TOOL_NAMES = [
    "raysurfer_search",
    "raysurfer_upload",
    "raysurfer_vote",
    "raysurfer_patterns",
]
HELP_URI = "raysurfer://help"
STATUS_URI = "raysurfer://status"

# Fixed request flags
PREFER_COMPLETE = True
USE_AI_VOTING = True
PATTERNS_MIN_THUMBS_UP = 1


def get_api_key() -> Optional[str]:
    """Read the Raysurfer API key from the environment."""
    return os.environ.get(API_KEY_ENV) or None


def mask_api_key(api_key: Optional[str]) -> str:
    """Show the first 6 and last 4 characters of a key, eliding the rest.

    Keys of 10 characters or fewer come back as ``***``: showing six plus
    four of them would print the whole key.
    """
    if not api_key:
        return "not set"
    if len(api_key) <= 10:
        return "***"
    return f"{api_key[:6]}...{api_key[-4:]}"
