"""Raysurfer MCP Server - stdio transport.

Exposes the Raysurfer code-caching API as MCP tools and resources.
Proxies to the Raysurfer REST API.
"""

import json
import sys
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, ToolAnnotations
from pydantic import Field

from config import (
    BASE_URL,
    HELP_URI,
    SERVER_NAME,
    STATUS_URI,
    TOOL_NAMES,
    VERSION,
    get_api_key,
    mask_api_key,
)
from models import FileWritten
from services.raysurfer_api import RaysurferClient
from utils.formatting import (
    format_patterns,
    format_search_results,
    format_upload_result,
    format_vote_result,
)
from utils.logging_ import logger
from utils.results import run_tool, to_call_result

mcp = FastMCP(
    SERVER_NAME,
    instructions=(
        "Raysurfer MCP server provides tools for searching, uploading, and voting on cached code snippets. "
        "Use raysurfer_search to find previously cached code before writing new code. "
        "Use raysurfer_upload after a successful execution to share code with the community cache. "
        "Use raysurfer_vote to rate cached code that was used. "
        "Use raysurfer_patterns to discover proven task-to-code mappings."
    ),
)
# FastMCP has no public version hook. This sets the low-level server's
# attribute (a FastMCP internal) so serverInfo reports our version.
mcp._mcp_server.version = VERSION

_client = RaysurferClient()

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False)
WRITES = ToolAnnotations(readOnlyHint=False, destructiveHint=False)

HELP_TEXT = "\n".join([
    "Raysurfer MCP Server - Code Caching Tools",
    "==========================================",
    "",
    "Available tools:",
    "",
    "1. raysurfer_search - Search for cached code matching a task",
    "   Use BEFORE writing new code to check for existing solutions.",
    "   Example: { task: 'Parse CSV file and generate summary stats' }",
    "",
    "2. raysurfer_upload - Upload code after a successful execution",
    "   Use AFTER completing a task to share your solution.",
    "   Example: { task: 'Parse CSV', file: { path: 'parser.py', content: '...' } }",
    "",
    "3. raysurfer_vote - Vote on cached code quality",
    "   Use to upvote code that worked or downvote code that did not.",
    "   Example: { code_block_id: 'abc-123', up: true }",
    "",
    "4. raysurfer_patterns - Get proven task-to-code patterns",
    "   Use to discover validated code patterns from the community.",
    "   Example: { task: 'data processing', top_k: 5 }",
    "",
    "Recommended workflow:",
    "  1. Search for cached code before starting a task",
    "  2. Use cached code if a good match exists",
    "  3. Vote on the cached code after using it",
    "  4. Upload new code after completing novel tasks",
])


# ─── Tools ──────────────────────────────────────────────────────

@mcp.tool(
    name="raysurfer_search",
    title="Search Cached Code",
    description=(
        "Search for cached code snippets matching a task description. "
        "Returns ranked matches with source code, scores, and metadata. "
        "Use this before writing new code to check if a solution already exists."
    ),
    annotations=READ_ONLY,
    structured_output=False,
)
async def raysurfer_search(
    task: Annotated[str, Field(description="Task description to search for")],
    top_k: Annotated[int, Field(ge=1, le=100, description="Number of results to return (1-100, default 5)")] = 5,
    min_score: Annotated[float, Field(ge=0, le=1, description="Minimum verdict score threshold (0-1, default 0.3)")] = 0.3,
    public_snips: Annotated[bool, Field(description="Include community public snippets in results (default false)")] = False,
) -> CallToolResult:
    logger.info(f"raysurfer_search: top_k={top_k}, min_score={min_score}, public_snips={public_snips}")

    async def handler() -> str:
        data = await _client.search(task, top_k=top_k, min_score=min_score, public_snips=public_snips)
        return format_search_results(data)

    return to_call_result(await run_tool("Search failed", handler))


@mcp.tool(
    name="raysurfer_upload",
    title="Upload Code to Cache",
    description=(
        "Upload code files from a successful execution to the Raysurfer cache. "
        "This stores the code so it can be reused by others for similar tasks. "
        "Call this after completing a coding task successfully."
    ),
    annotations=WRITES,
    structured_output=False,
)
async def raysurfer_upload(
    task: Annotated[str, Field(description="Task description that this code accomplishes")],
    file: Annotated[FileWritten, Field(description="File to upload to the cache")],
    succeeded: Annotated[bool, Field(description="Whether the execution succeeded (default true)")] = True,
) -> CallToolResult:
    logger.info(f"raysurfer_upload: path={file.path}, succeeded={succeeded}")

    async def handler() -> str:
        return format_upload_result(await _client.upload(task, file, succeeded=succeeded))

    return to_call_result(await run_tool("Upload failed", handler))


@mcp.tool(
    name="raysurfer_vote",
    title="Vote on Cached Code",
    description=(
        "Vote on whether a cached code snippet was useful. "
        "Upvote code that worked well, downvote code that did not help. "
        "This improves ranking for future searches."
    ),
    annotations=WRITES,
    structured_output=False,
)
async def raysurfer_vote(
    code_block_id: Annotated[str, Field(description="ID of the code block to vote on")],
    code_block_name: Annotated[str, Field(description="Name of the code block being voted on")],
    code_block_description: Annotated[str, Field(description="Description of the code block being voted on")],
    task: Annotated[str, Field(description="Task description for vote context")],
    up: Annotated[bool, Field(description="True for upvote (worked), false for downvote (default true)")] = True,
) -> CallToolResult:
    logger.info(f"raysurfer_vote: code_block_id={code_block_id}, up={up}")

    async def handler() -> str:
        data = await _client.vote(code_block_id, code_block_name, code_block_description, task, up=up)
        return format_vote_result(data, code_block_id, up)

    return to_call_result(await run_tool("Vote failed", handler))


@mcp.tool(
    name="raysurfer_patterns",
    title="Get Proven Patterns",
    description=(
        "Get proven task-to-code patterns from the community cache. "
        "These are code snippets that have been repeatedly validated by users. "
        "Optionally filter by task description."
    ),
    annotations=READ_ONLY,
    structured_output=False,
)
async def raysurfer_patterns(
    task: Annotated[Optional[str], Field(description="Optional task description to filter patterns")] = None,
    top_k: Annotated[int, Field(ge=1, le=100, description="Number of patterns to return (default 10)")] = 10,
) -> CallToolResult:
    logger.info(f"raysurfer_patterns: filtered={task is not None}, top_k={top_k}")

    async def handler() -> str:
        return format_patterns(await _client.patterns(task, top_k=top_k))

    return to_call_result(await run_tool("Patterns lookup failed", handler))


# ─── Resources ──────────────────────────────────────────────────

@mcp.resource(
    HELP_URI,
    name="help",
    title="Raysurfer Help",
    description="Help text about available Raysurfer tools and workflow",
    mime_type="text/plain",
)
def raysurfer_help() -> str:
    return HELP_TEXT


@mcp.resource(
    STATUS_URI,
    name="status",
    title="Raysurfer Status",
    description="Connection status and configuration for the Raysurfer MCP server",
    mime_type="application/json",
)
async def raysurfer_status() -> str:
    """Report configuration and API reachability.

    The health probe only runs when an API key is configured, so an
    unconfigured server never touches the network.
    """
    api_key = get_api_key()
    configured = api_key is not None
    api_reachable = await _client.check_health() if configured else False

    status = {
        "server": SERVER_NAME,
        "version": VERSION,
        "api_key": mask_api_key(api_key),
        "api_configured": configured,
        "api_reachable": api_reachable,
        "base_url": BASE_URL,
        "tools": TOOL_NAMES,
    }
    return json.dumps(status, indent=2)


def main():
    """Run the MCP server on stdio."""
    logger.info(f"Raysurfer MCP Server v{VERSION} running on stdio ({BASE_URL})")
    try:
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()
