"""Tool outcomes and their conversion into MCP tool results.

Handlers return a ToolOutcome instead of raising; ``to_call_result`` is
the only place an outcome becomes a protocol envelope.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable

from mcp.types import CallToolResult, TextContent

from exceptions import RaysurferError
from utils.logging_ import logger


@dataclass(frozen=True)
class ToolOutcome:
    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolOutcome":
        return cls(text=text)

    @classmethod
    def failure(cls, text: str) -> "ToolOutcome":
        return cls(text=text, is_error=True)


def to_call_result(outcome: ToolOutcome) -> CallToolResult:
    """Wrap an outcome in a text content block, flagging errors."""
    return CallToolResult(
        content=[TextContent(type="text", text=outcome.text)],
        isError=outcome.is_error,
    )


async def run_tool(label: str, handler: Callable[[], Awaitable[str]]) -> ToolOutcome:
    """Await a handler and turn any failure into an error outcome.

    Args:
        label: Prefix for failure text, e.g. "Search failed"
        handler: Zero-arg coroutine factory returning the success text
    """
    try:
        return ToolOutcome.ok(await handler())
    except RaysurferError as e:
        logger.warning(f"{label}: {e}")
        return ToolOutcome.failure(f"{label}: {e}")
    except Exception as e:
        logger.exception(f"{label}: unexpected error")
        return ToolOutcome.failure(f"{label}: {str(e) or 'Unknown error occurred'}")
