"""Tests for tool outcome handling."""

import pytest

from exceptions import ConfigurationError, RaysurferAPIError
from utils.results import ToolOutcome, run_tool, to_call_result


class TestToCallResult:

    def test_success(self):
        result = to_call_result(ToolOutcome.ok("done"))
        assert result.isError is False
        assert result.content[0].type == "text"
        assert result.content[0].text == "done"

    def test_failure_flagged(self):
        result = to_call_result(ToolOutcome.failure("broken"))
        assert result.isError is True
        assert result.content[0].text == "broken"


class TestRunTool:

    @pytest.mark.asyncio
    async def test_success(self):
        async def handler():
            return "ok"

        assert await run_tool("X failed", handler) == ToolOutcome.ok("ok")

    @pytest.mark.asyncio
    async def test_configuration_error(self):
        async def handler():
            raise ConfigurationError("no key")

        outcome = await run_tool("X failed", handler)
        assert outcome == ToolOutcome.failure("X failed: no key")

    @pytest.mark.asyncio
    async def test_api_error_carries_status(self):
        async def handler():
            raise RaysurferAPIError(502, "bad gateway")

        outcome = await run_tool("X failed", handler)
        assert outcome.is_error
        assert "502" in outcome.text

    @pytest.mark.asyncio
    async def test_unexpected_error_without_message(self):
        async def handler():
            raise RuntimeError()

        outcome = await run_tool("X failed", handler)
        assert outcome == ToolOutcome.failure("X failed: Unknown error occurred")
