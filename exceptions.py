"""Custom exceptions for the Raysurfer MCP server."""


class RaysurferError(Exception):
    """Base exception for Raysurfer API failures."""
    pass


class ConfigurationError(RaysurferError):
    """The server is missing required configuration (e.g. the API key)."""
    pass


class RaysurferAPIError(RaysurferError):
    """The Raysurfer API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Raysurfer API error ({status_code}): {body}")


class RaysurferTransportError(RaysurferError):
    """The request never got an HTTP response (unreachable host, timeout)."""
    pass
