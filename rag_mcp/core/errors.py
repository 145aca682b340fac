"""
Tool errors.

Every failure on the way to the upstream provider and back is one of these. None
of them is fatal: the tool entry points log them and return an empty result, so
the stage attribute is what operators use to tell where a call died.
"""


class RagToolError(Exception):
    """Base for recoverable tool failures."""

    stage = "unknown"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingCredentialError(RagToolError):
    """Raised when no API key is configured; no network call is attempted."""

    stage = "config"


class UpstreamTransportError(RagToolError):
    """Raised when the completion request fails (connection, HTTP status, decoding)."""

    stage = "upstream"


class MalformedPayloadError(RagToolError):
    """Raised when the completion comes back without a usable message."""

    stage = "normalize"
