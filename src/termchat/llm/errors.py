"""Failure taxonomy for completion requests.

Hides which SDK raised what: every provider translates its own exceptions
into one of these, so callers only ever see a GatewayError.
"""


class GatewayError(Exception):
    """A completion request failed."""

    kind = "error"

    def __init__(self, message: str, *, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider

    def describe(self) -> str:
        """Short human-readable summary for status lines."""
        return f"{self.kind}: {self}"


class GatewayConnectionError(GatewayError):
    """The endpoint could not be reached."""

    kind = "network error"


class GatewayTimeoutError(GatewayConnectionError):
    """The endpoint did not answer within the configured timeout."""

    kind = "timeout"


class GatewayResponseError(GatewayError):
    """The endpoint answered with an error status or an unusable payload."""

    kind = "bad response"

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, provider=provider)
        self.status_code = status_code
