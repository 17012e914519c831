"""
Exceptions raised by the Deluge client.

- DelugeClientError: Base exception for every runtime failure
- TransportError: Connection failure or a non-200 HTTP status
- ResponseParseError: Response body is not a JSON envelope of the expected shape
- RpcError: The daemon answered with a non-zero error code
- AuthenticationError: auth.login did not return true

Construction with an empty URL or password raises ValueError instead, since
that is a caller bug rather than a runtime condition.
"""

from typing import Optional


class DelugeClientError(Exception):
    """Base exception for Deluge client errors."""
    pass


class TransportError(DelugeClientError):
    """Raised when the request cannot reach the daemon or gets a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ResponseParseError(DelugeClientError):
    """Raised when the response body cannot be decoded into an envelope."""
    pass


class RpcError(DelugeClientError):
    """Raised when the daemon reports an error in the response envelope."""

    def __init__(self, code: int, message: str):
        super().__init__(f"error code {code}! {message}")
        self.code = code
        self.message = message


class AuthenticationError(RpcError):
    """Raised when the daemon rejects the password."""
    pass
