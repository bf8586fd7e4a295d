"""Exception classes for the subcl Subsonic client."""

from typing import Dict, Optional, Type


class SubclError(Exception):
    """Base exception for all subcl errors."""

    pass


class ConfigurationError(SubclError):
    """A required setting is missing or a setting has an unusable value."""

    pass


class ProtocolError(SubclError):
    """The service reported an application-level error in its response body.

    Raised even when the HTTP status was 200.

    Attributes:
        code: Subsonic error code from the ``error`` element
        message: Error message from the ``error`` element
    """

    def __init__(self, code: int, message: str):
        """Initialize protocol error.

        Args:
            code: Subsonic error code (0, 10, 20, 30, 40, 41, 50, 60, 70)
            message: Human-readable error message reported by the server
        """
        self.code = code
        self.message = message
        super().__init__(f"{message} ({code})")

    @classmethod
    def from_code(cls, code: int, message: str) -> "ProtocolError":
        """Build the most specific ProtocolError subclass for ``code``."""
        error_class = _ERROR_CODES.get(code, ProtocolError)
        return error_class(code, message)


class MissingParameterError(ProtocolError):
    """Required parameter missing (error code 10)."""

    pass


class VersionMismatchError(ProtocolError):
    """Client or server must upgrade (error codes 20, 30)."""

    pass


class AuthenticationError(ProtocolError):
    """Wrong username or password (error codes 40, 41)."""

    pass


class AuthorizationError(ProtocolError):
    """User is not authorized for the requested operation (error code 50)."""

    pass


class TrialExpiredError(ProtocolError):
    """Server trial period is over (error code 60)."""

    pass


class NotFoundError(ProtocolError):
    """Requested song, album, artist or playlist does not exist (error code 70)."""

    pass


_ERROR_CODES: Dict[int, Type[ProtocolError]] = {
    10: MissingParameterError,
    20: VersionMismatchError,
    30: VersionMismatchError,
    40: AuthenticationError,
    41: AuthenticationError,
    50: AuthorizationError,
    60: TrialExpiredError,
    70: NotFoundError,
}


class TransportError(SubclError):
    """The HTTP exchange itself failed.

    Attributes:
        status_code: HTTP status of the response, or None when no response
            was received at all (connection refused, DNS failure, ...)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int) -> "TransportError":
        if status_code == 401:
            return cls("HTTP 401. Might be an incorrect username/password", status_code)
        return cls(f"HTTP {status_code}", status_code)


class SubclArgumentError(SubclError, ValueError):
    """The caller passed an invalid value (empty stream URL, missing song id, ...)."""

    pass


class UnsupportedOperationError(SubclError):
    """Operation requested for an entity kind or search category it does not support."""

    pass


class PlayerError(SubclError):
    """The external media player command failed."""

    pass
