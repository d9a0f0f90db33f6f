"""Exception classes for roku_client library."""

from __future__ import annotations


class RokuError(Exception):
    """Base exception for all Roku client errors."""


class RokuNoDevicesFoundError(RokuError):
    """Raised when discovery finishes without any device answering."""

    def __init__(self, message: str = "No Roku devices found", timeout: float | None = None) -> None:
        """Initialize with the discovery window that elapsed.

        Args:
            message: The error message
            timeout: Discovery window in seconds
        """
        self.timeout = timeout
        super().__init__(message)

    def __str__(self) -> str:
        """String representation with the elapsed window."""
        if self.timeout is not None:
            return f"{super().__str__()} (timeout={self.timeout}s)"
        return super().__str__()


class RokuRequestFailedError(RokuError):
    """Raised when the device answers with a non-2xx HTTP status.

    Carries the status and reason so callers can decide what to do.
    """

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        status: int | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize request error with response context.

        Args:
            message: The error message
            endpoint: URL that failed
            status: HTTP status code returned by the device
            reason: HTTP reason phrase returned by the device
        """
        self.endpoint = endpoint
        self.status = status
        self.reason = reason
        super().__init__(message)

    def __str__(self) -> str:
        """Enhanced string representation with context."""
        context_parts = []
        if self.status is not None:
            status = f"{self.status} {self.reason}" if self.reason else str(self.status)
            context_parts.append(f"status={status}")
        if self.endpoint:
            context_parts.append(f"endpoint={self.endpoint}")

        if context_parts:
            return f"{super().__str__()} ({', '.join(context_parts)})"
        return super().__str__()


class RokuProtocolError(RokuError):
    """The device responded with data of an unexpected shape."""

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        self.endpoint = endpoint
        super().__init__(message)

    def __str__(self) -> str:
        if self.endpoint:
            return f"{super().__str__()} (endpoint={self.endpoint})"
        return super().__str__()


class RokuValidationError(RokuError, ValueError):
    """An argument supplied by the caller is invalid."""
