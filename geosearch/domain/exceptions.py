"""Domain exceptions for location search.

Every failure a caller of the search coordinator can observe, other than
task cancellation, is one of these. Cancellation is never wrapped: it
propagates as asyncio.CancelledError so callers can tell "I cancelled
this" apart from "this failed".
"""

from typing import Any


class LocationSearchException(Exception):
    """Base exception for all location search errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. query length, provider code).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class DebouncedException(LocationSearchException):
    """Raised when a newer search arrived before this one's debounce delay elapsed.

    Expected while the user is typing; callers usually ignore it.
    """

    def __init__(self) -> None:
        super().__init__("Debounced", "DEBOUNCED")


class DuplicateQueryException(LocationSearchException):
    """Raised when the same text is searched twice in a row."""

    def __init__(self, query: str) -> None:
        """Initialize with the repeated query.

        Args:
            query: The text that matched the previous query.
        """
        super().__init__(
            "Search criteria cannot be repeated",
            "DUPLICATE_QUERY",
            {"query": query},
        )


class InvalidCriteriaException(LocationSearchException):
    """Raised when the query is shorter than the configured minimum length."""

    def __init__(self, query_length: int, min_length: int) -> None:
        """Initialize with actual and required lengths.

        Args:
            query_length: Number of characters in the rejected query.
            min_length: Minimum number of characters required to search.
        """
        super().__init__(
            "Search criteria must meet minimum character requirements",
            "INVALID_CRITERIA",
            {"query_length": query_length, "min_length": min_length},
        )


class SearchFailedException(LocationSearchException):
    """Raised when the provider fails in an unclassified way.

    Also covers the provider answering with neither an error nor a response.
    """

    def __init__(self, reason: str | None = None) -> None:
        """Initialize with an optional reason.

        Args:
            reason: Optional description of what went wrong.
        """
        details = {"reason": reason} if reason else {}
        super().__init__("Unable to complete location search", "SEARCH_FAILED", details)


class ProviderException(LocationSearchException):
    """Raised when the provider reports a specific, structured error.

    Wraps the provider's own code (e.g. 'network', 'timeout', 'http_429')
    so callers can branch on it.
    """

    def __init__(
        self,
        code: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize with the provider's error detail.

        Args:
            code: Provider error code.
            reason: Provider error message.
            status_code: Optional HTTP status reported by the provider.
        """
        details: dict[str, Any] = {"code": code, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(f"Provider error: {code}: {reason}", "PROVIDER_ERROR", details)

    @property
    def code(self) -> str:
        """Provider error code."""
        return self.details["code"]
