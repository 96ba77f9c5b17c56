"""Exceptions raised while interpreting GraphQL responses.

Every exception here describes a completed HTTP exchange whose content is
unusable. Transport failures (DNS, connection, TLS, timeout) are not wrapped
and propagate as whatever the transport raised.
"""

from typing import Any


class GraphQLError(Exception):
    """Base exception for GraphQL response errors."""

    def __init__(
        self,
        message: str = "",
        errors: list[dict[str, Any]] | None = None,
        code: int = 0,
        data: Any = None,
    ):
        self.message = message
        self.errors = errors or []
        self.code = code
        # Partial data sent alongside errors, if any
        self.data = data
        super().__init__(message)


class InvalidResponseError(GraphQLError):
    """The response body is not JSON, or has neither `data` nor `errors`."""


class AuthenticationError(GraphQLError):
    """Credentials were missing or rejected (HTTP 401/403).

    `code` is always 401. The status actually received is in `status_code`.
    """

    DEFAULT_MESSAGE = "You must be authenticated to make this request."

    def __init__(self, message: str = DEFAULT_MESSAGE, status_code: int = 401):
        super().__init__(message, code=401)
        self.status_code = status_code


class NotFoundError(GraphQLError):
    """The server reported a specific field as not found."""

    def __init__(self, field: str, errors: list[dict[str, Any]] | None = None, data: Any = None):
        super().__init__(f"Field {field} not found.", errors=errors, data=data)
        self.field = field


class QueryError(GraphQLError):
    """The server reported any other GraphQL-level error."""
