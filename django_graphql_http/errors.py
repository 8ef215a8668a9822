"""
Exceptions raised while serving GraphQL over HTTP.

Every request-level failure carries the HTTP status it maps to and any
response headers it requires, so the pipeline can turn it into a terminal
result without guessing.
"""

from typing import Optional

from django.core.exceptions import ImproperlyConfigured


class ConfigurationError(ImproperlyConfigured):
    """Raised when the view options are missing or malformed."""


class GraphQLHTTPError(Exception):
    """Base exception for failures reported to the client with an HTTP status."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.headers = dict(headers or {})
        super().__init__(self.message)


class MethodNotAllowedError(GraphQLHTTPError):
    """Raised for any HTTP method other than GET or POST."""

    status_code = 405
    default_message = "GraphQL only supports GET and POST requests."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"Allow": "GET, POST"})


class BodyDecodeError(GraphQLHTTPError):
    """Raised when the request body cannot be decoded."""

    status_code = 400
    default_message = "POST body sent invalid JSON."


class InvalidVariablesError(GraphQLHTTPError):
    """Raised when ``variables`` is a string that is not a JSON object."""

    status_code = 400
    default_message = "Variables are invalid JSON."


class MissingQueryError(GraphQLHTTPError):
    """Raised when no query was supplied and GraphiQL will not be shown."""

    status_code = 400
    default_message = "Must provide query string."


class OperationNotAllowedError(GraphQLHTTPError):
    """Raised when a GET request selects a mutation or subscription."""

    status_code = 405

    def __init__(self, operation_kind: str):
        self.operation_kind = operation_kind
        super().__init__(
            f"Can only perform a {operation_kind} operation from a POST request.",
            headers={"Allow": "POST"},
        )


def get_error_status(error: BaseException, default: int = 500) -> int:
    """Return the HTTP status an exception describes, or ``default``."""
    if isinstance(error, GraphQLHTTPError):
        return error.status_code
    for attribute in ("status_code", "status"):
        status = getattr(error, attribute, None)
        if isinstance(status, int) and 400 <= status < 600:
            return status
    return default


__all__ = [
    "ConfigurationError",
    "GraphQLHTTPError",
    "MethodNotAllowedError",
    "BodyDecodeError",
    "InvalidVariablesError",
    "MissingQueryError",
    "OperationNotAllowedError",
    "get_error_status",
]
