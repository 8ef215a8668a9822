"""
Error formatting and response rendering.

Errors are converted to ``ErrorEntry`` records before they reach the client,
and the terminal pipeline result is rendered either as JSON or as the
GraphiQL page.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from graphql import GraphQLError

from .graphiql import render_graphiql
from .negotiation import HTML_MEDIA_TYPE, JSON_MEDIA_TYPE

if TYPE_CHECKING:
    from .options import OptionsConfig
    from .params import QueryParams
    from .pipeline.context import PipelineResult

COMPACT_SEPARATORS = (",", ":")
PRETTY_INDENT = 2


@dataclass(frozen=True)
class ErrorEntry:
    """A failure in the form reported to clients."""

    message: str
    locations: Optional[list[dict[str, int]]] = None
    path: Optional[list[Any]] = None
    extensions: Optional[dict[str, Any]] = None
    raw: Any = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message}
        if self.locations:
            payload["locations"] = self.locations
        if self.path:
            payload["path"] = self.path
        if self.extensions:
            payload["extensions"] = self.extensions
        return payload


def format_error(error: Any) -> ErrorEntry:
    """Convert an exception (or an already formatted error) to an ``ErrorEntry``."""
    if isinstance(error, ErrorEntry):
        return error
    if isinstance(error, GraphQLError):
        formatted = error.formatted
        return ErrorEntry(
            message=formatted["message"],
            locations=formatted.get("locations"),
            path=formatted.get("path"),
            extensions=formatted.get("extensions"),
            raw=error.original_error or error,
        )
    message = getattr(error, "message", None) or str(error)
    return ErrorEntry(message=str(message), raw=error)


def format_errors(errors: list[Any], formatter=None) -> list[ErrorEntry]:
    formatter = formatter or format_error
    entries = []
    for error in errors:
        entry = formatter(error)
        if isinstance(entry, dict):
            entry = ErrorEntry(
                message=str(entry.get("message", "")),
                locations=entry.get("locations"),
                path=entry.get("path"),
                extensions=entry.get("extensions"),
                raw=error,
            )
        entries.append(entry)
    return entries


def _json_dumps_params(pretty: bool) -> dict[str, Any]:
    if pretty:
        return {"indent": PRETTY_INDENT}
    return {"separators": COMPACT_SEPARATORS}


def render_json_response(result: "PipelineResult", pretty: bool = False) -> JsonResponse:
    return JsonResponse(
        result.to_dict(),
        status=result.status_code,
        content_type=JSON_MEDIA_TYPE,
        json_dumps_params=_json_dumps_params(pretty),
    )


def render_graphiql_response(
    result: "PipelineResult",
    params: Optional["QueryParams"],
    request: Optional[HttpRequest] = None,
) -> HttpResponse:
    html = render_graphiql(
        query=params.query if params else None,
        variables=params.variables if params else None,
        result=None if result.is_empty else result.to_dict(),
        request=request,
    )
    return HttpResponse(
        html,
        status=result.status_code,
        content_type=f"{HTML_MEDIA_TYPE}; charset=utf-8",
    )


def render_response(
    result: "PipelineResult",
    params: Optional["QueryParams"],
    options: Optional["OptionsConfig"],
    request: Optional[HttpRequest] = None,
) -> HttpResponse:
    """
    Render the terminal pipeline result.

    Args:
        result: The pipeline result, with formatted errors
        params: Extracted GraphQL params, ``None`` if extraction never ran
        options: Resolved view options
        request: The Django request, passed to the GraphiQL template

    Returns:
        An HTML response when GraphiQL is shown, a JSON response otherwise
    """
    if result.show_graphiql:
        response = render_graphiql_response(result, params, request)
    else:
        pretty = bool(options.pretty) if options is not None else False
        response = render_json_response(result, pretty=pretty)
    for name, value in result.headers.items():
        response[name] = value
    return response
