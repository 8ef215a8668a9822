"""
Rendering of the GraphiQL page.

The page is pre-filled with the last query, its variables and its result so
the requester can edit and re-run them against the same endpoint.
"""

import json
from typing import Any, Optional

from django.core.serializers.json import DjangoJSONEncoder
from django.http import HttpRequest
from django.template import loader

from .conf import get_settings


def _to_pretty_json(value: Any) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value, cls=DjangoJSONEncoder, indent=2)


def render_graphiql(
    query: Optional[str] = None,
    variables: Optional[dict[str, Any]] = None,
    result: Optional[dict[str, Any]] = None,
    request: Optional[HttpRequest] = None,
    **extra_context: Any,
) -> str:
    """
    Render the GraphiQL HTML page.

    Args:
        query: The query to pre-fill the editor with
        variables: Variables to pre-fill the variables editor with
        result: The response payload (``{"data": ..., "errors": ...}``) or ``None``
        request: The current request, made available to the template

    Returns:
        A self-contained HTML document
    """
    settings = get_settings()
    context = {
        "graphiql_version": settings.graphiql_version,
        "query": query or "",
        "variables": _to_pretty_json(variables),
        "result": _to_pretty_json(result),
        **extra_context,
    }
    template = loader.get_template(settings.graphiql_template)
    return template.render(context, request)
