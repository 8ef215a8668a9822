"""
Extraction of GraphQL parameters from the query string and request body.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidVariablesError


@dataclass(frozen=True)
class QueryParams:
    """GraphQL parameters of a single request."""

    query: Optional[str] = None
    variables: Optional[dict[str, Any]] = None
    operation_name: Optional[str] = None
    raw: bool = False


def _first_value(query_params: Mapping[str, Any], body: Mapping[str, Any], name: str) -> Any:
    # The query string overrides the body unless its value is empty
    return query_params.get(name) or body.get(name)


def parse_variables(variables: Any) -> Optional[dict[str, Any]]:
    """Decode ``variables`` when it was sent as JSON text."""
    if not variables or not isinstance(variables, str):
        return variables or None
    try:
        decoded = json.loads(variables)
    except ValueError:
        raise InvalidVariablesError()
    if decoded is not None and not isinstance(decoded, dict):
        raise InvalidVariablesError()
    return decoded


def has_raw_flag(query_params: Mapping[str, Any], body: Mapping[str, Any]) -> bool:
    """``raw`` is a presence flag in either the query string or the body."""
    return "raw" in query_params or "raw" in body


def extract_params(query_params: Mapping[str, Any], body: Mapping[str, Any]) -> QueryParams:
    """
    Build ``QueryParams`` from the URL query string and the decoded body.

    Args:
        query_params: The request's query string (``request.GET``)
        body: The decoded request body

    Returns:
        The extracted parameters

    Raises:
        InvalidVariablesError: If a string ``variables`` is not a JSON object
    """
    return QueryParams(
        query=_first_value(query_params, body, "query"),
        variables=parse_variables(_first_value(query_params, body, "variables")),
        operation_name=_first_value(query_params, body, "operationName"),
        raw=has_raw_flag(query_params, body),
    )
