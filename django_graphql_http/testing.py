"""
Testing helpers for django-graphql-http.

This module provides small helpers for building requests against GraphQL
views and decoding their responses in unit/integration tests.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from asgiref.sync import async_to_sync
from django.test import RequestFactory
from django.test.utils import override_settings

from .defaults import SETTINGS_NAME


def _normalize_headers(headers: Optional[Mapping[str, str]]) -> dict[str, str]:
    if not headers:
        return {}
    normalized: dict[str, str] = {}
    for key, value in headers.items():
        if not key:
            continue
        name = key.replace("-", "_").upper()
        if name not in {"CONTENT_TYPE", "CONTENT_LENGTH"} and not name.startswith("HTTP_"):
            name = f"HTTP_{name}"
        normalized[name] = value
    return normalized


def build_request(
    path: str = "/graphql/",
    method: str = "POST",
    *,
    query: Optional[Mapping[str, Any]] = None,
    data: Optional[Any] = None,
    body: Optional[str] = None,
    content_type: str = "application/json",
    headers: Optional[Mapping[str, str]] = None,
):
    """
    Build a Django request for a GraphQL view.

    Args:
        path: Request path
        method: HTTP method
        query: URL query string parameters
        data: Body payload, JSON encoded unless ``body`` is given
        body: Raw body text
        content_type: Content type of the body
        headers: Extra headers, e.g. ``{"Accept": "text/html"}``
    """
    rf = RequestFactory()
    method_upper = method.upper()
    request_headers = _normalize_headers(headers)
    if query:
        path = f"{path}?{urlencode(query)}"

    if body is None and data is not None:
        body = json.dumps(data) if content_type == "application/json" else urlencode(data)

    if method_upper == "GET" and body is None:
        return rf.get(path, **request_headers)
    return rf.generic(
        method_upper,
        path,
        data=body or "",
        content_type=content_type,
        **request_headers,
    )


def call_view(view, request):
    """Run an async GraphQL view to completion from synchronous code."""

    async def _call():
        return await view(request)

    return async_to_sync(_call)()


def decode_json_response(response) -> dict[str, Any]:
    return json.loads(response.content.decode("utf-8"))


@contextmanager
def override_graphql_http_settings(**kwargs):
    """Override ``GRAPHQL_HTTP`` settings for the duration of the block."""
    with override_settings(**{SETTINGS_NAME: kwargs}):
        yield
