"""
Default configuration for django-graphql-http.

Projects override any of these keys through the ``GRAPHQL_HTTP`` dict in
their Django settings. Options passed to a view take precedence over both.
"""

from __future__ import annotations

from typing import Any

SETTINGS_NAME = "GRAPHQL_HTTP"

DEFAULT_GRAPHIQL_VERSION = "3.0.6"
DEFAULT_GRAPHIQL_TEMPLATE = "django_graphql_http/graphiql.html"

LIBRARY_DEFAULTS: dict[str, Any] = {
    # Response formatting
    "pretty": False,
    # Interactive page
    "graphiql": False,
    "graphiql_version": DEFAULT_GRAPHIQL_VERSION,
    "graphiql_template": DEFAULT_GRAPHIQL_TEMPLATE,
    # Error handling
    "mask_internal_errors": True,
    "log_client_errors": False,
    "enable_sentry_integration": False,
}

BOOLEAN_SETTINGS = (
    "pretty",
    "graphiql",
    "mask_internal_errors",
    "log_client_errors",
    "enable_sentry_integration",
)


def merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``overrides`` without mutating either."""
    merged = dict(base)
    merged.update(overrides or {})
    return merged
