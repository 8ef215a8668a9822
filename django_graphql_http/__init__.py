"""
django-graphql-http: serve a GraphQL schema over HTTP from Django.

Usage:
    from django.urls import path
    from django_graphql_http import graphql_http

    urlpatterns = [
        path("graphql/", graphql_http({"schema": schema, "graphiql": True})),
    ]
"""

from .errors import (
    BodyDecodeError,
    ConfigurationError,
    GraphQLHTTPError,
    InvalidVariablesError,
    MethodNotAllowedError,
    MissingQueryError,
    OperationNotAllowedError,
)
from .options import ComputedConfig, OptionsConfig, StaticConfig, resolve_options
from .views import GraphQLHTTPView, graphql_http

__version__ = "0.1.0"

__all__ = [
    "graphql_http",
    "GraphQLHTTPView",
    "OptionsConfig",
    "StaticConfig",
    "ComputedConfig",
    "resolve_options",
    "ConfigurationError",
    "GraphQLHTTPError",
    "MethodNotAllowedError",
    "BodyDecodeError",
    "InvalidVariablesError",
    "MissingQueryError",
    "OperationNotAllowedError",
]
