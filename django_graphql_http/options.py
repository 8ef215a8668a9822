"""
Options resolution for GraphQL views.

A view is configured either with a static options object (``OptionsConfig``
or a plain dict) or with a function computing options from the request.
Both are wrapped in an options provider exposing ``resolve(request)``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Optional, Union

from graphql import GraphQLSchema

from .conf import get_settings
from .errors import ConfigurationError

# camelCase aliases accepted in dict options
_OPTION_ALIASES = {
    "rootValue": "root_value",
    "contextValue": "context_value",
    "formatError": "format_error",
}


@dataclass(frozen=True)
class OptionsConfig:
    """Per-request view options.

    Attributes:
        schema: The GraphQL schema (graphql-core or graphene) to serve.
        root_value: Root value passed to the executor.
        pretty: Indent JSON output. ``None`` uses the project setting.
        graphiql: Allow the GraphiQL page. ``None`` uses the project setting.
        context_value: Context passed to resolvers. Defaults to the request.
        middleware: Graphene/graphql-core middleware passed to the executor.
        format_error: Callable turning an error into an ``ErrorEntry``.
    """

    schema: Any = None
    root_value: Any = None
    pretty: Optional[bool] = None
    graphiql: Optional[bool] = None
    context_value: Any = None
    middleware: Optional[list[Any]] = None
    format_error: Optional[Callable[[BaseException], Any]] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OptionsConfig":
        valid_fields = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in valid_fields:
                raise ConfigurationError(f"Unknown GraphQL view option '{key}'.")
            values[name] = value
        return cls(**values)


Options = Union[OptionsConfig, Mapping[str, Any], Callable[[Any], Any]]


def _default_schema() -> Any:
    from graphene_django.settings import graphene_settings

    return graphene_settings.SCHEMA


def _unwrap_schema(schema: Any) -> Any:
    # graphene.Schema wraps the graphql-core schema
    graphql_schema = getattr(schema, "graphql_schema", None)
    if isinstance(graphql_schema, GraphQLSchema):
        return graphql_schema
    return schema


def _finalize(options_data: Any) -> OptionsConfig:
    if isinstance(options_data, OptionsConfig):
        options = options_data
    elif isinstance(options_data, Mapping):
        options = OptionsConfig.from_mapping(options_data)
    else:
        raise ConfigurationError(
            "GraphQL view option function must return an options object."
        )

    schema = options.schema
    if schema is None:
        schema = _default_schema()
    if not schema:
        raise ConfigurationError("GraphQL view options must contain a schema.")
    schema = _unwrap_schema(schema)
    if not isinstance(schema, GraphQLSchema):
        raise ConfigurationError(
            f"GraphQL view schema must be a GraphQL schema, got {type(schema).__name__}."
        )

    project_settings = get_settings()
    return replace(
        options,
        schema=schema,
        pretty=project_settings.pretty if options.pretty is None else bool(options.pretty),
        graphiql=(
            project_settings.graphiql if options.graphiql is None else bool(options.graphiql)
        ),
    )


class StaticConfig:
    """Options fixed for the lifetime of the process, validated up front."""

    def __init__(self, options: Union[OptionsConfig, Mapping[str, Any]]):
        self._options = options
        # Fail before serving
        _finalize(options)

    def resolve(self, request: Any) -> OptionsConfig:
        return _finalize(self._options)


class ComputedConfig:
    """Options computed per request by a user supplied function."""

    def __init__(self, function: Callable[[Any], Any]):
        self._function = function

    def resolve(self, request: Any) -> OptionsConfig:
        return _finalize(self._function(request))


OptionsProvider = Union[StaticConfig, ComputedConfig]


def as_options_provider(options: Any) -> OptionsProvider:
    """Wrap raw options in the matching provider."""
    if isinstance(options, (StaticConfig, ComputedConfig)):
        return options
    if not options:
        raise ConfigurationError("GraphQL view requires options.")
    if callable(options) and not isinstance(options, (OptionsConfig, Mapping)):
        return ComputedConfig(options)
    return StaticConfig(options)


def resolve_options(options: Any, request: Any) -> OptionsConfig:
    """Resolve options of any accepted shape for ``request``."""
    return as_options_provider(options).resolve(request)


__all__ = [
    "OptionsConfig",
    "StaticConfig",
    "ComputedConfig",
    "as_options_provider",
    "resolve_options",
]
