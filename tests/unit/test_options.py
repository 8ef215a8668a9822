"""
Unit tests for view options resolution.
"""

import graphene
import pytest
from graphql import GraphQLSchema

from django_graphql_http.errors import ConfigurationError
from django_graphql_http.options import (
    ComputedConfig,
    OptionsConfig,
    StaticConfig,
    as_options_provider,
    resolve_options,
)
from django_graphql_http.testing import build_request, override_graphql_http_settings

pytestmark = pytest.mark.unit


class Query(graphene.ObjectType):
    ping = graphene.String()

    def resolve_ping(root, info):
        return "pong"


schema = graphene.Schema(query=Query)


def test_static_dict_options_are_converted():
    options = resolve_options({"schema": schema, "rootValue": {"a": 1}}, build_request())

    assert isinstance(options, OptionsConfig)
    assert isinstance(options.schema, GraphQLSchema)
    assert options.schema is schema.graphql_schema
    assert options.root_value == {"a": 1}


def test_options_config_is_accepted_directly():
    config = OptionsConfig(schema=schema.graphql_schema, pretty=True, graphiql=True)

    options = resolve_options(config, build_request())

    assert options.pretty is True
    assert options.graphiql is True


def test_function_options_are_called_with_the_request():
    seen = []

    def options_for(request):
        seen.append(request)
        return {"schema": schema, "root_value": request.path}

    request = build_request(path="/api/graphql/")
    options = resolve_options(options_for, request)

    assert seen == [request]
    assert options.root_value == "/api/graphql/"


def test_as_options_provider_picks_variant():
    assert isinstance(as_options_provider({"schema": schema}), StaticConfig)
    assert isinstance(as_options_provider(lambda request: {"schema": schema}), ComputedConfig)


def test_missing_options_fail():
    with pytest.raises(ConfigurationError, match="requires options"):
        as_options_provider(None)


def test_static_options_are_validated_up_front():
    with pytest.raises(ConfigurationError, match="must contain a schema"):
        StaticConfig({"pretty": True})


@pytest.mark.parametrize("returned", [None, "schema", 42])
def test_option_function_must_return_an_options_object(returned):
    provider = ComputedConfig(lambda request: returned)

    with pytest.raises(ConfigurationError, match="must return an options object"):
        provider.resolve(build_request())


def test_unknown_option_keys_fail():
    with pytest.raises(ConfigurationError, match="Unknown GraphQL view option 'shcema'"):
        resolve_options({"shcema": schema}, build_request())


def test_non_schema_values_fail():
    with pytest.raises(ConfigurationError, match="must be a GraphQL schema"):
        resolve_options({"schema": object()}, build_request())


def test_schema_defaults_to_graphene_setting(monkeypatch):
    monkeypatch.setattr(
        "django_graphql_http.options._default_schema", lambda: schema
    )

    options = resolve_options({"pretty": False}, build_request())

    assert options.schema is schema.graphql_schema


def test_unset_flags_fall_back_to_project_settings():
    with override_graphql_http_settings(pretty=True, graphiql=True):
        options = resolve_options({"schema": schema}, build_request())
    assert options.pretty is True
    assert options.graphiql is True

    explicit = resolve_options({"schema": schema, "graphiql": False}, build_request())
    assert explicit.graphiql is False
    assert explicit.pretty is False
