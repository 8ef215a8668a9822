import pytest
from django.apps import apps
from django.test.utils import override_settings

from django_graphql_http.conf import GraphQLHTTPSettings, get_settings
from django_graphql_http.defaults import LIBRARY_DEFAULTS
from django_graphql_http.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_defaults_match_library_defaults():
    with override_settings(GRAPHQL_HTTP={}):
        resolved = get_settings()

    for key, value in LIBRARY_DEFAULTS.items():
        assert getattr(resolved, key) == value


def test_project_settings_override_defaults():
    with override_settings(GRAPHQL_HTTP={"pretty": True, "graphiql_version": "2.4.7"}):
        resolved = get_settings()

    assert resolved.pretty is True
    assert resolved.graphiql_version == "2.4.7"
    assert resolved.graphiql is False


def test_unknown_keys_are_ignored_with_a_warning(caplog):
    with override_settings(GRAPHQL_HTTP={"prety": True}):
        resolved = get_settings()

    assert resolved.pretty is False
    assert "prety" in caplog.text


def test_settings_must_be_a_dict():
    with override_settings(GRAPHQL_HTTP=["pretty"]):
        with pytest.raises(ConfigurationError):
            get_settings()


def test_validate_rejects_non_boolean_flags():
    with pytest.raises(ConfigurationError, match="graphiql"):
        GraphQLHTTPSettings(graphiql="yes").validate()


def test_validate_accepts_defaults():
    GraphQLHTTPSettings().validate()


def test_app_ready_raises_invalid_settings_in_debug():
    app_config = apps.get_app_config("django_graphql_http")

    with override_settings(DEBUG=True, GRAPHQL_HTTP={"pretty": "yes"}):
        with pytest.raises(ConfigurationError, match="pretty"):
            app_config.ready()


def test_app_ready_logs_invalid_settings_outside_debug(caplog):
    app_config = apps.get_app_config("django_graphql_http")

    with override_settings(DEBUG=False, GRAPHQL_HTTP={"pretty": "yes"}):
        app_config.ready()

    assert "Invalid GraphQL HTTP configuration" in caplog.text
